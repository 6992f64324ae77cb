"""Pattern-triggered text fixups applied after word selection.

A rule is a ``(pattern, transform)`` pair. The pattern is a regular
expression used only as a trigger; the transform receives the whole text
and returns the whole text, so it decides for itself what to rewrite.
"""

import re
from collections.abc import Callable, Iterator, Mapping

Transform = Callable[[str], str]


class WordExceptions:
    """Ordered set of fixup rules, applied as a sequential pipeline."""

    def __init__(self, rules: Mapping[str, Transform] | None = None):
        # dicts keep insertion order, which is the evaluation order
        self._rules: dict[str, Transform] = dict(rules or {})

    @classmethod
    def from_replacements(cls, replacements: Mapping[str, str]) -> "WordExceptions":
        """Build rules that ``re.sub`` each pattern with its replacement."""

        def _sub(pattern: str, replacement: str) -> Transform:
            return lambda text: re.sub(pattern, replacement, text)

        return cls({p: _sub(p, r) for p, r in replacements.items()})

    def apply(self, text: str) -> str:
        """Run every rule whose pattern is found in the current text."""
        for pattern, transform in self._rules.items():
            if re.search(pattern, text):
                text = transform(text)
        return text

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"WordExceptions({list(self._rules)!r})"

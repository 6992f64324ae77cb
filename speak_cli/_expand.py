"""Template expansion: ``%seg`` macros first, then ``%token`` placeholders.

Placeholders are ``%`` followed by lowercase letters and optional ``?``
marks (``%p?`` reads the same library as ``%p``). After each splice the
scan starts over from the beginning of the string, because the splice
shifts every offset after it.
"""

import logging
import re
from collections.abc import Sequence

from speak_cli._random import RandomSource, pick, roll
from speak_cli._text import splice
from speak_cli.libraries import Mood, Registry, SelectionContext, WordLibrary, apply_selection_rule

logger = logging.getLogger(__name__)

SEGMENT_MARKER = "%seg"
_SOFT_MARKER = "?"


def _scan_token(template: str, start: int) -> tuple[str, int]:
    """Read the token after the ``%`` at ``start``.

    Returns the library name (``?`` marks dropped) and the index one past
    the placeholder span.
    """
    cursor = start + 1
    name: list[str] = []
    while cursor < len(template):
        char = template[cursor]
        if "a" <= char <= "z":
            name.append(char)
        elif char != _SOFT_MARKER:
            break
        cursor += 1
    return "".join(name), cursor


def expand_tokens(
    template: str,
    stupidity: float,
    mood: Mood,
    libraries: Registry[WordLibrary],
    rng: RandomSource,
) -> str:
    """Replace every ``%token`` placeholder with a word from its library.

    With probability ``stupidity``% a placeholder ignores its token and
    draws from a random library instead.

    Raises:
        UnknownLibraryError: A token names no library.
    """
    # Bare "%" characters are literal; everything before floor is final text.
    floor = 0
    position = template.find("%", floor)
    while position != -1:
        name, end = _scan_token(template, position)
        if not name:
            floor = end
            position = template.find("%", floor)
            continue

        token: str | None = name
        if roll(rng, 1, 100) <= stupidity:
            logger.debug(f"Stupidity roll hit, ignoring token %{name}")
            token = None

        library = libraries.lookup(token, rng)
        ctx = SelectionContext(template=template, position=position, mood=mood, rng=rng)
        word = library.exceptions.apply(apply_selection_rule(library.rule, library.words, ctx))
        template = splice(template, position, end - position, word)
        position = template.find("%", floor)
    return template


def expand_segments(template: str, segments: Sequence[str], rng: RandomSource) -> str:
    """Replace ``%seg`` markers with random segment templates until none remain.

    Each marker gets its own draw. Segments containing ``%seg`` never
    terminate; the data has to rule that out.
    """
    while SEGMENT_MARKER in template:
        template = re.sub(re.escape(SEGMENT_MARKER), lambda _: pick(rng, segments), template)
    return template

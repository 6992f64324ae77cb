"""Small string helpers shared by the expander and the selection rules."""


def _last_index_of(text: str, char: str, from_index: int) -> int:
    """Index of ``char`` at or before ``from_index``, or -1."""
    from_index = max(from_index, 0)
    return text.rfind(char, 0, from_index + 1)


def get_last_word(text: str, position: int | None = None) -> str:
    """Return the space-delimited word right before ``position``.

    A missing, zero, or out-of-range position means "end of text".

    >>> get_last_word("the quick brown fox", 17)
    'brown'
    """
    if not position or position >= len(text):
        previous_space = len(text)
    else:
        previous_space = max(_last_index_of(text, " ", position - 1), 0)

    first_space = max(_last_index_of(text, " ", previous_space - 1), 0)
    return text[first_space:previous_space].strip()


def splice(text: str, index: int, count: int, replacement: str) -> str:
    """Replace ``count`` characters at ``index`` with ``replacement``."""
    return text[:index] + replacement + text[index + count:]

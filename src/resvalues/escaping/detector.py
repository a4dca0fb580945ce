"""Backslash escape detection."""


class EscapeIndexError(IndexError):
    """Raised when is_escaped() is asked about a position outside the text."""


def is_escaped(text: str, index: int) -> bool:
    """Check whether the character at a position is escaped.

    A character is escaped when the run of backslashes immediately before
    it has odd length. The character at ``index`` itself is never looked at,
    so ``index`` may also be ``len(text)``.

    Args:
        text: The text to inspect.
        index: Position of the character in question.

    Returns:
        True if the preceding backslash run has odd length.

    Raises:
        EscapeIndexError: If index is outside 0..len(text).
    """
    if index < 0 or index > len(text):
        raise EscapeIndexError(
            f"index {index} out of range for text of length {len(text)}"
        )

    count = 0
    i = index - 1
    while i >= 0 and text[i] == '\\':
        count += 1
        i -= 1

    return count % 2 == 1

"""Unescaping of resource text back into raw values."""

from .detector import is_escaped
from .escaper import WHITESPACE

# Backslash sequences that decode to something other than the escaped char
DECODED_ESCAPES = {
    "n": "\n",
    "t": "\t",
}

XML_ENTITIES = (
    ("&lt;", "<"),
    ("&amp;", "&"),
)


def unescape(text: str, resolve_entities: bool = False, trim: bool = True) -> str:
    """Convert resource text back into the raw value.

    Backslash escapes are always decoded: ``\\n`` and ``\\t`` become newline
    and tab, and a backslash before any other character yields that
    character. A trailing lone backslash is kept as is.

    With ``trim`` set, whitespace at the edges of the text is dropped (unless
    the last whitespace character is itself escaped) and unescaped double
    quotes delimit regions whose content is kept verbatim; the quotes are
    removed. Since the edges are taken from the original text and a quote is
    never whitespace, trimming only ever touches whitespace outside quotes.
    Without ``trim`` quotes are ordinary characters.

    Args:
        text: The resource text.
        resolve_entities: Decode ``&lt;`` and ``&amp;``.
        trim: Apply whitespace trimming and quote handling.

    Returns:
        The raw value.
    """
    n = len(text)
    if n == 0:
        return text

    start = 0
    end = n
    if trim:
        while start < end and text[start] in WHITESPACE:
            start += 1
        while end > start and text[end - 1] in WHITESPACE:
            end -= 1
        # Keep trailing whitespace that was escaped
        if end < n and is_escaped(text, end):
            end += 1

    result = []
    i = start
    while i < end:
        c = text[i]

        if c == '\\' and i + 1 < end:
            next_char = text[i + 1]
            result.append(DECODED_ESCAPES.get(next_char, next_char))
            i += 2
            continue

        if c == '"' and trim:
            # Bare quote: region delimiter, not content
            i += 1
            continue

        if c == '&' and resolve_entities:
            for entity, decoded in XML_ENTITIES:
                if text.startswith(entity, i, end):
                    result.append(decoded)
                    i += len(entity)
                    break
            else:
                result.append(c)
                i += 1
            continue

        result.append(c)
        i += 1

    return ''.join(result)

"""Escaping of raw values into resource text."""

# Characters treated as insignificant at the edges of resource text
WHITESPACE = " \t\n\r\f\v"

# A leading @ or ? would be read as a resource or theme reference
SIGILS = ("@", "?")

CHAR_ESCAPES = {
    "\\": "\\\\",
    "\n": "\\n",
    "\t": "\\t",
    "'": "\\'",
    '"': '\\"',
}

XML_ESCAPES = {
    "<": "&lt;",
    "&": "&amp;",
}


def escape(raw: str, escape_xml: bool = True) -> str:
    """Escape a raw value for use in a value resource file.

    Values with whitespace around real content are wrapped in double
    quotes, which keeps the whitespace and neutralizes a leading sigil.
    Everything else is escaped character by character.

    Args:
        raw: The raw value, as the application should see it.
        escape_xml: Whether to encode ``<`` and ``&`` as XML entities.

    Returns:
        The resource text.
    """
    if not raw:
        return ""

    stripped = raw.strip(WHITESPACE)
    if stripped and stripped != raw:
        return '"' + raw.replace("\\", "\\\\").replace('"', '\\"') + '"'

    parts = []
    if raw[0] in SIGILS:
        parts.append("\\")

    for c in raw:
        if c in CHAR_ESCAPES:
            parts.append(CHAR_ESCAPES[c])
        elif escape_xml and c in XML_ESCAPES:
            parts.append(XML_ESCAPES[c])
        else:
            parts.append(c)

    return "".join(parts)

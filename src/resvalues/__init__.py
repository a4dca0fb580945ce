"""Escaping and unescaping of Android value resource strings."""

from .escaping import EscapeIndexError, escape, is_escaped, unescape

__version__ = "0.1.0"

__all__ = ["EscapeIndexError", "escape", "is_escaped", "unescape"]

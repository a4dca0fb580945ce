"""Escaping and unescaping of resource string values."""

from .detector import EscapeIndexError, is_escaped
from .escaper import escape
from .unescaper import unescape

__all__ = ["EscapeIndexError", "escape", "is_escaped", "unescape"]

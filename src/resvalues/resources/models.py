"""Data models for resource values."""

from dataclasses import dataclass
from typing import Optional

from ..config import UnescapePolicy
from ..escaping import escape, is_escaped, unescape


@dataclass
class ResourceValue:
    """A resource value in both of its forms.

    Attributes:
        raw: The logical value an application sees.
        text: The escaped form stored in the resource file.
    """
    raw: str
    text: str

    @classmethod
    def from_raw(cls, raw: str, escape_xml: bool = True) -> "ResourceValue":
        """Create a value from its raw form.

        Args:
            raw: The raw value.
            escape_xml: Whether to encode ``<`` and ``&`` as entities.

        Returns:
            ResourceValue holding the escaped text.
        """
        return cls(raw=raw, text=escape(raw, escape_xml))

    @classmethod
    def from_text(
        cls,
        text: str,
        policy: Optional[UnescapePolicy] = None
    ) -> "ResourceValue":
        """Create a value from resource text.

        Args:
            text: The resource text.
            policy: Unescape policy. Defaults to trimming without entities.

        Returns:
            ResourceValue holding the unescaped raw value.
        """
        policy = policy or UnescapePolicy()
        return cls(raw=policy.apply(text), text=text)

    @property
    def quoted(self) -> bool:
        """True if the whole resource text is one double-quoted region."""
        text = self.text
        last = len(text) - 1
        if last < 1 or text[0] != '"' or text[last] != '"':
            return False
        if is_escaped(text, last):
            return False
        return all(
            is_escaped(text, i)
            for i in range(1, last)
            if text[i] == '"'
        )

    def round_trips(self, resolve_entities: bool = True) -> bool:
        """Check that unescaping the text gives back the raw value.

        Quoted text needs quote handling to drop its delimiters, so it is
        unescaped with trimming on; anything else with trimming off.
        """
        return unescape(self.text, resolve_entities, self.quoted) == self.raw

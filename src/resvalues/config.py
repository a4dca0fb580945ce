"""Configuration for resource value conversion."""

from dataclasses import dataclass

from .escaping import unescape


@dataclass(frozen=True)
class UnescapePolicy:
    """How resource text is turned back into a raw value.

    Attributes:
        resolve_entities: Decode ``&lt;`` and ``&amp;``.
        trim: Trim edge whitespace and treat bare double quotes as delimiters.
    """
    resolve_entities: bool = False
    trim: bool = True

    def apply(self, text: str) -> str:
        """Unescape text under this policy."""
        return unescape(text, self.resolve_entities, self.trim)


# Policies for the places a resource value can come from
POLICIES = {
    # Body of a text node, entities still encoded
    "text": UnescapePolicy(resolve_entities=True, trim=True),
    # Attribute value, already entity-decoded by the XML parser
    "attribute": UnescapePolicy(resolve_entities=False, trim=True),
    "raw": UnescapePolicy(resolve_entities=False, trim=False),
}


def get_policy(name: str) -> UnescapePolicy:
    """Get a named unescape policy.

    Args:
        name: Policy name (e.g., "text").

    Returns:
        The matching UnescapePolicy.

    Raises:
        ValueError: If no policy has that name.
    """
    try:
        return POLICIES[name]
    except KeyError:
        known = ", ".join(sorted(POLICIES))
        raise ValueError(f"Unknown policy '{name}' (expected one of: {known})") from None


@dataclass
class ConversionConfig:
    """Configuration for converting values on the command line.

    Attributes:
        escape_xml: Whether escaping encodes ``<`` and ``&`` as entities.
        encoding: Encoding used when writing output files.
    """
    escape_xml: bool = True
    encoding: str = "utf-8"

"""Reading and writing single values from files."""

import codecs
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Byte order marks that select a UTF-16 decode
UTF16_BOMS = (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)


def _candidate_encodings(data: bytes) -> tuple[str, ...]:
    """Encodings to try for file content, most likely first."""
    if data.startswith(UTF16_BOMS):
        return ('utf-16',)
    return ('utf-8', 'utf-16')


def read_value(path: Path, strip_final_newline: bool = False) -> str:
    """Read a file as a single value.

    UTF-16 is used when the file starts with a byte order mark, otherwise
    UTF-8 with UTF-16 as a fallback.

    Args:
        path: Path to the file.
        strip_final_newline: Drop one trailing line break, as left by
            most editors.

    Returns:
        File content as string.

    Raises:
        ValueError: If the content decodes under none of the encodings.
    """
    data = path.read_bytes()

    for encoding in _candidate_encodings(data):
        try:
            text = data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("%s is not valid %s", path, encoding)
            continue
        logger.debug("Read %s as %s", path, encoding)
        break
    else:
        raise ValueError(f"{path} is neither UTF-8 nor UTF-16 text")

    if strip_final_newline:
        if text.endswith('\r\n'):
            text = text[:-2]
        elif text.endswith('\n'):
            text = text[:-1]

    return text


def write_value(text: str, path: Path, encoding: str = 'utf-8') -> None:
    """Write a single value to a file, unchanged.

    Args:
        text: The value to write.
        path: Path to the output file.
        encoding: File encoding ('utf-8' or 'utf-16').
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if encoding == 'utf-16':
        path.write_bytes(text.encode('utf-16'))
    else:
        path.write_text(text, encoding='utf-8', newline='')

    logger.debug("Wrote %d characters to %s (%s)", len(text), path, encoding)

"""Line-ending conversion between CRLF and LF."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..errors import ValidationError

# Single byte per character, so every byte value survives the round trip
ENCODING = "latin-1"

CRLF = "\r\n"
LF = "\n"


@dataclass
class ConversionResult:
    """Summary of one conversion."""
    source: Path
    destination: Path
    replacements: int

    @property
    def changed(self) -> bool:
        return self.replacements > 0


def convert_text(text: str, reverse: bool = False) -> tuple[str, int]:
    """
    Convert line endings in a string.

    Returns:
        Tuple of (converted_text, replacement_count)
    """
    if not reverse:
        return text.replace(CRLF, LF), text.count(CRLF)

    # Normalise first so existing CRLF pairs are not doubled
    normalised = text.replace(CRLF, LF)
    bare = normalised.count(LF) - text.count(CRLF)
    return normalised.replace(LF, CRLF), bare


def convert_line_endings(
    file_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    reverse: bool = False,
) -> ConversionResult:
    """
    Rewrite a file with CRLF converted to LF (or LF to CRLF with reverse).

    The output defaults to overwriting the input.
    """
    source = Path(file_path)
    if not source.is_file():
        raise ValidationError(f"File not found: {source}")

    destination = Path(output_path) if output_path else source

    with open(source, "r", encoding=ENCODING, newline="") as f:
        text = f.read()

    converted, count = convert_text(text, reverse=reverse)

    with open(destination, "w", encoding=ENCODING, newline="") as f:
        f.write(converted)

    return ConversionResult(source=source, destination=destination, replacements=count)

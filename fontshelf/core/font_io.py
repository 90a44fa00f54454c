"""
Font I/O utilities for reading metadata out of font binaries.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from fontTools.ttLib import TTFont

# OS/2 fsSelection bits
FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_OBLIQUE = 1 << 9


@dataclass(frozen=True)
class FontMetadata:
    """Weight/style information declared inside a font file."""

    family_name: str | None
    weight_class: int | None
    italic: bool

    @property
    def style(self) -> str:
        return "italic" if self.italic else "normal"


@contextmanager
def open_font(path: Path) -> Iterator[TTFont]:
    """
    Context manager for read-only font access.

    Args:
        path: Path to a .ttf or .woff2 file

    Yields:
        TTFont instance (lazily loaded)
    """
    font = TTFont(path, lazy=True)
    try:
        yield font
    finally:
        font.close()


def read_font_metadata(path: Path) -> FontMetadata:
    """Read family name, usWeightClass and italic flags from a font."""
    with open_font(path) as font:
        family_name = font["name"].getBestFamilyName() if "name" in font else None

        weight_class = None
        italic = False
        if "OS/2" in font:
            os2 = font["OS/2"]
            weight_class = os2.usWeightClass
            italic = bool(os2.fsSelection & (FS_SELECTION_ITALIC | FS_SELECTION_OBLIQUE))
        elif "head" in font:
            italic = bool(font["head"].macStyle & 0b10)

    return FontMetadata(family_name, weight_class, italic)


def get_font_size_kb(path: Path) -> float:
    """Get font file size in kilobytes."""
    return path.stat().st_size / 1024

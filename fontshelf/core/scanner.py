"""
Family discovery.

Each immediate subdirectory of the input root is one family; sibling files
sharing a base name (e.g. Acme-Bold.ttf and Acme-Bold.woff2) form one variant.
"""

import re
from dataclasses import dataclass, field
from pathlib import Path

from fontshelf.config.paths import FONT_EXTENSIONS, FONT_FORMATS
from fontshelf.core.classify import classify

WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class FontPair:
    """Source filenames backing one variant, by format."""

    woff2: str | None = None
    ttf: str | None = None

    def get(self, fmt: str) -> str | None:
        return getattr(self, fmt)

    def present(self) -> list[tuple[str, str]]:
        """(format, filename) for each available file, woff2 first."""
        return [(fmt, name) for fmt in FONT_FORMATS if (name := self.get(fmt))]


@dataclass(frozen=True)
class Variant:
    """One weight/style of a family."""

    base: str
    weight: int
    style: str
    pair: FontPair


@dataclass(frozen=True)
class Family:
    """A font family discovered in the input tree."""

    key: str  # directory name; used for output paths
    variants: tuple[Variant, ...] = field(default_factory=tuple)

    @property
    def name(self) -> str:
        """Display name used in CSS and the manifest."""
        return sanitize_family_name(self.key)


def sanitize_family_name(name: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    return WHITESPACE.sub(" ", name).strip()


def group_font_files(filenames: list[str]) -> dict[str, FontPair]:
    """
    Group font filenames by base name.

    Hidden files and anything that is not .ttf/.woff2 (case-insensitive) are
    ignored. Groups keep the order their base names were first seen.

    Args:
        filenames: Bare filenames within one family directory

    Returns:
        Mapping of base name to its FontPair
    """
    groups: dict[str, dict[str, str]] = {}
    for filename in filenames:
        if filename.startswith("."):
            continue
        path = Path(filename)
        ext = path.suffix.lower()
        if ext not in FONT_EXTENSIONS:
            continue
        groups.setdefault(path.stem, {})[ext[1:]] = filename

    return {base: FontPair(**files) for base, files in groups.items()}


def scan_family(family_dir: Path) -> Family:
    """Build a Family from one directory of font files."""
    filenames = sorted(p.name for p in family_dir.iterdir() if p.is_file())
    variants = []
    for base, pair in group_font_files(filenames).items():
        weight, style = classify(base)
        variants.append(Variant(base=base, weight=weight, style=style, pair=pair))
    return Family(key=family_dir.name, variants=tuple(variants))


def scan_families(input_dir: Path) -> list[Family]:
    """
    Scan the input root for font families.

    Args:
        input_dir: Directory containing one subdirectory per family

    Returns:
        Families sorted by directory name

    Raises:
        FileNotFoundError: If input_dir does not exist
        NotADirectoryError: If input_dir is not a directory
    """
    family_dirs = sorted(
        (p for p in input_dir.iterdir() if p.is_dir()), key=lambda p: p.name
    )
    return [scan_family(family_dir) for family_dir in family_dirs]

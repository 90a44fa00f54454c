"""
Filename-based weight and style inference.

Font files rarely carry reliable metadata in their names, so the guesses here
are best-effort: a numeric weight token wins, then the first matching keyword
group, then the CSS defaults (400 / normal).
"""

import re
from enum import IntEnum


class Weight(IntEnum):
    """CSS font-weight values matching OpenType usWeightClass."""

    THIN = 100
    EXTRALIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    EXTRABOLD = 800
    BLACK = 900


NORMAL = "normal"
ITALIC = "italic"

# Keyword groups, checked in order; the first substring hit wins.
# Compound bold names must come before the plain "bold" group.
WEIGHT_KEYWORDS: tuple[tuple[tuple[str, ...], Weight], ...] = (
    (("thin", "hairline"), Weight.THIN),
    (
        (
            "extralight",
            "ultralight",
            "xlight",
            "extra-light",
            "ultra-light",
            "extra_light",
            "ultra_light",
            "lite",
            "light",
        ),
        Weight.LIGHT,
    ),
    (("book", "regular", "normal"), Weight.REGULAR),
    (("medium",), Weight.MEDIUM),
    (
        (
            "semibold",
            "demi",
            "demibold",
            "semi-bold",
            "demi-bold",
            "semi_bold",
            "demi_bold",
        ),
        Weight.SEMIBOLD,
    ),
    (
        (
            "extrabold",
            "ultrabold",
            "extra-bold",
            "ultra-bold",
            "extra_bold",
            "ultra_bold",
        ),
        Weight.EXTRABOLD,
    ),
    (("bold",), Weight.BOLD),
    (("heavy", "black"), Weight.BLACK),
)

NUMERIC_WEIGHT = re.compile(r"(?:^|[^0-9])([1-9]00)(?:[^0-9]|$)")
ITALIC_WORD = re.compile(r"\b(?:italic|oblique)\b", re.ASCII)
ITALIC_ABBREVIATION = re.compile(r"(?:^|[^a-z])it(?:[^a-z]|$)")


def guess_weight(base: str) -> int:
    """
    Infer a CSS font-weight from a font file's base name.

    Args:
        base: Filename without extension (e.g. "Acme-SemiBold")

    Returns:
        Weight in 100..900
    """
    match = NUMERIC_WEIGHT.search(base)
    if match:
        return int(match.group(1))

    lowered = base.lower()
    for keys, weight in WEIGHT_KEYWORDS:
        if any(key in lowered for key in keys):
            return int(weight)

    return int(Weight.REGULAR)


def guess_style(base: str) -> str:
    """Infer "italic" or "normal" from a font file's base name."""
    lowered = base.lower()
    if ITALIC_WORD.search(lowered):
        return ITALIC
    if ITALIC_ABBREVIATION.search(lowered):
        return ITALIC
    return NORMAL


def classify(base: str) -> tuple[int, str]:
    """Return the (weight, style) guess for a base name. Never fails."""
    return guess_weight(base), guess_style(base)

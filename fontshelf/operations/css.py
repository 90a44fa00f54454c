"""
@font-face stylesheet generation.

One stylesheet per family (css/<family>.css) plus css/all.css holding every
rule. Stylesheets live one level below the output root, so asset urls are
prefixed with "../".
"""

import posixpath
from pathlib import Path

from fontshelf.config.paths import ALL_CSS
from fontshelf.core.scanner import Family, Variant
from fontshelf.utils.logging import logger

# src format() keyword per file format, in src order
CSS_FORMATS = {
    "woff2": "woff2",
    "ttf": "truetype",
}


def escape_css_string(value: str) -> str:
    """Escape a value for a single-quoted CSS string literal."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def css_url(path: str) -> str:
    """Resolve an output-root-relative path from inside css/."""
    return posixpath.join("..", path)


def render_font_face(family_name: str, variant: Variant, paths: dict[str, str]) -> str:
    """
    Render one @font-face rule.

    Args:
        family_name: Display name used as font-family
        variant: Variant providing weight and style
        paths: Output-root-relative path per format

    Returns:
        CSS text, or "" if no paths are available
    """
    sources = [
        f"url('{escape_css_string(css_url(paths[fmt]))}') format('{keyword}')"
        for fmt, keyword in CSS_FORMATS.items()
        if paths.get(fmt)
    ]
    if not sources:
        return ""

    return (
        "@font-face {\n"
        f"  font-family: '{escape_css_string(family_name)}';\n"
        f"  src: {', '.join(sources)};\n"
        f"  font-weight: {variant.weight};\n"
        f"  font-style: {variant.style};\n"
        "  font-display: swap;\n"
        "}\n"
    )


class StylesheetWriter:
    """Accumulates per-family and combined @font-face rules for one build."""

    def __init__(self, css_dir: Path):
        self.css_dir = css_dir
        self._families: dict[str, list[str]] = {}
        self._all: list[str] = []

    def start_family(self, family: Family) -> None:
        self._families.setdefault(family.key, [])

    def add(self, family: Family, variant: Variant, paths: dict[str, str]) -> bool:
        """Append the rule for a variant; returns False if it had no files."""
        rule = render_font_face(family.name, variant, paths)
        if not rule:
            return False
        self._families.setdefault(family.key, []).append(rule)
        self._all.append(rule)
        return True

    def family_css(self, family_key: str) -> str:
        return "".join(self._families.get(family_key, []))

    @property
    def all_css(self) -> str:
        return "".join(self._all)

    def family_path(self, family_key: str) -> Path:
        return self.css_dir / f"{family_key}.css"

    def write_family(self, family_key: str) -> Path:
        """Write css/<family>.css (empty when the family has no rules)."""
        path = self.family_path(family_key)
        if path.name == ALL_CSS:
            logger.warning(
                f"Family '{family_key}' shares its stylesheet name with {ALL_CSS}; "
                "it will be replaced by the combined stylesheet"
            )
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.family_css(family_key), encoding="utf-8")
        return path

    def write_all(self) -> Path:
        path = self.css_dir / ALL_CSS
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.all_css, encoding="utf-8")
        return path

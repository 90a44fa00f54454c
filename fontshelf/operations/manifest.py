"""
fonts.json manifest generation.

The manifest is the contract read by the generated pages:

    [
      {
        "family": "Acme",
        "css": "css/Acme.css",
        "variants": [
          {"base": "Acme-Bold", "weight": 700, "style": "normal",
           "woff2": "files/Acme/Acme-Bold.woff2", "ttf": "files/Acme/Acme-Bold.ttf"}
        ]
      }
    ]
"""

import json
from pathlib import Path
from typing import Any

from fontshelf.config.paths import CSS_DIR, FONT_FORMATS, MANIFEST_NAME
from fontshelf.core.scanner import Family, Variant


def variant_entry(variant: Variant, paths: dict[str, str]) -> dict[str, Any]:
    """Manifest record for one variant; missing formats are null."""
    return {
        "base": variant.base,
        "weight": variant.weight,
        "style": variant.style,
        "woff2": paths.get("woff2"),
        "ttf": paths.get("ttf"),
    }


def manifest_entry(family: Family, variants: list[dict[str, Any]]) -> dict[str, Any]:
    """Manifest record for one family."""
    return {
        "family": family.name,
        "css": f"{CSS_DIR}/{family.key}.css",
        "variants": variants,
    }


def dump_manifest(entries: list[dict[str, Any]]) -> str:
    return json.dumps(entries, indent=2, ensure_ascii=False)


class ManifestWriter:
    """Collects family entries in scan order and writes fonts.json."""

    def __init__(self, output_dir: Path):
        self.path = output_dir / MANIFEST_NAME
        self.entries: list[dict[str, Any]] = []

    def add_family(self, family: Family, variants: list[dict[str, Any]]) -> None:
        self.entries.append(manifest_entry(family, variants))

    def write(self) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(dump_manifest(self.entries), encoding="utf-8")
        return self.path


def load_manifest(path: Path) -> list[dict[str, Any]]:
    """Read a previously written fonts.json."""
    return json.loads(path.read_text(encoding="utf-8"))


def manifest_asset_paths(entries: list[dict[str, Any]]) -> list[str]:
    """Every stylesheet and font path referenced by a manifest."""
    paths = []
    for entry in entries:
        paths.append(entry["css"])
        for variant in entry["variants"]:
            paths.extend(variant[fmt] for fmt in FONT_FORMATS if variant.get(fmt))
    return paths

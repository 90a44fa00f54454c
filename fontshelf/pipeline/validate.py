"""
Font and manifest validation.

Cross-checks filename guesses against the metadata stored in the font files,
and checks that every asset referenced by fonts.json exists.
"""

from pathlib import Path

from fontshelf.config.paths import MANIFEST_NAME
from fontshelf.core.context import BuildContext
from fontshelf.core.font_io import read_font_metadata
from fontshelf.core.scanner import Family, Variant, scan_families
from fontshelf.operations.manifest import load_manifest, manifest_asset_paths
from fontshelf.utils.logging import logger


def check_variant(family: Family, variant: Variant, family_dir: Path) -> bool:
    """
    Compare a variant's guessed weight/style with each of its font files.

    Mismatches are logged as warnings; only unreadable files fail the check.
    """
    success = True
    for _, filename in variant.pair.present():
        path = family_dir / filename
        try:
            meta = read_font_metadata(path)
        except Exception as e:
            logger.error(f"Failed to load font {family.key}/{filename}: {e}")
            success = False
            continue

        if meta.weight_class is not None and meta.weight_class != variant.weight:
            logger.warning(
                f"{family.key}/{filename}: filename suggests weight {variant.weight}, "
                f"usWeightClass is {meta.weight_class}"
            )
        if meta.style != variant.style:
            logger.warning(
                f"{family.key}/{filename}: filename suggests {variant.style}, "
                f"font flags say {meta.style}"
            )
        if meta.family_name and meta.family_name != family.name:
            logger.info(
                f"{family.key}/{filename}: internal family name is '{meta.family_name}'"
            )
    return success


def validate_fonts(ctx: BuildContext) -> bool:
    """Check every scanned source font; returns False if any failed to load."""
    families = scan_families(ctx.input_dir)
    success = True
    checked = 0
    for family in families:
        family_dir = ctx.input_dir / family.key
        for variant in family.variants:
            if not check_variant(family, variant, family_dir):
                success = False
            checked += 1

    logger.info(f"Checked {checked} variants in {len(families)} families")
    return success


def validate_manifest(ctx: BuildContext) -> bool:
    """Check that fonts.json exists and every path it references is present."""
    manifest_path = ctx.output_dir / MANIFEST_NAME
    if not manifest_path.exists():
        logger.error(f"Manifest not found: {manifest_path}")
        return False

    entries = load_manifest(manifest_path)
    missing = [
        rel for rel in manifest_asset_paths(entries) if not (ctx.output_dir / rel).is_file()
    ]
    for rel in missing:
        logger.error(f"Missing asset: {rel}")

    if missing:
        return False

    logger.info(f"Manifest OK: {len(entries)} families")
    return True

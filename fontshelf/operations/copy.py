"""
Font asset copying.

Copies source binaries into files/<family>/ under the output root.
"""

import shutil

from fontshelf.core.context import BuildContext
from fontshelf.core.font_io import get_font_size_kb
from fontshelf.core.scanner import FontPair
from fontshelf.utils.logging import logger


def copy_variant(ctx: BuildContext, family_key: str, pair: FontPair) -> dict[str, str]:
    """
    Copy the files of one variant into the output tree.

    Args:
        ctx: Build context
        family_key: Family directory name
        pair: Source filenames to copy

    Returns:
        Output-root-relative posix path per copied format ("woff2", "ttf")

    Raises:
        OSError: If a source file is missing or the destination is not writable
    """
    src_dir = ctx.input_dir / family_key
    out_dir = ctx.files_dir / family_key
    out_dir.mkdir(parents=True, exist_ok=True)

    copied: dict[str, str] = {}
    for fmt, filename in pair.present():
        target = out_dir / filename
        shutil.copyfile(src_dir / filename, target)
        logger.debug(f"Copied {family_key}/{filename} ({get_font_size_kb(target):.1f} KB)")
        copied[fmt] = ctx.relative(target)

    return copied


def copy_root_extras(ctx: BuildContext, names: tuple[str, ...]) -> list[str]:
    """
    Copy optional project-root files (CNAME, .nojekyll) into the output root.

    Missing or unreadable files are skipped.

    Returns:
        Names that were copied
    """
    copied = []
    for name in names:
        try:
            shutil.copyfile(ctx.project_root / name, ctx.output_dir / name)
        except OSError as e:
            logger.debug(f"Skipped {name}: {e}")
            continue
        copied.append(name)
    return copied

"""
Build pipeline orchestration.

Runs all build steps in order against a single BuildContext.
"""

import shutil
import sys
from collections.abc import Callable
from dataclasses import dataclass

from fontshelf.config.paths import ROOT_EXTRAS
from fontshelf.core.context import BuildContext
from fontshelf.core.scanner import Family, scan_families
from fontshelf.operations.copy import copy_root_extras, copy_variant
from fontshelf.operations.css import StylesheetWriter
from fontshelf.operations.manifest import ManifestWriter, variant_entry
from fontshelf.operations.pages import write_pages
from fontshelf.utils.logging import logger


@dataclass
class BuildResult:
    """Summary of one build run."""

    families: int = 0
    variants: int = 0
    files: int = 0


def clean_output(ctx: BuildContext) -> None:
    """Remove the output directory."""
    if ctx.output_dir.exists():
        logger.info(f"Removing {ctx.output_dir}/")
        shutil.rmtree(ctx.output_dir)
    else:
        logger.info(f"{ctx.output_dir}/ does not exist (skipped)")


class SiteBuild:
    """
    One build invocation.

    Holds the scanned families between steps; CSS and manifest buffers live
    only inside generate().
    """

    def __init__(self, ctx: BuildContext):
        self.ctx = ctx
        self.families: list[Family] = []
        self.result = BuildResult()

    def clean(self) -> None:
        clean_output(self.ctx)

    def prepare(self) -> None:
        """Create the output skeleton and copy root extras."""
        for directory in (self.ctx.output_dir, self.ctx.files_dir, self.ctx.css_dir):
            directory.mkdir(parents=True, exist_ok=True)

        copied = copy_root_extras(self.ctx, ROOT_EXTRAS)
        if copied:
            logger.info(f"Copied {', '.join(copied)}")

    def scan(self) -> None:
        self.families = scan_families(self.ctx.input_dir)
        variant_count = sum(len(f.variants) for f in self.families)
        logger.info(
            f"Found {len(self.families)} families, {variant_count} variants in {self.ctx.input_dir}/"
        )

    def generate(self) -> None:
        """Copy fonts and write per-family CSS, all.css and fonts.json."""
        stylesheets = StylesheetWriter(self.ctx.css_dir)
        manifest = ManifestWriter(self.ctx.output_dir)

        for family in self.families:
            stylesheets.start_family(family)
            entries = []
            for variant in family.variants:
                paths = copy_variant(self.ctx, family.key, variant.pair)
                if not stylesheets.add(family, variant, paths):
                    continue
                entries.append(variant_entry(variant, paths))
                self.result.files += len(paths)

            stylesheets.write_family(family.key)
            manifest.add_family(family, entries)
            self.result.families += 1
            self.result.variants += len(entries)
            logger.info(f"{family.name}: {len(entries)} variants")

        stylesheets.write_all()
        manifest.write()
        logger.info(f"Wrote {manifest.path}")

    def render(self) -> None:
        write_pages(self.ctx.output_dir, self.ctx.site)

    def steps(self) -> list[tuple[str, Callable[[], None]]]:
        return [
            ("clean", self.clean),
            ("prepare", self.prepare),
            ("scan", self.scan),
            ("generate", self.generate),
            ("render", self.render),
        ]


def run_build(ctx: BuildContext) -> BuildResult:
    """
    Run the full build, propagating any error.

    Args:
        ctx: Build context

    Returns:
        Build summary
    """
    build = SiteBuild(ctx)
    for _, func in build.steps():
        func()
    return build.result


def run_all(ctx: BuildContext) -> BuildResult:
    """
    Run all build steps in order, exiting with status 1 on the first failure.

    Build pipeline:
      1. clean     - Remove the output directory
      2. prepare   - Create files/ and css/, copy CNAME and .nojekyll
      3. scan      - Discover families and classify variants
      4. generate  - Copy fonts, write css/*.css and fonts.json
      5. render    - Write index.html and console/index.html

    Args:
        ctx: Build context
    """
    build = SiteBuild(ctx)
    steps = build.steps()

    logger.info("Running all build steps")
    for i, (name, func) in enumerate(steps, 1):
        logger.info(f"[{i}/{len(steps)}] Running {name}")
        try:
            func()
            logger.info(f"{name} completed")
        except Exception as e:
            logger.error(f"{name} failed: {e}")
            sys.exit(1)

    result = build.result
    logger.info(
        f"Build complete: {result.families} families, {result.variants} variants, {result.files} files"
    )
    return result

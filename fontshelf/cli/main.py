"""
Main CLI entry point for fontshelf.
"""

import sys
from dataclasses import replace
from pathlib import Path

import click

from fontshelf import __version__
from fontshelf.config.paths import DIST_DIR, INPUT_DIR
from fontshelf.config.site import DEFAULT_SITE
from fontshelf.core.context import BuildContext

input_option = click.option(
    "--input",
    "input_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=INPUT_DIR,
    show_default=True,
    envvar="FONTSHELF_INPUT",
    help="Directory with one subdirectory per font family.",
)

output_option = click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DIST_DIR,
    show_default=True,
    envvar="FONTSHELF_OUTPUT",
    help="Directory the site is written to (cleared on build).",
)


def make_context(
    input_dir: Path = INPUT_DIR,
    output_dir: Path = DIST_DIR,
    base_url: str | None = None,
) -> BuildContext:
    site = replace(DEFAULT_SITE, base_url=base_url) if base_url else DEFAULT_SITE
    return BuildContext(input_dir=input_dir, output_dir=output_dir, site=site)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Static font site builder."""
    pass


@cli.group()
def build():
    """Site build commands."""
    pass


@build.command()
@output_option
def clean(output_dir):
    """Remove the output directory."""
    from fontshelf.pipeline.runner import clean_output

    clean_output(make_context(output_dir=output_dir))


@build.command()
@input_option
def scan(input_dir):
    """List discovered families and their inferred weight/style."""
    from fontshelf.core.scanner import scan_families
    from fontshelf.utils.logging import logger

    try:
        families = scan_families(input_dir)
    except OSError as e:
        logger.error(f"Scan failed: {e}")
        sys.exit(1)

    for family in families:
        logger.info(f"{family.name} ({len(family.variants)} variants)")
        for variant in family.variants:
            formats = ", ".join(fmt for fmt, _ in variant.pair.present())
            logger.info(f"  {variant.base}: {variant.weight} {variant.style} [{formats}]")


@build.command()
@input_option
@output_option
@click.option(
    "--base-url",
    type=str,
    default=None,
    envvar="FONTSHELF_BASE_URL",
    help=f"Public URL used in copyable snippets. Defaults to {DEFAULT_SITE.base_url}.",
)
def all(input_dir, output_dir, base_url):
    """Run complete build pipeline."""
    from fontshelf.pipeline.runner import run_all

    run_all(make_context(input_dir, output_dir, base_url))


@cli.group()
def validate():
    """Validation commands."""
    pass


@validate.command()
@input_option
def fonts(input_dir):
    """Compare filename guesses with the metadata inside each font."""
    from fontshelf.pipeline.validate import validate_fonts
    from fontshelf.utils.logging import logger

    try:
        success = validate_fonts(make_context(input_dir=input_dir))
    except OSError as e:
        logger.error(f"Validation failed: {e}")
        sys.exit(1)
    if not success:
        sys.exit(1)


@validate.command()
@output_option
def manifest(output_dir):
    """Check that every asset listed in fonts.json exists."""
    from fontshelf.pipeline.validate import validate_manifest

    if not validate_manifest(make_context(output_dir=output_dir)):
        sys.exit(1)


if __name__ == "__main__":
    cli()

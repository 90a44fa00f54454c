"""
Static page rendering.

Both pages are plain HTML shells; everything they display is fetched from
fonts.json in the browser.
"""

from pathlib import Path

from jinja2 import Environment, PackageLoader, select_autoescape

from fontshelf.config.paths import CONSOLE_DIR, INDEX_PAGE, MANIFEST_NAME
from fontshelf.config.site import DEFAULT_SITE, SiteConfig
from fontshelf.utils.logging import logger

env = Environment(
    loader=PackageLoader("fontshelf", "templates"),
    autoescape=select_autoescape(["html"]),
    keep_trailing_newline=True,
)


def render_page(template_name: str, manifest_url: str, site: SiteConfig) -> str:
    template = env.get_template(template_name)
    return template.render(site=site, manifest_url=manifest_url)


def render_index(site: SiteConfig = DEFAULT_SITE) -> str:
    """Catalog page served from the output root."""
    return render_page("index.html", f"./{MANIFEST_NAME}", site)


def render_console(site: SiteConfig = DEFAULT_SITE) -> str:
    """Preview console served from console/, one level below the manifest."""
    return render_page("console.html", f"../{MANIFEST_NAME}", site)


def write_pages(output_dir: Path, site: SiteConfig = DEFAULT_SITE) -> list[Path]:
    """
    Write index.html and console/index.html.

    Args:
        output_dir: Output root
        site: Presentation settings

    Returns:
        Paths of the written pages
    """
    pages = [
        (output_dir / INDEX_PAGE, render_index(site)),
        (output_dir / CONSOLE_DIR / INDEX_PAGE, render_console(site)),
    ]
    for path, html in pages:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
        logger.info(f"Wrote {path}")
    return [path for path, _ in pages]

"""
Per-run build settings passed explicitly through every step.
"""

from dataclasses import dataclass, field
from pathlib import Path

from fontshelf.config.paths import (
    CSS_DIR,
    DIST_DIR,
    FILES_DIR,
    INPUT_DIR,
    PROJECT_ROOT,
)
from fontshelf.config.site import DEFAULT_SITE, SiteConfig


@dataclass(frozen=True)
class BuildContext:
    """Where to read fonts from, where to write the site, and how to render it."""

    input_dir: Path = INPUT_DIR
    output_dir: Path = DIST_DIR
    project_root: Path = PROJECT_ROOT  # source of CNAME / .nojekyll
    site: SiteConfig = field(default_factory=lambda: DEFAULT_SITE)

    @property
    def files_dir(self) -> Path:
        return self.output_dir / FILES_DIR

    @property
    def css_dir(self) -> Path:
        return self.output_dir / CSS_DIR

    def relative(self, path: Path) -> str:
        """Posix path of an output file relative to the output root."""
        return path.relative_to(self.output_dir).as_posix()

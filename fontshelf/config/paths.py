"""
Filesystem path constants for the site builder.

Centralizes path definitions to avoid magic strings in individual modules.
"""

from pathlib import Path

# Inputs, outputs and root extras resolve against the working directory
PROJECT_ROOT = Path(".")
INPUT_DIR = Path("data")
DIST_DIR = Path("dist")

# Output layout, relative to the output root
FILES_DIR = "files"
CSS_DIR = "css"
CONSOLE_DIR = "console"
ALL_CSS = "all.css"
MANIFEST_NAME = "fonts.json"
INDEX_PAGE = "index.html"

# Copied verbatim from the project root when present
ROOT_EXTRAS = ("CNAME", ".nojekyll")

# Font formats, in the order they appear in @font-face src lists
FONT_FORMATS = ("woff2", "ttf")
FONT_EXTENSIONS = tuple(f".{fmt}" for fmt in FONT_FORMATS)

"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen

from fontshelf.core.context import BuildContext

FS_SELECTION_REGULAR = 0x0040
FS_SELECTION_ITALIC = 0x0001
MAC_STYLE_ITALIC = 0b10


@pytest.fixture
def input_dir(tmp_path):
    """Empty input root."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def build_ctx(tmp_path, input_dir):
    """BuildContext writing into a temporary dist/ with its own project root."""
    project_root = tmp_path / "project"
    project_root.mkdir()
    return BuildContext(
        input_dir=input_dir,
        output_dir=tmp_path / "dist",
        project_root=project_root,
    )


@pytest.fixture
def font_tree(input_dir):
    """Create family directories holding placeholder font files."""

    def make(files: dict[str, list[str]]) -> Path:
        for family, names in files.items():
            family_dir = input_dir / family
            family_dir.mkdir(parents=True, exist_ok=True)
            for name in names:
                (family_dir / name).write_bytes(f"font data: {family}/{name}".encode())
        return input_dir

    return make


@pytest.fixture
def make_font():
    """Write a minimal, valid TrueType font."""

    def make(
        path: Path, family: str, style: str, weight: int, italic: bool = False
    ) -> Path:
        pen = TTGlyphPen(None)
        pen.moveTo((0, 0))
        pen.lineTo((0, 500))
        pen.lineTo((500, 500))
        pen.lineTo((500, 0))
        pen.closePath()

        fb = FontBuilder(1000, isTTF=True)
        fb.setupGlyphOrder([".notdef"])
        fb.setupCharacterMap({})
        fb.setupGlyf({".notdef": pen.glyph()})
        fb.setupMaxp()
        fb.setupHorizontalMetrics({".notdef": (500, 0)})
        fb.setupHorizontalHeader(ascent=800, descent=-200)
        fb.setupNameTable({"familyName": family, "styleName": style})
        fb.setupOS2(
            usWeightClass=weight,
            fsSelection=FS_SELECTION_ITALIC if italic else FS_SELECTION_REGULAR,
        )
        fb.setupPost()
        fb.updateHead(macStyle=MAC_STYLE_ITALIC if italic else 0)
        path.parent.mkdir(parents=True, exist_ok=True)
        fb.save(str(path))
        return path

    return make

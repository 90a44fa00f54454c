"""CLI tests using click's test runner."""

import json

import pytest
from click.testing import CliRunner

from fontshelf import __version__
from fontshelf.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_build_all(runner, tmp_path, font_tree):
    input_dir = font_tree({"Acme": ["Acme-Bold.ttf", "Acme-Bold.woff2"]})
    output_dir = tmp_path / "site"

    result = runner.invoke(
        cli,
        [
            "build",
            "all",
            "--input",
            str(input_dir),
            "--output",
            str(output_dir),
            "--base-url",
            "https://cdn.example.com",
        ],
    )

    assert result.exit_code == 0, result.output
    manifest = json.loads((output_dir / "fonts.json").read_text(encoding="utf-8"))
    assert manifest[0]["variants"][0]["weight"] == 700
    assert "https://cdn.example.com" in (output_dir / "index.html").read_text(encoding="utf-8")


def test_build_all_reads_environment(runner, tmp_path, font_tree):
    input_dir = font_tree({"Acme": ["Acme-Bold.ttf"]})
    output_dir = tmp_path / "env-site"

    result = runner.invoke(
        cli,
        ["build", "all"],
        env={"FONTSHELF_INPUT": str(input_dir), "FONTSHELF_OUTPUT": str(output_dir)},
    )

    assert result.exit_code == 0, result.output
    assert (output_dir / "css" / "Acme.css").is_file()


def test_build_all_missing_input_fails(runner, tmp_path):
    result = runner.invoke(
        cli,
        ["build", "all", "--input", str(tmp_path / "nope"), "--output", str(tmp_path / "out")],
    )
    assert result.exit_code == 1


def test_build_clean(runner, tmp_path):
    output_dir = tmp_path / "site"
    (output_dir / "css").mkdir(parents=True)

    result = runner.invoke(cli, ["build", "clean", "--output", str(output_dir)])

    assert result.exit_code == 0
    assert not output_dir.exists()


def test_build_scan(runner, font_tree):
    input_dir = font_tree({"Acme": ["Acme-Bold.ttf"]})
    result = runner.invoke(cli, ["build", "scan", "--input", str(input_dir)])
    assert result.exit_code == 0


def test_validate_manifest(runner, tmp_path, font_tree):
    input_dir = font_tree({"Acme": ["Acme-Bold.ttf", "Acme-Bold.woff2"]})
    output_dir = tmp_path / "site"
    runner.invoke(cli, ["build", "all", "--input", str(input_dir), "--output", str(output_dir)])

    ok = runner.invoke(cli, ["validate", "manifest", "--output", str(output_dir)])
    assert ok.exit_code == 0

    (output_dir / "files" / "Acme" / "Acme-Bold.woff2").unlink()
    broken = runner.invoke(cli, ["validate", "manifest", "--output", str(output_dir)])
    assert broken.exit_code == 1


def test_validate_manifest_without_build(runner, tmp_path):
    result = runner.invoke(cli, ["validate", "manifest", "--output", str(tmp_path / "none")])
    assert result.exit_code == 1


def test_validate_fonts(runner, input_dir, make_font):
    make_font(input_dir / "Acme" / "Acme-Bold.ttf", "Acme", "Bold", 700)
    result = runner.invoke(cli, ["validate", "fonts", "--input", str(input_dir)])
    assert result.exit_code == 0


def test_build_scan_missing_input_fails(runner, tmp_path):
    result = runner.invoke(cli, ["build", "scan", "--input", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_validate_fonts_missing_input_fails(runner, tmp_path):
    result = runner.invoke(cli, ["validate", "fonts", "--input", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)

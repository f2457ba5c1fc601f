from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from brandset.cli import app
from brandset.renderers.pdf.renderer import PdfRenderer

runner = CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "brandset.yaml"
    result = runner.invoke(app, ["init", "-o", str(path)])
    assert result.exit_code == 0, result.output
    return path


def test_init_refuses_to_overwrite(config_file):
    result = runner.invoke(app, ["init", "-o", str(config_file)])

    assert result.exit_code == 1
    assert "already exists" in result.output


def test_init_force_overwrites(config_file):
    config_file.write_text("garbage")

    result = runner.invoke(app, ["init", "-o", str(config_file), "--force"])

    assert result.exit_code == 0
    assert "cover:" in config_file.read_text()


def test_validate_default_config(config_file):
    result = runner.invoke(app, ["validate", str(config_file)])

    assert result.exit_code == 0, result.output
    assert "Configuration is valid!" in result.output
    assert "#E94845" in result.output
    assert "#F07F7D" in result.output


def test_validate_rejects_bad_color(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text('theme:\n  main_color: "not-a-color"\n')

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1
    assert "Configuration error" in result.output


def test_validate_rejects_bad_schema(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("metadata:\n  year: soon\n")

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 1


def test_info(docx_file):
    result = runner.invoke(app, ["info", str(docx_file)])

    assert result.exit_code == 0, result.output
    assert "Quarterly Report" in result.output
    assert "Alice" in result.output
    assert "Introduction" in result.output


def test_convert_renders_pdf(docx_file, config_file, tmp_path):
    out_dir = tmp_path / "dist"
    with patch.object(PdfRenderer, "render") as render:
        result = runner.invoke(
            app,
            [
                "convert",
                str(docx_file),
                "-c",
                str(config_file),
                "-o",
                str(out_dir),
                "--title",
                "Rapport Final",
                "--main-color",
                "0000FF",
                "--html",
            ],
        )

    assert result.exit_code == 0, result.output
    document, pdf_path = render.call_args.args
    assert pdf_path == out_dir / "Rapport Final.pdf"
    assert document.chapters[1].title == "Introduction"
    html = (out_dir / "Rapport Final.html").read_text(encoding="utf-8")
    assert "#0000FF" in html


def test_convert_uses_document_metadata_when_unset(docx_file, tmp_path):
    config = tmp_path / "empty.yaml"
    config.write_text("{}\n")
    out_dir = tmp_path / "dist"

    with patch.object(PdfRenderer, "render", autospec=True) as render:
        result = runner.invoke(app, ["convert", str(docx_file), "-c", str(config), "-o", str(out_dir)])

    assert result.exit_code == 0, result.output
    renderer, _, pdf_path = render.call_args.args
    assert pdf_path == out_dir / "Quarterly Report.pdf"
    assert renderer.config.metadata.title == "Quarterly Report"
    assert renderer.config.metadata.author == ["Alice"]


def test_convert_with_init_config_uses_document_title(docx_file, config_file, tmp_path):
    out_dir = tmp_path / "dist"
    with patch.object(PdfRenderer, "render") as render:
        result = runner.invoke(app, ["convert", str(docx_file), "-c", str(config_file), "-o", str(out_dir)])

    assert result.exit_code == 0, result.output
    _, pdf_path = render.call_args.args
    assert pdf_path == out_dir / "Quarterly Report.pdf"


def test_convert_missing_config(docx_file, tmp_path):
    result = runner.invoke(app, ["convert", str(docx_file), "-c", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "not found" in result.output

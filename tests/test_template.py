from datetime import date
from unittest.mock import patch

from brandset.config.loader import find_config_file, load_config
from brandset.renderers.pdf.renderer import PdfRenderer
from brandset.template import brand, load_body


def test_brand_returns_themed_html(sample_document):
    html = brand(
        sample_document,
        title="Rapport",
        subtitle="Premier trimestre",
        author=["Alice", "Bob"],
        main_color="0000FF",
        start_date=date(2026, 3, 1),
        cover={"title": {"size": "3em"}, "date": {"color": "00FF00"}},
    )

    assert "<title>Rapport</title>" in html
    assert "font-size: 3em" in html
    assert '<p class="subtitle" style="color: #0000FF;' in html
    assert '<p class="date" style="color: #00FF00;' in html
    assert "Alice<br/>Bob" in html


def test_brand_defaults_to_document_authors(sample_document):
    html = brand(sample_document, title="Rapport")

    assert "Doc Author" in html
    assert '<html lang="fr">' in html


def test_brand_accepts_font_mappings(sample_document):
    html = brand(
        sample_document,
        default_font={"name": "Base", "weight": "regular"},
        title_font={"name": "Display", "weight": "black"},
        author="Alice",
    )

    assert "font-family: &quot;Display&quot;" in html
    assert "font-family: &quot;Base&quot;" in html


def test_brand_writes_pdf_when_path_given(sample_document, tmp_path):
    with patch.object(PdfRenderer, "render", return_value="<html/>") as render, patch.object(
        PdfRenderer, "build"
    ) as build:
        result = brand(sample_document, tmp_path / "out.pdf", title="Rapport")

    assert render.call_args.args[1] == tmp_path / "out.pdf"
    assert result == "<html/>"
    build.assert_not_called()


def test_brand_accepts_single_highlight_word(sample_document):
    html = brand(sample_document, highlight="branded")

    assert html.count('class="highlight"') == 1
    assert '<span class="highlight">branded</span>' in html


def test_brand_defaults_to_document_title(sample_document):
    html = brand(sample_document)

    assert "<title>Report</title>" in html
    assert '<h1 class="title"' in html and ">Report</h1>" in html


def test_load_body_parses_docx(docx_file, sample_document):
    assert load_body(sample_document) is sample_document
    assert load_body(docx_file).metadata.title == "Quarterly Report"


def test_find_config_file_walks_up(tmp_path):
    (tmp_path / "brandset.yaml").write_text("theme:\n  main_color: '0000FF'\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    found = find_config_file(nested)

    assert found == (tmp_path / "brandset.yaml").resolve()
    assert load_config(found).theme.main_color == "0000FF"


def test_load_config_keeps_cover_overrides(tmp_path):
    path = tmp_path / "brandset.yaml"
    path.write_text("cover:\n  title:\n    size: 3em\n    shadow: soft\n")

    config = load_config(path)

    assert config.cover == {"title": {"size": "3em", "shadow": "soft"}}

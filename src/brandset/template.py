"""One-call entry point for branded documents."""

import logging
from datetime import date
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from brandset.config.defaults import DEFAULT_MAIN_COLOR
from brandset.config.models import BrandsetConfig, FontSpec, StyleMapping
from brandset.ir.document import Document
from brandset.parser.docx_parser import DocxParser
from brandset.renderers.pdf.renderer import PdfRenderer

logger = logging.getLogger(__name__)

FontInput = Union[FontSpec, Mapping[str, Any], None]


def load_body(body: Union[Document, str, Path], style_mapping: Optional[StyleMapping] = None) -> Document:
    """Accept an IR document or a path to a .docx file."""
    if isinstance(body, Document):
        return body
    return DocxParser(style_mapping).parse(body)


def brand(
    body: Union[Document, str, Path],
    output_path: Union[str, Path, None] = None,
    *,
    title: Optional[str] = None,
    subtitle: Optional[str] = None,
    author: Union[str, Sequence[str], None] = None,
    affiliation: Optional[str] = None,
    year: Optional[int] = None,
    class_label: Optional[str] = None,
    start_date: Optional[date] = None,
    last_updated: Optional[date] = None,
    logo: Union[str, Path, None] = None,
    main_color: str = DEFAULT_MAIN_COLOR,
    highlight: Union[str, Iterable[str]] = (),
    default_font: FontInput = None,
    body_font: FontInput = None,
    title_font: FontInput = None,
    code_font: FontInput = None,
    second_header: bool = False,
    lang: str = "fr",
    outline: Union[bool, str, None] = None,
    cover: Optional[Mapping[str, Any]] = None,
) -> str:
    """Render `body` with the title page and theme described by the arguments.

    Writes a PDF to `output_path` when given and returns the generated HTML.
    `title` and `author` fall back to what the source document declares.
    """
    document = load_body(body)
    if title is None:
        title = document.metadata.title
    if author is None:
        author = list(document.metadata.authors)

    metadata: dict[str, Any] = {
        "title": title,
        "subtitle": subtitle,
        "author": author if isinstance(author, str) else list(author),
        "affiliation": affiliation,
        "class_label": class_label,
        "start_date": start_date,
        "logo": logo,
    }
    if year is not None:
        metadata["year"] = year
    if last_updated is not None:
        metadata["last_updated"] = last_updated

    theme: dict[str, Any] = {
        "main_color": main_color,
        "highlight": [highlight] if isinstance(highlight, str) else list(highlight),
        "body_font": body_font,
        "title_font": title_font,
        "second_header": second_header,
        "lang": lang,
        "outline": outline,
    }
    if default_font is not None:
        theme["default_font"] = default_font
    if code_font is not None:
        theme["code_font"] = code_font

    config = BrandsetConfig(metadata=metadata, theme=theme, cover=dict(cover or {}))
    logger.debug("Branding %r with main color %s", title, main_color)
    renderer = PdfRenderer(config)

    if output_path is not None:
        return renderer.render(document, output_path)
    html_content, _ = renderer.build(document)
    return html_content

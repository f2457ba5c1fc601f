"""PDF renderer using WeasyPrint."""

import copy
import html
import logging
from pathlib import Path

from brandset.authors import normalize_authors
from brandset.config.models import BrandsetConfig
from brandset.highlight import apply_highlights
from brandset.ir.document import Document
from brandset.renderers.base import BaseRenderer
from brandset.renderers.pdf.body import BodyStyler
from brandset.renderers.pdf.decorations import DecorationRenderer
from brandset.renderers.pdf.fonts import FontSetup
from brandset.renderers.pdf.title_page import TitlePageRenderer
from brandset.resolver import ResolvedConfig, resolve
from brandset.theme import Theme

logger = logging.getLogger(__name__)


class PdfRenderer(BaseRenderer):
    """Render an IR Document to a branded PDF."""

    def __init__(self, config: BrandsetConfig | None = None):
        self.config = config or BrandsetConfig()
        self.font_config = None

    def get_extension(self) -> str:
        return ".pdf"

    def resolve(self) -> ResolvedConfig:
        theme_cfg = self.config.theme
        return resolve(
            self.config.cover,
            Theme.from_hex(theme_cfg.main_color),
            body_font=theme_cfg.resolved_body_font,
            title_font=theme_cfg.resolved_title_font,
        )

    def build(self, document: Document) -> tuple[str, str]:
        """Return the (html, css) pair for the document."""
        resolved = self.resolve()
        theme_cfg = self.config.theme
        meta = self.config.metadata
        authors, display = normalize_authors(meta.author)

        fonts = FontSetup(theme_cfg)
        title_page = TitlePageRenderer(meta, resolved, authors)
        body = BodyStyler(theme_cfg, resolved.theme)

        decorations = None
        if resolved.cover.get("decorations"):
            decorations = DecorationRenderer(resolved.theme)

        document = apply_highlights(copy.deepcopy(document), theme_cfg.highlight)

        head = self._head(meta.resolved_title, display, document)
        cover_html = title_page.render(decorations.render() if decorations else "")
        body_html = body.render(document)

        html_content = f"""<!DOCTYPE html>
<html lang="{html.escape(theme_cfg.lang)}">
{head}
<body>
    {cover_html}
    {body_html}
</body>
</html>"""

        css_parts = [fonts.css(), body.css(), title_page.css()]
        if decorations:
            css_parts.append(decorations.css())
        return html_content, "\n".join(css_parts)

    def _head(self, title: str, authors: str, document: Document) -> str:
        """Document metadata read by WeasyPrint into the PDF info."""
        meta_tags = [f"<title>{html.escape(title)}</title>"]
        if authors:
            author_list = authors.replace("\n", ", ")
            meta_tags.append(f'<meta name="author" content="{html.escape(author_list)}">')
        if document.metadata.description:
            meta_tags.append(
                f'<meta name="description" content="{html.escape(document.metadata.description)}">'
            )
        if document.metadata.keywords:
            keywords = ", ".join(document.metadata.keywords)
            meta_tags.append(f'<meta name="keywords" content="{html.escape(keywords)}">')
        meta_tags.append('<meta name="generator" content="brandset">')
        return "<head>\n    <meta charset=\"utf-8\">\n    " + "\n    ".join(meta_tags) + "\n</head>"

    def render(self, document: Document, output_path: str | Path) -> str:
        """Render document to PDF file and return the HTML it was rendered from."""
        # WeasyPrint loads Pango on import
        from weasyprint import CSS, HTML
        from weasyprint.text.fonts import FontConfiguration

        output_path = Path(output_path)
        html_content, css_content = self.build(document)
        if self.font_config is None:
            self.font_config = FontConfiguration()

        logger.info("Writing PDF to %s", output_path)
        html_doc = HTML(string=html_content, base_url=str(output_path.parent))
        css = CSS(string=css_content, font_config=self.font_config)

        html_doc.write_pdf(
            str(output_path),
            stylesheets=[css],
            font_config=self.font_config,
        )
        return html_content

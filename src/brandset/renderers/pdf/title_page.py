"""Cover page layout."""

import base64
import html
from datetime import date
from typing import Any, Optional

from brandset.config.models import MetadataConfig
from brandset.parser.docx_parser import detect_image_type
from brandset.renderers.pdf.fonts import css_family, css_weight
from brandset.resolver import ResolvedConfig
from brandset.theme import css_color


def element_style(spec: Any) -> str:
    """Inline CSS for one styled cover element."""
    if not isinstance(spec, dict):
        return ""
    rules = []
    if spec.get("color") is not None:
        rules.append(f"color: {css_color(spec['color'])}")
    if spec.get("weight") is not None:
        rules.append(f"font-weight: {css_weight(spec['weight'])}")
    if spec.get("size") is not None:
        rules.append(f"font-size: {spec['size']}")
    if spec.get("font") is not None:
        rules.append(f"font-family: {css_family(spec['font'])}")
    return "; ".join(rules)


class TitlePageRenderer:
    """Lay out the title page from metadata and the resolved cover."""

    def __init__(self, metadata: MetadataConfig, resolved: ResolvedConfig, authors: list[str]):
        self.metadata = metadata
        self.cover = resolved.cover
        self.authors = authors

    def render(self, decorations: str = "") -> str:
        meta = self.metadata
        cover = self.cover

        parts = []
        logo = self._logo()
        if logo:
            parts.append(logo)
        if meta.class_label:
            parts.append(f'<p class="class-label">{html.escape(meta.class_label)}</p>')

        parts.append(self._element("h1", "title", meta.resolved_title))
        if meta.subtitle:
            parts.append(self._element("p", "subtitle", meta.subtitle))

        date_line = self.date_line()
        if date_line:
            parts.append(self._element("p", "date", date_line))

        if self.authors:
            lines = "<br/>".join(html.escape(a) for a in self.authors)
            parts.append(
                f'<p class="author" style="{html.escape(element_style(cover.get("author")))}">{lines}</p>'
            )
        if meta.affiliation:
            parts.append(f'<p class="affiliation">{html.escape(meta.affiliation)}</p>')
        parts.append(f'<p class="year">{meta.year}</p>')

        block_style = f"padding: {cover.get('padding')}"
        if cover.get("bg") is not None:
            block_style += f"; background: {css_color(cover['bg'])}"

        return f"""
        <section class="title-page" style="{html.escape(block_style)}">
            {decorations}
            <div class="title-block">
                {"".join(parts)}
            </div>
        </section>
        """

    def _element(self, tag: str, key: str, content: str) -> str:
        style = html.escape(element_style(self.cover.get(key)))
        return f'<{tag} class="{key}" style="{style}">{html.escape(content)}</{tag}>'

    def date_line(self) -> Optional[str]:
        """Date text for the cover, or None when no start date is set."""
        start = self.metadata.start_date
        if start is None:
            return None
        date_spec = self.cover.get("date")
        if isinstance(date_spec, dict) and date_spec.get("range"):
            return f"{self._format(start)} – {self._format(self.metadata.last_updated)}"
        return self._format(start)

    def _format(self, value: date) -> str:
        return value.strftime(self.metadata.date_format)

    def _logo(self) -> str:
        logo = self.metadata.logo
        if logo is None:
            return ""
        if not logo.exists():
            raise FileNotFoundError(f"Logo not found: {logo}")
        data = logo.read_bytes()
        b64_data = base64.b64encode(data).decode("utf-8")
        return (
            f'<img class="logo" src="data:{detect_image_type(data)};base64,{b64_data}" alt=""/>'
        )

    def css(self) -> str:
        spacing = self.cover.get("spacing")
        return f"""
.title-page {{
    page: cover;
    page-break-after: always;
    position: relative;
    height: 100%;
    box-sizing: border-box;
}}

.title-page .title-block {{
    position: relative;
    padding-top: 35%;
}}

.title-page .title-block > * {{
    margin: 0 0 {spacing} 0;
}}

.title-page .title {{
    string-set: doc-title content();
}}

.title-page .logo {{
    max-height: 2.5cm;
    max-width: 6cm;
}}

.title-page .class-label {{
    text-transform: uppercase;
    letter-spacing: 0.1em;
}}
"""

"""Body HTML and print CSS."""

import base64
import html

from brandset.config.models import ThemeConfig
from brandset.highlight import build_pattern, split_text
from brandset.ir.document import Chapter, Document
from brandset.ir.nodes import HeadingNode, ImageNode, LinkNode, ListNode, Node, NodeType, TextNode, text
from brandset.theme import Theme

OUTLINE_TITLES = {
    "fr": "Sommaire",
    "en": "Contents",
    "de": "Inhaltsverzeichnis",
    "es": "Índice",
    "it": "Indice",
}

# Nodes rendered as a plain tag around their children
_SIMPLE_TAGS = {
    NodeType.PARAGRAPH: "p",
    NodeType.STRONG: "strong",
    NodeType.EMPHASIS: "em",
    NodeType.STRIKETHROUGH: "del",
    NodeType.SUPERSCRIPT: "sup",
    NodeType.SUBSCRIPT: "sub",
    NodeType.BLOCKQUOTE: "blockquote",
    NodeType.LIST_ITEM: "li",
    NodeType.TABLE: "table",
    NodeType.TABLE_ROW: "tr",
    NodeType.TABLE_CELL: "td",
    NodeType.CODE: "code",
}


class BodyStyler:
    """Render document chapters and the print stylesheet for the body."""

    def __init__(self, config: ThemeConfig, theme: Theme):
        self.config = config
        self.theme = theme
        self.pattern = build_pattern(config.highlight)

    def render(self, document: Document) -> str:
        outline = self.render_outline(document)
        chapters = "".join(self._render_chapter(c) for c in document.chapters)
        return outline + chapters

    def render_outline(self, document: Document) -> str:
        """Default outline, nothing when disabled, or the custom outline."""
        outline = self.config.outline
        if outline is False:
            return ""
        if outline is not None:
            paragraphs = "".join(
                f"<p>{html.escape(line)}</p>" for line in str(outline).splitlines() if line.strip()
            )
            return f'<section class="outline custom-outline">{paragraphs}</section>'

        entries = [
            f'<li><a href="#{c.id}">{html.escape(c.title)}</a></li>'
            for c in document.chapters
            if c.title
        ]
        if not entries:
            return ""
        heading = OUTLINE_TITLES.get(self.config.lang, OUTLINE_TITLES["en"])
        return f"""
        <section class="outline">
            <h2>{heading}</h2>
            <nav>
                <ol>
                    {"".join(entries)}
                </ol>
            </nav>
        </section>
        """

    def _render_chapter(self, chapter: Chapter) -> str:
        content = "\n".join(self.node_to_html(node) for node in chapter.content)

        title_html = ""
        if chapter.title:
            title_html = f'<h1 class="chapter-title">{self._render_title(chapter.title)}</h1>'

        return f"""
        <section class="chapter" id="{chapter.id}">
            {title_html}
            {content}
        </section>
        """

    def _render_title(self, title: str) -> str:
        if self.pattern is None:
            return html.escape(title)
        return "".join(self.node_to_html(n) for n in split_text(text(title), self.pattern))

    def node_to_html(self, node: Node) -> str:
        """Convert single IR node to HTML."""
        if isinstance(node, TextNode):
            return html.escape(node.text)
        if isinstance(node, ImageNode):
            return self._render_image(node)

        inner = self._render_children(node)
        tag = _SIMPLE_TAGS.get(node.node_type)
        if tag:
            return f"<{tag}>{inner}</{tag}>"

        match node.node_type:
            case NodeType.HEADING:
                level = node.level if isinstance(node, HeadingNode) else 2
                return f"<h{level}>{inner}</h{level}>"

            case NodeType.HIGHLIGHT:
                return f'<span class="highlight">{inner}</span>'

            case NodeType.LINK:
                if isinstance(node, LinkNode):
                    return f'<a href="{html.escape(node.url)}">{inner}</a>'
                return inner

            case NodeType.LIST:
                tag = "ol" if isinstance(node, ListNode) and node.ordered else "ul"
                return f"<{tag}>{inner}</{tag}>"

            case NodeType.CODE_BLOCK:
                return f"<pre><code>{inner}</code></pre>"

            case NodeType.HORIZONTAL_RULE:
                return "<hr/>"

            case NodeType.PAGE_BREAK:
                return '<div class="page-break"></div>'

            case _:
                return inner

    def _render_children(self, node: Node) -> str:
        return "".join(self.node_to_html(child) for child in node.children)

    def _render_image(self, node: ImageNode) -> str:
        if node.src:
            b64_data = base64.b64encode(node.src).decode("utf-8")
            src = f"data:{node.mime_type};base64,{b64_data}"
        else:
            src = node.filename

        alt = html.escape(node.alt_text or "")
        caption = ""
        if node.caption:
            caption = f"<figcaption>{html.escape(node.caption)}</figcaption>"
        return f'<figure><img src="{src}" alt="{alt}"/>{caption}</figure>'

    def css(self) -> str:
        """Print CSS: page rules, running headers and body typography."""
        cfg = self.config
        primary = self.theme.primary.to_css()
        secondary = self.theme.secondary.to_css()

        second_header = ""
        if cfg.second_header:
            second_header = """
    @top-right {
        content: string(chapter-title);
        font-size: 9pt;
        font-style: italic;
    }"""

        return f"""/* Print CSS */

@page {{
    size: {cfg.page_size};
    margin: {cfg.margin};

    @top-left {{
        content: string(doc-title);
        font-size: 9pt;
        color: {primary};
    }}
    {second_header}

    @bottom-center {{
        content: counter(page);
        font-size: 9pt;
    }}
}}

@page cover {{
    margin: 0;

    @top-left {{ content: none; }}
    @top-right {{ content: none; }}
    @bottom-center {{ content: none; }}
}}

body {{
    line-height: 1.45;
    text-align: justify;
    hyphens: auto;
}}

/* Outline */
.outline {{
    page-break-after: always;
}}

.outline h2 {{
    color: {primary};
}}

.outline ol {{
    list-style: none;
    padding: 0;
}}

.outline li {{
    margin: 0.5em 0;
}}

.outline a {{
    text-decoration: none;
    color: inherit;
}}

.outline a::after {{
    content: leader('.') target-counter(attr(href), page);
}}

/* Chapters */
.chapter {{
    page-break-before: always;
}}

.chapter-title {{
    font-size: 2em;
    color: {primary};
    border-bottom: 2pt solid {secondary};
    padding-bottom: 0.2em;
    string-set: chapter-title content();
}}

h1, h2, h3, h4, h5, h6 {{
    color: {primary};
    page-break-after: avoid;
    margin-top: 1.4em;
    margin-bottom: 0.5em;
}}

h2 {{ font-size: 1.4em; }}
h3 {{ font-size: 1.2em; }}
h4 {{ font-size: 1.1em; }}

p {{
    margin: 0 0 0.6em 0;
    widows: 2;
    orphans: 2;
}}

.highlight {{
    background-color: {secondary};
    padding: 0 0.15em;
}}

blockquote {{
    margin: 1em 0;
    padding-left: 1em;
    border-left: 3pt solid {secondary};
    font-style: italic;
}}

figure {{
    margin: 1.5em auto;
    text-align: center;
    page-break-inside: avoid;
}}

figure img {{
    max-width: 100%;
    height: auto;
}}

figcaption {{
    font-size: 0.9em;
    font-style: italic;
    margin-top: 0.5em;
}}

table {{
    width: 100%;
    border-collapse: collapse;
    margin: 1em 0;
    page-break-inside: avoid;
}}

td {{
    border: 0.5pt solid {secondary};
    padding: 0.4em 0.6em;
    text-align: left;
}}

code {{
    font-size: 0.9em;
}}

pre {{
    font-size: 0.85em;
    background-color: #F5F5F5;
    border-left: 3pt solid {primary};
    padding: 1em;
    page-break-inside: avoid;
    white-space: pre-wrap;
}}

a {{
    color: {primary};
    text-decoration: none;
}}

.page-break {{
    page-break-after: always;
}}

hr {{
    border: none;
    border-top: 0.5pt solid {secondary};
    margin: 2em auto;
    width: 30%;
}}

sup, sub {{
    font-size: 0.75em;
    line-height: 0;
}}
"""

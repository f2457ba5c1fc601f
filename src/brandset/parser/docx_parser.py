"""Word document parser."""

import logging
import re
from pathlib import Path
from typing import Optional

from docx import Document as DocxDocument
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph
from docx.text.run import Run

from brandset.config.models import StyleMapping
from brandset.ir.document import Chapter, Document, Metadata
from brandset.ir.nodes import (
    HeadingNode,
    ImageNode,
    Node,
    NodeType,
    TextNode,
    code_block,
    text,
)

logger = logging.getLogger(__name__)

_BLIP = "{http://schemas.openxmlformats.org/drawingml/2006/main}blip"


class DocxParser:
    """Parse Word documents into IR."""

    def __init__(self, style_mapping: Optional[StyleMapping] = None):
        self.style_mapping = style_mapping or StyleMapping()
        self.images: dict[str, bytes] = {}
        self.image_counter = 0

    def parse(self, file_path: str | Path) -> Document:
        """Parse a .docx file into IR Document."""
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        docx = DocxDocument(str(file_path))

        metadata = self._extract_metadata(docx, file_path)
        self._extract_images(docx)
        chapters = self._extract_chapters(docx)
        logger.info("Parsed %s: %d chapter(s), %d image(s)", file_path.name, len(chapters), len(self.images))

        return Document(metadata=metadata, chapters=chapters, images=self.images)

    def _extract_metadata(self, docx: DocxDocument, file_path: Path) -> Metadata:
        """Extract document metadata from core properties."""
        props = docx.core_properties

        return Metadata(
            title=props.title or file_path.stem,
            authors=[props.author] if props.author else [],
            language=props.language or None,
            description=props.comments or None,
            keywords=[k.strip() for k in props.keywords.split(",")] if props.keywords else [],
        )

    def _extract_images(self, docx: DocxDocument) -> None:
        """Collect embedded images keyed by relationship id."""
        for rel in docx.part.rels.values():
            if "image" in rel.reltype and not rel.is_external:
                self.images[rel.rId] = rel.target_part.blob

    def _extract_chapters(self, docx: DocxDocument) -> list[Chapter]:
        """Split document into chapters based on heading styles."""
        chapters: list[Chapter] = []
        current: Optional[Chapter] = None

        for element in docx.element.body:
            if element.tag == qn("w:p"):
                para = Paragraph(element, docx)
                style_name = para.style.name if para.style else "Normal"

                if self._matches(style_name, self.style_mapping.chapter_heading_styles):
                    if current:
                        chapters.append(current)
                    current = Chapter(
                        title=para.text.strip() or f"Chapter {len(chapters) + 1}",
                        level=self._heading_level(style_name),
                        id=f"chapter-{len(chapters) + 1}",
                    )
                    continue

                if self._matches(style_name, self.style_mapping.section_heading_styles):
                    node = self._parse_heading(para)
                else:
                    node = self._parse_paragraph(para)
                if node is None:
                    continue

                if current is None:
                    # Content before the first chapter heading
                    current = Chapter(title="", id=f"chapter-{len(chapters) + 1}")
                current.content.append(node)

            elif element.tag == qn("w:tbl"):
                node = self._parse_table(Table(element, docx))
                if current is None:
                    current = Chapter(title="", id=f"chapter-{len(chapters) + 1}")
                current.content.append(node)

        if current:
            chapters.append(current)

        return chapters or [Chapter(title="", id="chapter-1")]

    def _matches(self, style_name: str, patterns: list[str]) -> bool:
        style_lower = style_name.lower()
        return any(p.lower() in style_lower or style_lower in p.lower() for p in patterns)

    def _heading_level(self, style_name: str) -> int:
        """Extract heading level from style name."""
        match = re.search(r"(\d+)", style_name)
        if match:
            return min(max(int(match.group(1)), 1), 6)
        return 1

    def _parse_heading(self, para: Paragraph) -> HeadingNode:
        level = self._heading_level(para.style.name if para.style else "Heading 2")
        children = self._parse_runs(para.runs)
        return HeadingNode(
            node_type=NodeType.HEADING, level=level, children=children or [text(para.text)]
        )

    def _parse_paragraph(self, para: Paragraph) -> Optional[Node]:
        """Parse a paragraph into an IR node."""
        images = self._paragraph_images(para)
        if not para.text.strip():
            if not images:
                return None
            if len(images) == 1:
                return images[0]
            return Node(node_type=NodeType.PARAGRAPH, children=list(images))

        style_name = para.style.name if para.style else "Normal"
        if self._matches(style_name, self.style_mapping.code_styles):
            return code_block(para.text)

        children = self._parse_runs(para.runs)
        children.extend(images)

        if self._matches(style_name, self.style_mapping.blockquote_styles):
            return Node(node_type=NodeType.BLOCKQUOTE, children=children)

        return Node(node_type=NodeType.PARAGRAPH, children=children)

    def _parse_runs(self, runs: list[Run]) -> list[Node]:
        """Parse a list of runs into nodes."""
        nodes: list[Node] = []

        for run in runs:
            if not run.text:
                continue

            node: Node = TextNode(node_type=NodeType.TEXT, text=run.text)

            # Innermost first
            if run.italic:
                node = Node(node_type=NodeType.EMPHASIS, children=[node])
            if run.bold:
                node = Node(node_type=NodeType.STRONG, children=[node])
            if run.font.strike:
                node = Node(node_type=NodeType.STRIKETHROUGH, children=[node])
            if run.font.superscript:
                node = Node(node_type=NodeType.SUPERSCRIPT, children=[node])
            if run.font.subscript:
                node = Node(node_type=NodeType.SUBSCRIPT, children=[node])

            nodes.append(node)

        return nodes

    def _paragraph_images(self, para: Paragraph) -> list[ImageNode]:
        """Extract embedded images from a paragraph."""
        images: list[ImageNode] = []

        for blip in para._element.iter(_BLIP):
            embed_id = blip.get(qn("r:embed"))
            if not embed_id or embed_id not in self.images:
                continue
            self.image_counter += 1
            data = self.images[embed_id]
            mime_type = detect_image_type(data)
            images.append(
                ImageNode(
                    node_type=NodeType.IMAGE,
                    src=data,
                    mime_type=mime_type,
                    filename=f"image_{self.image_counter}.{mime_type.split('/')[-1]}",
                )
            )

        return images

    def _parse_table(self, table: Table) -> Node:
        rows: list[Node] = []
        for row in table.rows:
            cells = []
            for cell in row.cells:
                content = [n for n in (self._parse_paragraph(p) for p in cell.paragraphs) if n]
                cells.append(Node(node_type=NodeType.TABLE_CELL, children=content))
            rows.append(Node(node_type=NodeType.TABLE_ROW, children=cells))
        return Node(node_type=NodeType.TABLE, children=rows)


def detect_image_type(data: bytes) -> str:
    """Detect image MIME type from its leading bytes."""
    if data.startswith(b"\x89PNG"):
        return "image/png"
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if data.startswith(b"GIF"):
        return "image/gif"
    if data.startswith(b"RIFF") and b"WEBP" in data[:12]:
        return "image/webp"
    if data.lstrip().startswith((b"<svg", b"<?xml")):
        return "image/svg+xml"
    return "image/png"

"""Intermediate Representation node types."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class NodeType(Enum):
    """Types of nodes in the document IR."""

    # Block-level nodes
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    IMAGE = "image"
    TABLE = "table"
    TABLE_ROW = "table_row"
    TABLE_CELL = "table_cell"
    BLOCKQUOTE = "blockquote"
    LIST = "list"
    LIST_ITEM = "list_item"
    CODE_BLOCK = "code_block"
    HORIZONTAL_RULE = "horizontal_rule"
    PAGE_BREAK = "page_break"

    # Inline nodes
    TEXT = "text"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    HIGHLIGHT = "highlight"
    LINK = "link"
    CODE = "code"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    STRIKETHROUGH = "strikethrough"


@dataclass
class Node:
    """Base node in the IR tree."""

    node_type: NodeType
    children: list["Node"] = field(default_factory=list)
    attributes: dict = field(default_factory=dict)

    def get_text(self) -> str:
        """Recursively extract all text content from this node."""
        return "".join(child.get_text() for child in self.children)


@dataclass
class TextNode(Node):
    """Leaf node containing text content."""

    text: str = ""

    def __post_init__(self):
        self.node_type = NodeType.TEXT
        self.children = []

    def get_text(self) -> str:
        return self.text


@dataclass
class ImageNode(Node):
    """Image with source data and optional caption."""

    src: bytes = field(default_factory=bytes)
    mime_type: str = "image/png"
    alt_text: str = ""
    caption: Optional[str] = None
    filename: str = ""

    def __post_init__(self):
        self.node_type = NodeType.IMAGE
        self.children = []


@dataclass
class LinkNode(Node):
    """Hyperlink with URL."""

    url: str = ""

    def __post_init__(self):
        self.node_type = NodeType.LINK


@dataclass
class HeadingNode(Node):
    """Heading with level (1-6)."""

    level: int = 1

    def __post_init__(self):
        self.node_type = NodeType.HEADING


@dataclass
class ListNode(Node):
    """List (ordered or unordered)."""

    ordered: bool = False

    def __post_init__(self):
        self.node_type = NodeType.LIST


def paragraph(*children: Node) -> Node:
    """Helper to create a paragraph node."""
    return Node(node_type=NodeType.PARAGRAPH, children=list(children))


def text(content: str) -> TextNode:
    """Helper to create a text node."""
    return TextNode(node_type=NodeType.TEXT, text=content)


def strong(*children: Node) -> Node:
    return Node(node_type=NodeType.STRONG, children=list(children))


def highlight(*children: Node) -> Node:
    return Node(node_type=NodeType.HIGHLIGHT, children=list(children))


def code_block(content: str) -> Node:
    return Node(node_type=NodeType.CODE_BLOCK, children=[text(content)])


def heading(level: int, *children: Node) -> HeadingNode:
    """Helper to create a heading node."""
    return HeadingNode(node_type=NodeType.HEADING, level=level, children=list(children))

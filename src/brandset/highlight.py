"""Mark literal words in body text."""

import re
from typing import Iterable

from brandset.ir.document import Document
from brandset.ir.nodes import Node, NodeType, TextNode, highlight, text

# Text under these nodes is left as written
_SKIP_TYPES = {NodeType.CODE, NodeType.CODE_BLOCK, NodeType.HIGHLIGHT}


def build_pattern(words: Iterable[str]) -> re.Pattern | None:
    """Compile an alternation of the words, longest first."""
    unique = sorted({w for w in words if w}, key=len, reverse=True)
    if not unique:
        return None
    return re.compile("|".join(re.escape(w) for w in unique))


def split_text(node: TextNode, pattern: re.Pattern) -> list[Node]:
    """Split a text node around pattern matches."""
    parts: list[Node] = []
    pos = 0
    for match in pattern.finditer(node.text):
        if match.start() > pos:
            parts.append(text(node.text[pos:match.start()]))
        parts.append(highlight(text(match.group(0))))
        pos = match.end()
    if not parts:
        return [node]
    if pos < len(node.text):
        parts.append(text(node.text[pos:]))
    return parts


def _highlight_children(node: Node, pattern: re.Pattern) -> None:
    if node.node_type in _SKIP_TYPES:
        return
    new_children: list[Node] = []
    for child in node.children:
        if isinstance(child, TextNode):
            new_children.extend(split_text(child, pattern))
        else:
            _highlight_children(child, pattern)
            new_children.append(child)
    node.children = new_children


def apply_highlights(document: Document, words: Iterable[str]) -> Document:
    """Wrap every occurrence of `words` in the document's text in highlight nodes.

    The document is modified in place and returned.
    """
    pattern = build_pattern(words)
    if pattern is None:
        return document

    for chapter in document.chapters:
        content: list[Node] = []
        for node in chapter.content:
            if isinstance(node, TextNode):
                content.extend(split_text(node, pattern))
            else:
                _highlight_children(node, pattern)
                content.append(node)
        chapter.content = content
    return document

"""Intermediate Representation module."""

from brandset.ir.nodes import Node, NodeType, TextNode, ImageNode
from brandset.ir.document import Document, Chapter, Metadata

__all__ = ["Node", "NodeType", "TextNode", "ImageNode", "Document", "Chapter", "Metadata"]

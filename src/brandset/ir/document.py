"""Intermediate Representation document model."""

import re
from dataclasses import dataclass, field
from typing import Optional

from brandset.ir.nodes import Node


@dataclass
class Metadata:
    """Metadata read from the source document."""

    title: str = "Untitled"
    authors: list[str] = field(default_factory=list)
    language: Optional[str] = None
    description: Optional[str] = None
    keywords: list[str] = field(default_factory=list)


@dataclass
class Chapter:
    """A chapter in the document."""

    title: str
    level: int = 1  # Heading level (1-6)
    content: list[Node] = field(default_factory=list)
    id: str = ""  # For outline linking

    def __post_init__(self):
        if not self.id:
            self.id = self._slugify(self.title)

    def _slugify(self, text: str) -> str:
        """Convert text to URL-safe slug."""
        slug = text.lower()
        slug = re.sub(r"[^\w\s-]", "", slug)
        slug = re.sub(r"[\s_]+", "-", slug)
        slug = slug.strip("-")
        return slug or "chapter"


@dataclass
class Document:
    """Complete document IR."""

    metadata: Metadata = field(default_factory=Metadata)
    chapters: list[Chapter] = field(default_factory=list)
    images: dict[str, bytes] = field(default_factory=dict)  # id -> image data

    def get_all_content(self) -> list[Node]:
        """Get all content nodes in order."""
        all_nodes = []
        for chapter in self.chapters:
            all_nodes.extend(chapter.content)
        return all_nodes

    def word_count(self) -> int:
        """Estimate word count of the document."""
        return sum(len(node.get_text().split()) for node in self.get_all_content())

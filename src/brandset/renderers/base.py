"""Base renderer class."""

from abc import ABC, abstractmethod
from pathlib import Path

from brandset.ir.document import Document


def safe_stem(name: str, fallback: str) -> str:
    """Keep only filename-friendly characters."""
    stem = "".join(c for c in name if c.isalnum() or c in " -_").strip()
    return stem or fallback


class BaseRenderer(ABC):
    """Renderers turn an IR document into HTML/CSS and then into a file."""

    @abstractmethod
    def build(self, document: Document) -> tuple[str, str]:
        """Return the (html, css) pair for the document."""

    @abstractmethod
    def render(self, document: Document, output_path: str | Path) -> str:
        """Render document to output file and return the generated HTML."""

    @abstractmethod
    def get_extension(self) -> str:
        """Get the file extension for this renderer's output."""

    def output_path(self, output_dir: Path, name: str, fallback: str = "document") -> Path:
        return output_dir / f"{safe_stem(name, fallback)}{self.get_extension()}"

    def write_html(self, document: Document, output_path: str | Path) -> Path:
        """Write the intermediate HTML with its stylesheet inlined."""
        html_content, css_content = self.build(document)
        output_path = Path(output_path)
        styled = html_content.replace("</head>", f"<style>\n{css_content}\n</style>\n</head>", 1)
        output_path.write_text(styled, encoding="utf-8")
        return output_path

from pathlib import Path

import pytest
from docx import Document as DocxDocument
from docx.enum.style import WD_STYLE_TYPE

from brandset.ir.document import Chapter, Document, Metadata
from brandset.ir.nodes import code_block, heading, paragraph, strong, text

PNG_BYTES = (
    b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"
    b"\x1f\x15\xc4\x89\x00\x00\x00\rIDATx\x9cc\xf8\xff\xff?\x00\x05\xfe\x02\xfe\xa7V\xbd\xfa"
    b"\x00\x00\x00\x00IEND\xaeB`\x82"
)


@pytest.fixture
def sample_document() -> Document:
    return Document(
        metadata=Metadata(title="Report", authors=["Doc Author"]),
        chapters=[
            Chapter(
                title="Introduction",
                id="chapter-1",
                content=[
                    paragraph(text("Brandset makes "), strong(text("branded")), text(" reports.")),
                    heading(2, text("Scope")),
                    code_block("brandset convert report.docx"),
                ],
            ),
            Chapter(title="Results", id="chapter-2", content=[paragraph(text("All good."))]),
        ],
    )


@pytest.fixture
def docx_file(tmp_path: Path) -> Path:
    doc = DocxDocument()
    doc.core_properties.title = "Quarterly Report"
    doc.core_properties.author = "Alice"
    doc.core_properties.keywords = "finance, q3"
    doc.styles.add_style("Code", WD_STYLE_TYPE.PARAGRAPH)

    doc.add_paragraph("Preamble before any chapter.")
    doc.add_heading("Introduction", level=1)
    para = doc.add_paragraph("Plain and ")
    para.add_run("bold").bold = True
    para.add_run(" and ")
    para.add_run("italic").italic = True
    doc.add_heading("Details", level=2)
    doc.add_paragraph("print('hi')", style="Code")
    doc.add_paragraph("A wise quote.", style="Intense Quote")
    doc.add_heading("Results", level=1)
    table = doc.add_table(rows=1, cols=2)
    table.cell(0, 0).text = "Revenue"
    table.cell(0, 1).text = "42"
    doc.add_paragraph("")

    path = tmp_path / "report.docx"
    doc.save(str(path))
    return path


@pytest.fixture
def logo_file(tmp_path: Path) -> Path:
    path = tmp_path / "logo.png"
    path.write_bytes(PNG_BYTES)
    return path


@pytest.fixture
def weasyprint():
    try:
        import weasyprint
    except (ImportError, OSError) as e:
        pytest.skip(f"WeasyPrint unavailable: {e}")
    return weasyprint

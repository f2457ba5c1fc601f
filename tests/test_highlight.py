from brandset.highlight import apply_highlights, build_pattern, split_text
from brandset.ir.document import Chapter, Document
from brandset.ir.nodes import NodeType, code_block, paragraph, text


def _doc(*nodes) -> Document:
    return Document(chapters=[Chapter(title="One", content=list(nodes))])


def test_occurrences_become_highlight_nodes():
    doc = apply_highlights(_doc(paragraph(text("Use brandset, then brandset again."))), ["brandset"])

    children = doc.chapters[0].content[0].children
    assert [c.node_type for c in children] == [
        NodeType.TEXT,
        NodeType.HIGHLIGHT,
        NodeType.TEXT,
        NodeType.HIGHLIGHT,
        NodeType.TEXT,
    ]
    assert children[1].get_text() == "brandset"
    assert doc.chapters[0].content[0].get_text() == "Use brandset, then brandset again."


def test_matching_is_case_sensitive_and_literal():
    doc = apply_highlights(_doc(paragraph(text("Brandset costs $5 (a.b)"))), ["brandset", "(a.b)", "$5"])

    highlighted = [
        c.get_text() for c in doc.chapters[0].content[0].children if c.node_type == NodeType.HIGHLIGHT
    ]
    assert highlighted == ["$5", "(a.b)"]


def test_longest_word_wins():
    pattern = build_pattern(["brand", "brandset"])

    parts = split_text(text("brandset"), pattern)
    assert len(parts) == 1
    assert parts[0].node_type == NodeType.HIGHLIGHT
    assert parts[0].get_text() == "brandset"


def test_nested_text_is_highlighted():
    doc = _doc(paragraph(paragraph(text("deep brandset"))))
    apply_highlights(doc, ["brandset"])

    inner = doc.chapters[0].content[0].children[0]
    assert inner.children[1].node_type == NodeType.HIGHLIGHT


def test_code_is_not_highlighted():
    doc = apply_highlights(_doc(code_block("brandset convert")), ["brandset"])

    block = doc.chapters[0].content[0]
    assert [c.node_type for c in block.children] == [NodeType.TEXT]


def test_no_words_leaves_document_untouched():
    node = text("brandset")
    doc = _doc(paragraph(node))

    apply_highlights(doc, ["", ""])

    assert doc.chapters[0].content[0].children == [node]
    assert build_pattern([]) is None


def test_text_without_match_is_kept_as_is():
    node = text("nothing here")
    assert split_text(node, build_pattern(["brandset"])) == [node]

"""Tests for readscore.nodes.tables."""

from __future__ import annotations

import pytest

from readscore import ScoredDocument, is_data_table_candidate, mark_data_tables


def _table(doc: ScoredDocument, element_id: str):
    return doc.node(doc.soup.find(id=element_id))


@pytest.mark.parametrize(
    ("element_id", "expected"),
    [
        ("spans", False),
        ("with-header", True),
        ("presentation", False),
        ("opted-out", False),
        ("summarized", True),
        ("captioned", True),
        ("layout", False),
        ("inner", False),
        ("small", False),
        ("grid", True),
        ("wide", True),
        ("long", True),
    ],
)
def test_is_data_table_candidate(tables_doc: ScoredDocument, element_id: str, expected: bool) -> None:
    assert is_data_table_candidate(_table(tables_doc, element_id)) is expected


def test_mark_data_tables_sets_flags(tables_doc: ScoredDocument) -> None:
    assert mark_data_tables(tables_doc) == 6
    assert _table(tables_doc, "grid").is_data_table is True
    assert _table(tables_doc, "small").is_data_table is False


def test_flags_survive_scoring(tables_doc: ScoredDocument) -> None:
    mark_data_tables(tables_doc)
    grid = _table(tables_doc, "grid")
    grid.initialize_score(True)
    assert grid.is_data_table is True


def test_empty_caption_ignored() -> None:
    doc = ScoredDocument.from_html(
        '<table id="t"><caption></caption><tr><td>x</td></tr></table>',
    )
    assert is_data_table_candidate(_table(doc, "t")) is False


def test_document_without_tables() -> None:
    doc = ScoredDocument.from_html("<p>No tables here.</p>")
    assert mark_data_tables(doc) == 0

"""Shared pytest fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from readscore import ScoredDocument

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def _read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def article_html() -> str:
    return _read_fixture("article.html")


@pytest.fixture
def article_doc(article_html: str) -> ScoredDocument:
    return ScoredDocument.from_html(article_html)


@pytest.fixture
def tables_doc() -> ScoredDocument:
    return ScoredDocument.from_html(_read_fixture("tables.html"))

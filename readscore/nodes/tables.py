"""readscore.nodes.tables — Data-table classification.

Layout tables are scored like any other container, while data tables are kept
intact by the article assembler.  This step sets ``ScoredNode.is_data_table``;
scoring itself never touches the flag.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .document import ScoredDocument
    from .node import ScoredNode

logger = logging.getLogger(__name__)

# Any of these inside a table marks it as tabular data.
_DATA_TABLE_DESCENDANTS: tuple[str, ...] = ("col", "colgroup", "tfoot", "thead", "th")


def is_data_table_candidate(table: ScoredNode) -> bool:
    """Decide whether *table* holds tabular data rather than page layout."""
    if table.get_attribute("role") == "presentation":
        return False
    if table.get_attribute("datatable") == "0":
        return False
    if table.get_attribute("summary"):
        return True

    captions = table.find_all("caption")
    if captions and captions[0].children():
        return True

    if table.find_all(*_DATA_TABLE_DESCENDANTS):
        return True

    # Nested tables indicate a layout table.
    if table.find_all("table"):
        return False

    size = table.row_and_column_count()
    if size.rows >= 10 or size.columns > 4:
        return True
    return size.rows * size.columns > 10


def mark_data_tables(document: ScoredDocument) -> int:
    """Flag every ``<table>`` of *document*; return how many are data tables."""
    count = 0
    tables = document.elements("table")
    for table in tables:
        table.is_data_table = is_data_table_candidate(table)
        if table.is_data_table:
            count += 1
    logger.debug("Marked %d of %d tables as data tables", count, len(tables))
    return count

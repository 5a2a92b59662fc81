"""readscore - heuristic node scoring for readable-content extraction.

Quick usage::

    from readscore import ScoredDocument

    doc = ScoredDocument.from_html(html)
    for node in doc.initialize_scores("div", "p", "td"):
        if node.is_probably_visible() and node.link_density() < 0.25:
            print(node.tag_name, node.content_score)

Table semantics::

    from readscore import mark_data_tables

    mark_data_tables(doc)
    layout = [t for t in doc.elements("table") if not t.is_data_table]
"""

from readscore.nodes import (
    NodeKind,
    ParseError,
    RowColumnCount,
    ScoredDocument,
    ScoredNode,
    is_data_table_candidate,
    mark_data_tables,
)
from readscore.options import ScoringOptions

__version__ = "0.1.0"
__all__ = [
    "NodeKind",
    "ParseError",
    "RowColumnCount",
    "ScoredDocument",
    "ScoredNode",
    "ScoringOptions",
    "is_data_table_candidate",
    "mark_data_tables",
]

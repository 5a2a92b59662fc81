"""Node sub-package: per-node content scoring and structural classification."""

from .document import ParseError, ScoredDocument
from .node import NodeKind, RowColumnCount, ScoredNode
from .tables import is_data_table_candidate, mark_data_tables

__all__ = [
    "NodeKind",
    "ParseError",
    "RowColumnCount",
    "ScoredDocument",
    "ScoredNode",
    "is_data_table_candidate",
    "mark_data_tables",
]

"""readscore.options — Pydantic configuration model for document scoring."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, field_validator

_SUPPORTED_PARSERS: frozenset[str] = frozenset({"lxml", "html.parser"})


class ScoringOptions(BaseModel):
    """Options shared by every node of a :class:`ScoredDocument`.

    Attributes:
        weight_classes -- add class/id keyword weights to initial scores
        parser         -- BeautifulSoup tree builder used by ``from_html``
    """

    model_config = {"frozen": True}

    weight_classes: bool = True
    parser: str = "lxml"

    @field_validator("parser", mode="before")
    @classmethod
    def check_parser(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in _SUPPORTED_PARSERS:
            raise ValueError(f"unsupported parser {v!r}; use one of {sorted(_SUPPORTED_PARSERS)}")
        return v

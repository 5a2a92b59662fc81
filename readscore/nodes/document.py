"""readscore.nodes.document — BeautifulSoup-backed DOM adapter.

Usage::

    from readscore.nodes.document import ScoredDocument

    doc = ScoredDocument.from_html(html)
    for div in doc.initialize_scores("div", "p"):
        print(div.tag_name, div.content_score, div.link_density())

The document owns the parse tree and caches exactly one
:class:`~readscore.nodes.node.ScoredNode` per bs4 object, so score state
survives repeated lookups and lives as long as the document does.
"""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag
from bs4.element import PageElement

from readscore.options import ScoringOptions

from .node import ScoredNode

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when input cannot be turned into a document tree.

    Attributes:
        html_length -- length of the rejected input (0 if it was not text)
    """

    def __init__(self, message: str, html_length: int = 0) -> None:
        super().__init__(message)
        self.html_length = html_length


class ScoredDocument:
    """A parsed HTML tree plus the score state of its nodes."""

    def __init__(self, soup: BeautifulSoup, options: ScoringOptions | None = None) -> None:
        self.soup = soup
        self.options = options or ScoringOptions()
        # id() keys stay valid because each wrapper holds its bs4 object.
        self._nodes: dict[int, ScoredNode] = {}

    @classmethod
    def from_html(
        cls,
        html: str | bytes,
        options: ScoringOptions | None = None,
    ) -> ScoredDocument:
        """Parse *html* and return a new document.

        Raises:
            ParseError: *html* is not text or holds nothing but whitespace.
        """
        if not isinstance(html, (str, bytes)):
            raise ParseError(f"expected HTML text, got {type(html).__name__}")
        if not html.strip():
            raise ParseError("document is empty", html_length=len(html))

        options = options or ScoringOptions()
        soup = BeautifulSoup(html, options.parser)
        logger.debug("Parsed %d chars with %s", len(html), options.parser)
        return cls(soup, options)

    # ------------------------------------------------------------------
    # Node lookup
    # ------------------------------------------------------------------

    def node(self, obj: PageElement) -> ScoredNode:
        """Return the wrapper for *obj*, creating it on first use."""
        key = id(obj)
        wrapper = self._nodes.get(key)
        if wrapper is None:
            wrapper = ScoredNode(obj, self)
            self._nodes[key] = wrapper
        return wrapper

    @property
    def root(self) -> ScoredNode:
        return self.node(self.soup)

    @property
    def body(self) -> ScoredNode | None:
        body = self.soup.find("body")
        return self.node(body) if isinstance(body, Tag) else None

    def elements(self, *tag_names: str) -> list[ScoredNode]:
        """Elements matching *tag_names* (all elements if none given)."""
        matches = self.soup.find_all(list(tag_names) if tag_names else True)
        return [self.node(el) for el in matches]

    def initialize_scores(self, *tag_names: str) -> list[ScoredNode]:
        """Initialize every matching element with ``options.weight_classes``."""
        nodes = [
            node.initialize_score(self.options.weight_classes)
            for node in self.elements(*tag_names)
        ]
        logger.debug("Initialized %d node scores", len(nodes))
        return nodes

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def create_element(self, tag_name: str, text: str = "") -> ScoredNode:
        """Create a detached element owned by this document."""
        tag = self.soup.new_tag(tag_name)
        if text:
            tag.string = text
        return self.node(tag)

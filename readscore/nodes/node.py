"""readscore.nodes.node — Per-node scoring and classification.

:class:`ScoredNode` wraps one BeautifulSoup object (document, tag, or string)
and augments it with the score state the article assembler needs.  The wrapper
never owns tree structure: parent, children and attributes are always read
from the underlying bs4 object, and wrappers for neighbouring nodes come from
the owning :class:`~readscore.nodes.document.ScoredDocument`.

Every query here is total: missing attributes read as ``""`` and operations
that make no sense for a node kind answer ``False`` / ``0``.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import TYPE_CHECKING, NamedTuple

from bs4 import BeautifulSoup, Tag
from bs4.element import CData, NavigableString, PageElement, PreformattedString

from .patterns import (
    DISPLAY_NONE_RE,
    TRAILING_CONTENT_RE,
    is_unlikely,
    matches_negative,
    matches_positive,
    normalize_whitespace,
    strip_whitespace,
)

if TYPE_CHECKING:
    from .document import ScoredDocument

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

CLASS_WEIGHT = 25

_TAG_BASE_SCORES: dict[str, int] = {
    "div": 5,
    "pre": 3,
    "td": 3,
    "blockquote": 3,
    "address": -3,
    "ol": -3,
    "ul": -3,
    "dl": -3,
    "dd": -3,
    "dt": -3,
    "li": -3,
    "form": -3,
    "h1": -5,
    "h2": -5,
    "h3": -5,
    "h4": -5,
    "h5": -5,
    "h6": -5,
    "th": -5,
}

# Children that stop a <div> from being rewritten as a <p>.
DIV_TO_P_ELEMENTS: frozenset[str] = frozenset(
    {"a", "blockquote", "dl", "div", "img", "ol", "p", "pre", "table", "ul", "select"},
)

# canvas, iframe, svg and video are phrasing content too, but they tend to be
# dropped once wrapped into paragraphs, so they are left out.
PHRASING_ELEMENTS: frozenset[str] = frozenset(
    {
        "abbr", "audio", "b", "bdo", "br", "button", "cite", "code", "data",
        "datalist", "dfn", "em", "embed", "i", "img", "input", "kbd", "label",
        "mark", "math", "meter", "noscript", "object", "output", "progress", "q",
        "ruby", "samp", "script", "select", "small", "span", "strong", "sub",
        "sup", "textarea", "time", "var", "wbr",
    },
)

_PHRASING_WRAPPERS: frozenset[str] = frozenset({"a", "del", "ins"})

_SPAN_VALUE_RE = re.compile(r"\s*([+-]?\d+)")

# Blank-text checks leave NBSP in place; "&nbsp;" counts as content.
_TRIM_CHARS = " \t\n\r\0\x0b"


class NodeKind(StrEnum):
    DOCUMENT = "document"
    ELEMENT  = "element"
    TEXT     = "text"
    OTHER    = "other"      # comments, doctypes, processing instructions


class RowColumnCount(NamedTuple):
    rows: int
    columns: int


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def kind_of(obj: PageElement) -> NodeKind:
    """Classify a raw bs4 object.  ``BeautifulSoup`` is itself a ``Tag``."""
    if isinstance(obj, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(obj, Tag):
        return NodeKind.ELEMENT
    if isinstance(obj, NavigableString) and (
        isinstance(obj, CData) or not isinstance(obj, PreformattedString)
    ):
        return NodeKind.TEXT
    return NodeKind.OTHER


def _attribute(tag: Tag, name: str) -> str:
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return str(value)


def _span_value(raw: str) -> int:
    """Leading integer of a rowspan/colspan value, 0 when there is none."""
    match = _SPAN_VALUE_RE.match(raw)
    return int(match.group(1)) if match else 0


# ---------------------------------------------------------------------------
# ScoredNode
# ---------------------------------------------------------------------------

class ScoredNode:
    """Score state and heuristic queries for one DOM node.

    Obtain instances through :meth:`ScoredDocument.node` so that every lookup
    of the same bs4 object shares one score state.
    """

    def __init__(self, element: PageElement, document: ScoredDocument) -> None:
        self._element = element
        self._document = document
        self.kind = kind_of(element)
        self.content_score = 0
        self.initialized = False
        self.is_data_table = False

    def __repr__(self) -> str:
        label = self.tag_name or self.kind.value
        return f"<ScoredNode {label} score={self.content_score}>"

    # ------------------------------------------------------------------
    # Adapter accessors
    # ------------------------------------------------------------------

    @property
    def element(self) -> PageElement:
        """The wrapped bs4 object."""
        return self._element

    @property
    def document(self) -> ScoredDocument:
        return self._document

    @property
    def tag_name(self) -> str:
        """Lower-case tag name for elements, ``""`` for every other kind."""
        if self.kind is NodeKind.ELEMENT:
            return self._element.name or ""
        return ""

    @property
    def is_element(self) -> bool:
        return self.kind is NodeKind.ELEMENT

    @property
    def is_text(self) -> bool:
        return self.kind is NodeKind.TEXT

    @property
    def parent(self) -> ScoredNode | None:
        parent = self._element.parent
        return self._document.node(parent) if parent is not None else None

    def get_attribute(self, name: str) -> str:
        """Attribute value as a string; ``""`` when absent or not an element.

        Multi-valued attributes (bs4 hands ``class`` back as a list) are joined
        with single spaces.
        """
        if self.kind is not NodeKind.ELEMENT:
            return ""
        return _attribute(self._element, name)

    def has_attribute(self, name: str) -> bool:
        if self.kind is not NodeKind.ELEMENT:
            return False
        return name in self._element.attrs

    def find_all(self, *tag_names: str) -> list[ScoredNode]:
        """Descendant elements matching any of *tag_names*, in document order."""
        if not isinstance(self._element, Tag):
            return []
        return [self._document.node(el) for el in self._element.find_all(list(tag_names))]

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def initialize_score(self, weight_classes: bool) -> ScoredNode:
        """Compute the base content score once; later calls are no-ops."""
        if not self.initialized:
            score = _TAG_BASE_SCORES.get(self.tag_name, 0)
            if weight_classes:
                score += self.class_weight()
            self.content_score = score
            self.initialized = True
        return self

    def class_weight(self) -> int:
        """Score adjustment from the class and id attributes.

        Both attributes are checked, and for each one the negative and
        positive sets are applied independently, so the result lies in
        ``[-50, 50]``.
        """
        weight = 0

        for name in ("class", "id"):
            value = self.get_attribute(name)
            if not value.strip(_TRIM_CHARS):
                continue
            if matches_negative(value):
                weight -= CLASS_WEIGHT
            if matches_positive(value):
                weight += CLASS_WEIGHT

        return weight

    def is_unlikely_candidate(self) -> bool:
        """True if class/id suggest boilerplate (comments, sidebars, menus...)."""
        if self.tag_name in ("body", "a"):
            return False
        match_string = f"{self.get_attribute('class')} {self.get_attribute('id')}"
        return is_unlikely(match_string)

    # ------------------------------------------------------------------
    # Text & link metrics
    # ------------------------------------------------------------------

    def text_content(self, normalize: bool = False) -> str:
        if isinstance(self._element, Tag):
            # Every text descendant, including <script>, <style>, <template>
            # and ruby strings; comments are left out.
            text = "".join(
                s for s in self._element.descendants if kind_of(s) is NodeKind.TEXT
            )
        else:
            text = str(self._element)
        if normalize:
            text = normalize_whitespace(text)
        return text

    def links(self) -> list[ScoredNode]:
        return self.find_all("a")

    def link_density(self) -> float:
        """Share of this node's normalized text that sits inside ``<a>`` tags."""
        text_length = len(self.text_content(normalize=True))
        if not text_length:
            return 0.0

        link_length = sum(len(link.text_content(normalize=True)) for link in self.links())
        return link_length / text_length

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def ancestors(self, max_depth: int | None = None) -> list[ScoredNode]:
        """Ancestors nearest first, excluding the document root.

        *max_depth* of ``None`` or ``0`` collects every ancestor.
        """
        ancestors: list[ScoredNode] = []
        parent = self._element.parent

        while parent is not None and not isinstance(parent, BeautifulSoup):
            ancestors.append(self._document.node(parent))
            if max_depth and len(ancestors) == max_depth:
                break
            parent = parent.parent

        return ancestors

    def has_ancestor_tag(self, tag_name: str, max_depth: int = 3) -> bool:
        """True if an ancestor within reach is a *tag_name* element.

        Depth starts at 0 for the parent and the walk stops once it exceeds
        *max_depth*, so ``max_depth + 1`` ancestors are examined.  A
        non-positive *max_depth* removes the limit.
        """
        depth = 0
        parent = self._element.parent

        while parent is not None:
            if max_depth > 0 and depth > max_depth:
                return False
            if parent.name == tag_name and not isinstance(parent, BeautifulSoup):
                return True
            parent = parent.parent
            depth += 1

        return False

    def children(self, filter_empty_text: bool = False) -> list[ScoredNode]:
        """Direct children in document order.

        With *filter_empty_text*, whitespace-only text children are dropped;
        element children are always kept.
        """
        if not isinstance(self._element, Tag):
            return []
        children = [self._document.node(child) for child in self._element.contents]
        if filter_empty_text:
            children = [
                child for child in children
                if not (child.is_text and not child.text_content().strip(_TRIM_CHARS))
            ]
        return children

    # ------------------------------------------------------------------
    # Structural classification
    # ------------------------------------------------------------------

    def row_and_column_count(self) -> RowColumnCount:
        """Row and column totals of a table, honouring rowspan/colspan.

        A missing, zero or non-numeric span counts as 1.
        """
        rows = columns = 0
        if not isinstance(self._element, Tag):
            return RowColumnCount(rows, columns)

        for tr in self._element.find_all("tr"):
            rows += _span_value(_attribute(tr, "rowspan")) or 1

            columns_in_this_row = 0
            for cell in tr.find_all("td"):
                columns_in_this_row += _span_value(_attribute(cell, "colspan")) or 1
            columns = max(columns, columns_in_this_row)

        return RowColumnCount(rows, columns)

    def has_single_tag_inside_element(self, tag: str) -> bool:
        """True if the only non-empty child is a *tag* element and no text
        child carries real content."""
        children = self.children(filter_empty_text=True)
        if len(children) != 1 or children[0].tag_name != tag:
            return False

        return not any(
            child.is_text and TRAILING_CONTENT_RE.search(child.text_content())
            for child in self.children()
        )

    def has_single_child_block_element(self) -> bool:
        """True if any descendant, reached through the child chain, is a
        block-level element from :data:`DIV_TO_P_ELEMENTS`."""
        if not isinstance(self._element, Tag):
            return False

        stack = list(self._element.contents)
        while stack:
            child = stack.pop()
            if kind_of(child) is not NodeKind.ELEMENT:
                continue
            if child.name in DIV_TO_P_ELEMENTS:
                return True
            stack.extend(child.contents)

        return False

    def is_element_without_content(self) -> bool:
        """True for elements holding nothing but whitespace, ``<br>`` and ``<hr>``."""
        if self.kind is not NodeKind.ELEMENT:
            return False
        if strip_whitespace(self.text_content()):
            return False

        contents = self._element.contents
        dividers = len(self._element.find_all("br")) + len(self._element.find_all("hr"))
        # Text children are known to be blank at this point.
        text_children = sum(1 for child in contents if kind_of(child) is NodeKind.TEXT)
        return len(contents) == dividers + text_children

    def is_phrasing_content(self) -> bool:
        """True if the node may appear inside a paragraph.

        ``<a>``, ``<del>`` and ``<ins>`` qualify only when everything inside
        them does.
        """
        stack: list[PageElement] = [self._element]
        while stack:
            node = stack.pop()
            kind = kind_of(node)
            if kind is NodeKind.TEXT:
                continue
            if kind is not NodeKind.ELEMENT:
                return False
            if node.name in PHRASING_ELEMENTS:
                continue
            if node.name in _PHRASING_WRAPPERS:
                stack.extend(node.contents)
                continue
            return False

        return True

    # ------------------------------------------------------------------
    # Visibility & whitespace
    # ------------------------------------------------------------------

    def is_probably_visible(self) -> bool:
        """Inline-signal guess: ``display: none`` or ``hidden`` hide a node."""
        return (
            not DISPLAY_NONE_RE.search(self.get_attribute("style"))
            and not self.has_attribute("hidden")
        )

    def is_whitespace(self) -> bool:
        if self.kind is NodeKind.TEXT:
            return not self.text_content().strip(_TRIM_CHARS)
        return self.tag_name == "br"

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def create_element_from_text(self, tag_name: str) -> ScoredNode:
        """New detached *tag_name* element carrying this node's raw text."""
        return self._document.create_element(tag_name, self.text_content())

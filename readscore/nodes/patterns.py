"""readscore.nodes.patterns — Keyword classifier.

Compiled once at import time and never mutated, so the patterns can be shared
freely between documents.  ``ScoredNode.class_weight`` is the only consumer of
the positive/negative sets; ``ScoredNode.is_element_without_content`` is the
only consumer of the only-whitespace pattern.
"""

from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Class / id keyword sets
# ---------------------------------------------------------------------------

POSITIVE_RE = re.compile(
    r"article|body|content|entry|hentry|h-entry|main|page|pagination|post|text|"
    r"blog|story",
    re.IGNORECASE,
)

NEGATIVE_RE = re.compile(
    r"-ad-|hidden|^hid$| hid$| hid |^hid |banner|combx|comment|com-|contact|"
    r"foot|footer|footnote|gdpr|masthead|media|meta|outbrain|promo|related|"
    r"scroll|share|shoutbox|sidebar|skyscraper|sponsor|shopping|tags|tool|widget",
    re.IGNORECASE,
)

UNLIKELY_CANDIDATES_RE = re.compile(
    r"-ad-|ai2html|banner|breadcrumbs|combx|comment|community|cover-wrap|disqus|"
    r"extra|footer|gdpr|header|legends|menu|related|remark|replies|rss|shoutbox|"
    r"sidebar|skyscraper|social|sponsor|supplemental|ad-break|agegate|pagination|"
    r"pager|popup|yom-remote",
    re.IGNORECASE,
)

MAYBE_CANDIDATE_RE = re.compile(
    r"and|article|body|column|content|main|shadow",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Text patterns
# ---------------------------------------------------------------------------

ONLY_WHITESPACE_RE = re.compile(r"\xa0|\s+")

# Distinct from ONLY_WHITESPACE_RE: single whitespace characters are kept.
REPEATED_WHITESPACE_RE = re.compile(r"\s{2,}")

TRAILING_CONTENT_RE = re.compile(r"\S$")

# Inline-style visibility signal; the optional space covers "display: none".
DISPLAY_NONE_RE = re.compile(r"display:( )?none")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def matches_positive(value: str) -> bool:
    """Return True if *value* (a class or id string) looks like content."""
    return bool(POSITIVE_RE.search(value))


def matches_negative(value: str) -> bool:
    """Return True if *value* (a class or id string) looks like boilerplate."""
    return bool(NEGATIVE_RE.search(value))


def is_unlikely(match_string: str) -> bool:
    """Return True if *match_string* names an unlikely content container.

    A maybe-candidate keyword (``article``, ``main``...) rescues the string.
    """
    return bool(
        UNLIKELY_CANDIDATES_RE.search(match_string)
        and not MAYBE_CANDIDATE_RE.search(match_string),
    )


def strip_whitespace(text: str) -> str:
    """Remove every whitespace character (including NBSP) from *text*."""
    return ONLY_WHITESPACE_RE.sub("", text)


def normalize_whitespace(text: str) -> str:
    """Collapse runs of two or more whitespace characters and trim."""
    return REPEATED_WHITESPACE_RE.sub(" ", text).strip()

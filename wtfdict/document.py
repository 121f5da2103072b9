#!/usr/bin/env python3
"""
HTML document model

Wraps BeautifulSoup so extraction rules can run CSS selector queries that are
fail-soft by construction: ``select`` returns a (possibly empty) list and
``first`` returns ``None`` when nothing matches, never raising.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from .errors import DocumentParseError

logger = logging.getLogger(__name__)


class Node:
    """A matched element, or the document root."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag):
        self._tag = tag

    @property
    def name(self) -> str:
        return self._tag.name

    def select(self, selector: str) -> List["Node"]:
        """All descendants matching ``selector``, in document order."""
        return [Node(tag) for tag in self._tag.select(selector)]

    def first(self, selector: str) -> Optional["Node"]:
        """First descendant matching ``selector`` or ``None``."""
        tag = self._tag.select_one(selector)
        if tag is None:
            return None
        return Node(tag)

    @property
    def text(self) -> str:
        """Concatenated text of the element and all its descendants."""
        return self._tag.get_text()

    @property
    def trimmed(self) -> str:
        return self.text.strip()

    def __repr__(self) -> str:
        return f"Node({self._tag.name!r})"


def parse_document(html: str) -> Node:
    """Parse UTF-8 HTML text into a queryable tree."""
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as e:
        raise DocumentParseError(f"unable to parse html document: {e}") from e

    # Script and style bodies are never part of a dictionary entry
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    logger.debug("parsed document with %d characters", len(html))
    return Node(soup)

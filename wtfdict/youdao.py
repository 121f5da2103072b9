#!/usr/bin/env python3
"""
Youdao dictionary page extraction

Each rule reads one facet of a parsed youdao.com result page and returns an
ordered list in document order. Missing page structure simply contributes
nothing. When a block of text cannot be split into lines the rule logs the
failure and returns what it collected up to that point.

Page structure by facet:
- Pronunciation:    div.baav span.pronounce
- Definitions:      div#phrsListTab ul li
- English groups:   div#phrsListTab div.trans-container ul p.wordGroup
- Japanese senses:  div#results-contents .trans-container ul.ol / ul.ul
- Web translations: div#tWebTrans div.wt-container
- Web phrases:      div#webPhrase p.wordGroup
"""

from __future__ import annotations

import logging
from typing import List

from .config import MAX_LINE_LENGTH
from .document import Node
from .errors import LineScanError
from .lines import split_lines
from .models import Pronounce, Query, Result

EXAMPLE_INDENT = " " * 5
WEB_TRANSLATION_INDENT = " " * 4
MARKER_WIDTH = 8


def format_group(marker: str, items: List[str]) -> str:
    """``marker`` left-aligned in an 8-column field, then the joined items."""
    return f"{marker:<{MARKER_WIDTH}} {'; '.join(items)}"


def extract_pronounce(doc: Node, logger: logging.Logger,
                      max_line_length: int = MAX_LINE_LENGTH) -> List[Pronounce]:
    pronounces: List[Pronounce] = []
    for container in doc.select("div.baav"):
        for span in container.select("span.pronounce"):
            try:
                lines = split_lines(span.trimmed, max_line_length)
            except LineScanError as e:
                logger.error("unable to scan pronounce: %s", e)
                return pronounces
            name = ""
            for line in lines:
                if "[" in line:
                    pronounces.append(Pronounce(name=name, phonetic=line))
                else:
                    name = line
    return pronounces


def extract_translate(doc: Node) -> List[str]:
    return [li.trimmed for li in doc.select("div#phrsListTab ul li")]


def extract_eng_translate(doc: Node) -> List[str]:
    translates: List[str] = []
    for group in doc.select("div#phrsListTab div.trans-container ul p.wordGroup"):
        marker = group.first("span")
        if marker is None:
            continue
        titles = []
        for content_title in group.select("span.contentTitle"):
            link = content_title.first("a")
            if link is not None:
                titles.append(link.trimmed)
        translates.append(format_group(marker.trimmed, titles))
    return translates


def extract_jap_translate(doc: Node, logger: logging.Logger,
                          max_line_length: int = MAX_LINE_LENGTH) -> List[str]:
    translates: List[str] = []
    container = doc.first("div#results-contents .trans-container")
    if container is None:
        return translates

    # Numbered senses
    for i, item in enumerate(container.select("ul.ol li"), 1):
        title = item.first("p.sense-title")
        if title is not None and title.trimmed:
            translates.append(f"{i}. {title.trimmed}")

    # Senses with examples
    for item in container.select("ul.ul > li"):
        title = item.first("p.sense-title")
        if title is not None:
            translates.append(title.trimmed)
        examples = item.first("ul.sense-ex")
        if examples is None:
            continue
        for example in examples.select("li"):
            heading = example.first("p")
            if heading is None:
                continue
            try:
                parts = split_lines(heading.trimmed, max_line_length)
            except LineScanError as e:
                logger.error("unable to scan example: %s", e)
                return translates
            translates.append("".join(parts))
            sentence = example.first("p.exam-sen")
            if sentence is not None:
                translates.append(EXAMPLE_INDENT + sentence.trimmed)
    return translates


def extract_web_translate(doc: Node, logger: logging.Logger,
                          max_line_length: int = MAX_LINE_LENGTH) -> List[str]:
    translates: List[str] = []
    for block in doc.select("div#tWebTrans div.wt-container"):
        title = block.first("div.title span")
        content = block.first("p.collapse-content")
        if title is None or content is None:
            continue
        try:
            lines = split_lines(content.trimmed, max_line_length)
        except LineScanError as e:
            logger.error("unable to scan web translate: %s", e)
            return translates
        body = "".join(f"{WEB_TRANSLATION_INDENT}{line}\n" for line in lines)
        translates.append(f"{title.trimmed}\n{body}")
    return translates


def _is_usage(line: str) -> bool:
    # Separators such as ';' end up alone on a line between the phrase links
    return len(line.encode("utf-8")) > 1


def extract_web_phrase(doc: Node, logger: logging.Logger,
                       max_line_length: int = MAX_LINE_LENGTH) -> List[str]:
    phrases: List[str] = []
    for group in doc.select("div#webPhrase p.wordGroup"):
        try:
            usages = [u for u in split_lines(group.trimmed, max_line_length) if _is_usage(u)]
        except LineScanError as e:
            logger.error("unable to scan web phrase: %s", e)
            return phrases
        if len(usages) < 2:
            continue
        phrases.append(format_group(usages[0], usages[1:]))
    return phrases


def extract_result(
    doc: Node,
    query: Query,
    origin: str,
    logger: logging.Logger,
    base_language: str = "chs",
    max_line_length: int = MAX_LINE_LENGTH,
) -> Result:
    """Run every rule that applies to ``query`` and assemble the Result."""
    pronounces: List[Pronounce] = []
    translates: List[str] = []
    web_translates: List[str] = []
    web_phrases: List[str] = []

    if query.lang != base_language:
        if query.lang == "eng":
            translates = extract_eng_translate(doc)
        elif query.lang == "jap":
            translates = extract_jap_translate(doc, logger, max_line_length)
        else:
            logger.info("no sense extraction for language %s", query.lang)
    elif query.is_single_word:
        pronounces = extract_pronounce(doc, logger, max_line_length)
        translates = extract_translate(doc)

    if query.web_trans:
        web_translates = extract_web_translate(doc, logger, max_line_length)
        web_phrases = extract_web_phrase(doc, logger, max_line_length)

    logger.debug(
        "extracted %d pronounces, %d translates, %d web translates, %d web phrases",
        len(pronounces), len(translates), len(web_translates), len(web_phrases),
    )
    return Result(
        title=query.title,
        pronounces=tuple(pronounces),
        translates=tuple(translates),
        web_translates=tuple(web_translates),
        web_phrases=tuple(web_phrases),
        origin=origin,
    )

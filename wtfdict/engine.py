#!/usr/bin/env python3
"""
Dictionary engines

An engine turns a Query into a lookup URL and a Result. The set of engines is
closed: ``youdao`` performs real lookups, ``google`` is a placeholder that
always answers with an empty URL and an empty Result.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import partial
from typing import Callable, Dict, Optional, Type

from .config import LookupConfig
from .document import parse_document
from .fetcher import fetch_document
from .models import Query, Result
from .youdao import extract_result

FetchFunc = Callable[[str], str]


class EngineName(str, Enum):
    YOUDAO = "youdao"
    GOOGLE = "google"


class Engine:
    """Common interface of every dictionary engine"""

    name: EngineName

    def __init__(self, config: LookupConfig, logger: logging.Logger,
                 fetch: Optional[FetchFunc] = None):
        self.config = config
        self.logger = logger
        self.fetch = fetch or partial(fetch_document, config=config)

    def url(self, query: Query) -> str:
        raise NotImplementedError

    def execute(self, query: Query) -> Result:
        raise NotImplementedError


class YoudaoEngine(Engine):
    """Looks words up on youdao.com"""

    name = EngineName.YOUDAO

    def url(self, query: Query) -> str:
        lang = "" if self.config.is_base_language(query.lang) else f"{query.lang}/"
        return self.config.base_url + lang + "%20".join(query.words)

    def execute(self, query: Query) -> Result:
        url = self.url(query)
        self.logger.info("query: %s", url)
        html = self.fetch(url)
        doc = parse_document(html)
        return extract_result(
            doc,
            query,
            origin=url,
            logger=self.logger,
            base_language=self.config.base_language,
            max_line_length=self.config.max_line_length,
        )


class GoogleEngine(Engine):
    """Placeholder for a Google Translate engine; performs no lookup"""

    name = EngineName.GOOGLE

    def url(self, query: Query) -> str:
        return ""

    def execute(self, query: Query) -> Result:
        return Result()


ENGINES: Dict[EngineName, Type[Engine]] = {
    EngineName.YOUDAO: YoudaoEngine,
    EngineName.GOOGLE: GoogleEngine,
}


def create_engine(
    name: str,
    config: Optional[LookupConfig] = None,
    logger: Optional[logging.Logger] = None,
    fetch: Optional[FetchFunc] = None,
) -> Engine:
    """Return the engine registered under ``name``."""
    try:
        engine_name = EngineName(name)
    except ValueError:
        choices = ", ".join(e.value for e in EngineName)
        raise ValueError(f"unknown engine {name!r}, expected one of: {choices}") from None
    config = config or LookupConfig()
    logger = logger or logging.getLogger(config.LOGGING['name'])
    return ENGINES[engine_name](config, logger, fetch)

#!/usr/bin/env python3
"""
wtf - look words up in an online dictionary from the terminal

Usage:
  wtf hello
  wtf -l eng 你好 世界
  wtf -l jap -w 猫
  python -m wtfdict -v --engine youdao hello
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import LookupConfig
from .console import safe_print, setup_console
from .engine import EngineName, create_engine
from .errors import FatalLookupError
from .models import Query
from .report import render_result


def build_parser(config: LookupConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wtf", description="Look words up in an online dictionary")
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show verbose debug information",
    )
    parser.add_argument(
        "-e", "--engine",
        choices=[e.value for e in EngineName],
        default=config.default_engine,
        help="Search word in specific engine",
    )
    parser.add_argument(
        "-l", "--lang",
        choices=config.languages,
        default=config.default_language,
        help="Destination language",
    )
    parser.add_argument(
        "-w", "--web",
        action="store_true",
        help="Enable web translate based on website data",
    )
    parser.add_argument("words", nargs="+", help="word(s) to search for")
    return parser


def configure_logging(verbose: bool, config: LookupConfig) -> logging.Logger:
    """Configure logging once and return the handle passed to the engines."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.CRITICAL,
        format=config.LOGGING['format'],
    )
    return logging.getLogger(config.LOGGING['name'])


def main(argv: Optional[Sequence[str]] = None) -> int:
    setup_console()
    config = LookupConfig.from_env()
    parser = build_parser(config)
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        # Bad arguments end the process quietly without a report
        return 0

    logger = configure_logging(args.verbose, config)
    logger.info("verbosity: %s", args.verbose)
    logger.info("use engine: %s", args.engine)
    logger.info("language: %s", args.lang)
    logger.info("words: %s", args.words)

    try:
        query = Query.create(
            args.words,
            args.lang,
            web_trans=args.web,
            engine=args.engine,
            languages=config.languages,
        )
        engine = create_engine(query.engine, config=config, logger=logger)
    except ValueError as e:
        logger.info("invalid query: %s", e)
        return 0

    try:
        result = engine.execute(query)
    except FatalLookupError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    safe_print(render_result(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

#!/usr/bin/env python3
"""
Document source for dictionary pages

Fetches a page with requests and converts the body to text. The character set
comes from the Content-Type header when present, then from the document's own
<meta> declaration, and falls back to UTF-8. Charset labels are resolved the
way browsers resolve them, so ``gb2312`` decodes as GBK and ``iso-8859-1`` as
windows-1252.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests
import webencodings
from bs4.dammit import EncodingDetector
from requests.utils import _parse_content_type_header

from .config import LookupConfig
from .errors import EncodingError, FetchError, HTTPStatusError

logger = logging.getLogger(__name__)

DEFAULT_CHARSET = "utf-8"

# Only the first kilobyte is sniffed for a <meta charset> declaration
SNIFF_BYTES = 1024


def charset_from_header(content_type: Optional[str]) -> Optional[str]:
    """Return the charset parameter of a Content-Type header, if any."""
    if not content_type:
        return None
    _, params = _parse_content_type_header(content_type)
    charset = params.get("charset")
    if not isinstance(charset, str) or not charset:
        return None
    return charset.lower()


def detect_charset(body: bytes, content_type: Optional[str] = None) -> str:
    """Pick the charset label to decode ``body`` with."""
    declared = charset_from_header(content_type)
    if declared:
        return declared
    sniffed = EncodingDetector.find_declared_encoding(body[:SNIFF_BYTES], is_html=True)
    if sniffed:
        return sniffed.lower()
    return DEFAULT_CHARSET


def decode_body(body: bytes, charset: str) -> str:
    encoding = webencodings.lookup(charset)
    if encoding is None:
        raise EncodingError(charset, "unknown charset")
    try:
        text, _ = encoding.codec_info.decode(body, "strict")
    except UnicodeDecodeError as e:
        raise EncodingError(charset, str(e)) from e
    return text


def fetch_document(url: str, config: Optional[LookupConfig] = None) -> str:
    """Fetch ``url`` and return the response body as text."""
    config = config or LookupConfig()
    headers = {"User-Agent": config.user_agent}
    try:
        resp = requests.get(url, headers=headers, timeout=config.request_timeout)
    except requests.RequestException as e:
        raise FetchError(url, str(e)) from e

    if not 200 <= resp.status_code < 300:
        raise HTTPStatusError(url, resp.status_code, resp.reason)

    charset = detect_charset(resp.content, resp.headers.get("Content-Type"))
    logger.debug("decoding %d bytes from %s as %s", len(resp.content), url, charset)
    return decode_body(resp.content, charset)

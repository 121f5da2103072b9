"""
Exception hierarchy for dictionary lookups.

Fatal errors abort a query before any result is rendered. LineScanError is
local to a single extraction rule and never escapes it.
"""

from typing import Optional


class DictionaryError(Exception):
    """Base class for all wtfdict errors."""


class FatalLookupError(DictionaryError):
    """Raised when a lookup cannot produce a result at all."""


class FetchError(FatalLookupError):
    """Raised when the dictionary page cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"unable to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class HTTPStatusError(FatalLookupError):
    """Raised when the dictionary site answers with a non-success status."""

    def __init__(self, url: str, status_code: int, reason: Optional[str] = None):
        message = f"status code: {status_code}"
        if reason:
            message += f" {reason}"
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status_code = status_code
        self.reason = reason


class EncodingError(FatalLookupError):
    """Raised when the response body cannot be converted to text."""

    def __init__(self, charset: str, reason: str):
        super().__init__(f"unable to convert html to utf-8 from {charset}: {reason}")
        self.charset = charset
        self.reason = reason


class DocumentParseError(FatalLookupError):
    """Raised when the HTML parser rejects the markup."""


class LineScanError(DictionaryError):
    """Raised when a block of text cannot be split into lines."""

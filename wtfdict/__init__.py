"""
Terminal dictionary lookup.

This package contains the pieces of a single lookup:
- Configuration and error types
- Fetching and parsing dictionary pages
- Extraction rules for the Youdao result page
- Engine dispatch and plain-text rendering
"""

from .config import LookupConfig
from .engine import EngineName, GoogleEngine, YoudaoEngine, create_engine
from .errors import (
    DictionaryError,
    DocumentParseError,
    EncodingError,
    FatalLookupError,
    FetchError,
    HTTPStatusError,
    LineScanError,
)
from .models import Pronounce, Query, Result
from .report import render_result

__all__ = [
    'LookupConfig',
    'EngineName',
    'GoogleEngine',
    'YoudaoEngine',
    'create_engine',
    'DictionaryError',
    'DocumentParseError',
    'EncodingError',
    'FatalLookupError',
    'FetchError',
    'HTTPStatusError',
    'LineScanError',
    'Pronounce',
    'Query',
    'Result',
    'render_result',
]

__version__ = "0.1.0"

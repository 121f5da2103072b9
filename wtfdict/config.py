#!/usr/bin/env python3
"""
Centralized configuration for the dictionary lookup tool
Manages the dictionary site, supported languages and HTTP settings
"""

import os
from dataclasses import dataclass, replace
from typing import ClassVar, Dict, Optional, Tuple

DEFAULT_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/124.0 Safari/537.36"
)

# Longest physical line the line scanner accepts
MAX_LINE_LENGTH = 64 * 1024


@dataclass(frozen=True)
class LookupConfig:
    """Settings shared by the CLI, the engines and the fetcher"""

    base_url: str = "http://www.youdao.com/w/"
    base_language: str = "chs"
    languages: Tuple[str, ...] = ("chs", "eng", "jap", "fr")
    default_language: str = "chs"
    default_engine: str = "youdao"
    user_agent: str = DEFAULT_UA
    request_timeout: float = 10.0
    max_line_length: int = MAX_LINE_LENGTH

    # Logging Configuration
    LOGGING: ClassVar[Dict[str, str]] = {
        'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        'name': 'wtfdict',
    }

    def is_base_language(self, lang: str) -> bool:
        return lang == self.base_language

    @staticmethod
    def engine_names() -> Tuple[str, ...]:
        from .engine import EngineName
        return tuple(e.value for e in EngineName)

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'LookupConfig':
        """Create configuration from environment variables"""
        env = os.environ if environ is None else environ
        config = cls()

        overrides = {}
        if env.get('WTF_BASE_URL'):
            base_url = env['WTF_BASE_URL']
            overrides['base_url'] = base_url if base_url.endswith('/') else base_url + '/'
        if env.get('WTF_USER_AGENT'):
            overrides['user_agent'] = env['WTF_USER_AGENT']
        if env.get('WTF_ENGINE') in cls.engine_names():
            overrides['default_engine'] = env['WTF_ENGINE']
        if env.get('WTF_LANG') in config.languages:
            overrides['default_language'] = env['WTF_LANG']
        if env.get('WTF_TIMEOUT'):
            try:
                timeout = float(env['WTF_TIMEOUT'])
            except ValueError:
                timeout = None
            if timeout and timeout > 0:
                overrides['request_timeout'] = timeout

        return replace(config, **overrides)

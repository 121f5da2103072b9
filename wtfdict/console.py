#!/usr/bin/env python3
"""
Console helpers so CJK dictionary output survives narrow terminal encodings
"""

import os
import sys


def setup_console():
    """
    Setup Windows console to handle Unicode properly and avoid encoding errors
    """
    if sys.platform.startswith('win'):
        if hasattr(sys.stdout, 'reconfigure'):
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
            sys.stderr.reconfigure(encoding='utf-8', errors='replace')

        os.environ['PYTHONIOENCODING'] = 'utf-8:replace'


def safe_print(text, file=None):
    """
    Print text, replacing characters the stream cannot encode
    """
    stream = file or sys.stdout
    try:
        print(text, file=stream)
    except UnicodeEncodeError:
        encoding = getattr(stream, 'encoding', None) or 'ascii'
        print(text.encode(encoding, errors='replace').decode(encoding), file=stream)

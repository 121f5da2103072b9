"""Line normalization shared by the extraction rules."""

from __future__ import annotations

import re
from typing import List

from .config import MAX_LINE_LENGTH
from .errors import LineScanError

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str, max_line_length: int = MAX_LINE_LENGTH) -> List[str]:
    """Split a block of text into trimmed, non-empty physical lines.

    Raises LineScanError when a single physical line exceeds
    ``max_line_length`` characters. Applying the function to the joined
    output again yields the same lines.
    """
    lines: List[str] = []
    for raw in _LINE_BREAK.split(text or ""):
        if len(raw) > max_line_length:
            raise LineScanError(f"line of {len(raw)} characters exceeds limit of {max_line_length}")
        line = raw.strip()
        if line:
            lines.append(line)
    return lines

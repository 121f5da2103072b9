"""Plain-text rendering of a lookup Result."""

from __future__ import annotations

from typing import List

from .models import Result

DELIMITER = "-" * 23
SUBHEADER = "----"


def render_result(result: Result) -> str:
    """Render ``result`` as the block printed to the terminal.

    Sections appear in a fixed order and each one closes with the delimiter
    line; empty facets produce no section at all.
    """
    parts: List[str] = [f"{DELIMITER}\n{result.title}\n{DELIMITER}\n"]

    if result.pronounces:
        parts.extend(f"{p}\n" for p in result.pronounces)
        parts.append(f"{DELIMITER}\n")

    if result.translates:
        parts.extend(f"{t}\n" for t in result.translates)
        parts.append(f"{DELIMITER}\n")

    if result.web_translates:
        parts.append(f"Web Translations\n{SUBHEADER}\n")
        # Blocks already end with a newline
        parts.extend(result.web_translates)
        parts.append(f"{DELIMITER}\n")

    if result.web_phrases:
        parts.append(f"Web Phrases\n{SUBHEADER}\n")
        parts.extend(f"{p}\n" for p in result.web_phrases)
        parts.append(f"{DELIMITER}\n")

    if result.origin:
        parts.append(f"{result.origin}\n{DELIMITER}")

    return "".join(parts)

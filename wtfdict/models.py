"""Value types passed between the CLI, the engines and the report renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


@dataclass(frozen=True)
class Query:
    """A single lookup: the words to search and where to search them."""

    words: Tuple[str, ...]
    lang: str
    web_trans: bool = False
    engine: str = "youdao"

    def __post_init__(self):
        if not self.words:
            raise ValueError("at least one word is required")

    @classmethod
    def create(
        cls,
        words: Iterable[str],
        lang: str,
        web_trans: bool = False,
        engine: str = "youdao",
        languages: Sequence[str] = ("chs", "eng", "jap", "fr"),
    ) -> "Query":
        cleaned = tuple(w.strip() for w in words if w and w.strip())
        if lang not in languages:
            raise ValueError(f"unsupported language {lang!r}, expected one of: {', '.join(languages)}")
        return cls(words=cleaned, lang=lang, web_trans=web_trans, engine=engine)

    @property
    def title(self) -> str:
        return " ".join(self.words)

    @property
    def is_single_word(self) -> bool:
        return len(self.words) == 1


@dataclass(frozen=True)
class Pronounce:
    name: str
    phonetic: str

    def __str__(self) -> str:
        return self.name + self.phonetic


@dataclass(frozen=True)
class Result:
    """Everything extracted for one query, in document order."""

    title: str = ""
    pronounces: Tuple[Pronounce, ...] = ()
    translates: Tuple[str, ...] = ()
    web_translates: Tuple[str, ...] = ()
    web_phrases: Tuple[str, ...] = ()
    origin: str = ""

    def is_empty(self) -> bool:
        return not (self.pronounces or self.translates or self.web_translates or self.web_phrases)

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, List

from .errors import (
    EdictParseError,
    LineParseError,
    MalformedGlossError,
    MalformedKeyError,
    MalformedLineError,
)
from .pipeline import ParsingPipeline as _ParsingPipeline
from .pipeline import parse_line
from .records import Entry, Gloss
from .taxonomy import Detail, DetailCategory, code_for, detail_for


@lru_cache(maxsize=1)
def get_parsing_pipeline() -> _ParsingPipeline:
    return _ParsingPipeline()


def parse(lines: Iterable[str], *, errors: str = "strict") -> List[Entry]:
    pipeline = get_parsing_pipeline()
    return pipeline.parse_lines(lines, errors=errors)


__all__ = [
    "Detail",
    "DetailCategory",
    "EdictParseError",
    "Entry",
    "Gloss",
    "LineParseError",
    "MalformedGlossError",
    "MalformedKeyError",
    "MalformedLineError",
    "code_for",
    "detail_for",
    "get_parsing_pipeline",
    "parse",
    "parse_line",
]

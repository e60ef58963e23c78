"""Exceptions raised by the EDICT line parser."""

from __future__ import annotations

from typing import Optional


class EdictParseError(ValueError):
    """Base class for every parsing failure."""


class MalformedKeyError(EdictParseError):
    """The header opens a reading block with ``[`` but never closes it."""

    def __init__(self, header: str) -> None:
        super().__init__(f"unterminated reading block in key {header!r}")
        self.header = header


class MalformedGlossError(EdictParseError):
    """A sense block starts an annotation group that is never closed."""

    def __init__(self, block: str) -> None:
        super().__init__(f"unterminated annotation group in gloss {block!r}")
        self.block = block


class MalformedLineError(EdictParseError):
    """The line has no field separator or carries no sense at all."""


class LineParseError(EdictParseError):
    """Wraps a narrow parsing error together with the offending raw line."""

    def __init__(
        self,
        line: str,
        reason: EdictParseError,
        *,
        line_number: Optional[int] = None,
    ) -> None:
        location = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"{location}: {reason} (in {line!r})")
        self.line = line
        self.reason = reason
        self.line_number = line_number

    def with_line_number(self, line_number: int) -> "LineParseError":
        error = LineParseError(self.line, self.reason, line_number=line_number)
        error.__cause__ = self.reason
        return error

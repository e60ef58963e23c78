"""Value objects produced by the line parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .taxonomy import Detail


@dataclass(frozen=True)
class Gloss:
    """One sense of an entry."""

    definition: str
    details: List[Detail] = field(default_factory=list)
    xrefs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "definition": self.definition,
            "details": [detail.value for detail in self.details],
            "xrefs": list(self.xrefs),
        }


@dataclass(frozen=True)
class Entry:
    """One parsed dictionary line."""

    kanji: List[str]
    kana: List[str]
    information: List[Detail]
    glosses: List[Gloss]
    sequence: str
    recording_available: bool = False
    priority: bool = False

    @property
    def headword(self) -> str:
        return self.kanji[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kanji": list(self.kanji),
            "kana": list(self.kana),
            "information": [detail.value for detail in self.information],
            "glosses": [gloss.to_dict() for gloss in self.glosses],
            "sequence": self.sequence,
            "recording_available": self.recording_available,
            "priority": self.priority,
        }

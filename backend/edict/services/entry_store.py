from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from edict.models import EntryRecord
from edict.parsing import Entry


LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class StoreSummary:
    created: int = 0
    updated: int = 0
    skipped: int = 0

    @property
    def stored(self) -> int:
        return self.created + self.updated

    def to_dict(self) -> Dict[str, int]:
        data = asdict(self)
        data["stored"] = self.stored
        return data


class EntryStoreService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self._pending: Dict[str, EntryRecord] = {}

    def store_entry(self, entry: Entry) -> Optional[bool]:
        """Insert or replace the row for ``entry.sequence``.

        Returns ``True`` for a new row, ``False`` for an update and ``None``
        when the entry has no sequence id to key it by.
        """

        if not entry.sequence:
            LOGGER.warning("Entry %s has no sequence id, not stored", entry.headword)
            return None

        record = self._pending.get(entry.sequence) or self._find(entry.sequence)
        created = record is None
        if created:
            record = EntryRecord(sequence=entry.sequence)
            self._pending[entry.sequence] = record

        payload = entry.to_dict()
        record.headword = entry.headword
        record.kanji = payload["kanji"]
        record.kana = payload["kana"]
        record.information = payload["information"]
        record.glosses = payload["glosses"]
        record.priority = entry.priority
        record.recording_available = entry.recording_available

        self.session.add(record)
        return created

    def store_entries(
        self,
        entries: Iterable[Entry],
        *,
        commit_interval: int = 500,
    ) -> StoreSummary:
        summary = StoreSummary()
        for index, entry in enumerate(entries, start=1):
            created = self.store_entry(entry)
            if created is None:
                summary.skipped += 1
            elif created:
                summary.created += 1
            else:
                summary.updated += 1
            if commit_interval and index % commit_interval == 0:
                self.session.flush()
                self._pending.clear()
        self.session.commit()
        self._pending.clear()
        LOGGER.info(
            "Stored %d entries (%d new, %d updated, %d skipped)",
            summary.stored,
            summary.created,
            summary.updated,
            summary.skipped,
        )
        return summary

    def get_entry(self, sequence: str) -> Optional[Dict[str, Any]]:
        record = self._find(sequence)
        if record is None:
            return None
        return {
            "kanji": record.kanji,
            "kana": record.kana,
            "information": record.information,
            "glosses": record.glosses,
            "sequence": record.sequence,
            "recording_available": record.recording_available,
            "priority": record.priority,
        }

    def count(self) -> int:
        return self.session.execute(select(func.count(EntryRecord.id))).scalar_one()

    def _find(self, sequence: str) -> Optional[EntryRecord]:
        return self.session.execute(
            select(EntryRecord).where(EntryRecord.sequence == sequence)
        ).scalar_one_or_none()

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from edict.database import Base


class EntryRecord(Base):
    __tablename__ = "edict_entries"
    __table_args__ = (
        UniqueConstraint("sequence", name="uq_edict_entries_sequence"),
        Index("ix_edict_entries_headword", "headword"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    sequence: Mapped[str] = mapped_column(String(32), nullable=False)
    headword: Mapped[str] = mapped_column(String(255), nullable=False)
    kanji: Mapped[list] = mapped_column(JSON, nullable=False)
    kana: Mapped[list] = mapped_column(JSON, nullable=False)
    information: Mapped[list] = mapped_column(JSON, nullable=False)
    glosses: Mapped[list] = mapped_column(JSON, nullable=False)
    priority: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    recording_available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    imported_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

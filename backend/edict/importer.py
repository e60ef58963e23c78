from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from itertools import islice
from pathlib import Path
from typing import Iterable, List, Optional

from edict.parsing import Entry, LineParseError, get_parsing_pipeline


DEFAULT_ENCODING = os.getenv("EDICT_DEFAULT_ENCODING", "utf-8")

LOGGER = logging.getLogger(__name__)


def read_entries(
    path: Path,
    *,
    encoding: str = DEFAULT_ENCODING,
    skip_errors: bool = False,
    limit: Optional[int] = None,
) -> List[Entry]:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    pipeline = get_parsing_pipeline()
    errors = "skip" if skip_errors else "strict"
    with path.open("r", encoding=encoding) as fh:
        entries = pipeline.iter_entries(fh, errors=errors)
        if limit is not None:
            entries = islice(entries, limit)
        result = list(entries)

    LOGGER.info("Parsed %d entries from %s", len(result), path)
    return result


def _export_results(path: Path, entries: Iterable[Entry]) -> None:
    payload = [entry.to_dict() for entry in entries]
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")


def _store_results(entries: List[Entry], batch_size: int) -> None:
    from edict.database import SessionLocal, init_db
    from edict.services.entry_store import EntryStoreService

    init_db()
    with SessionLocal() as session:
        service = EntryStoreService(session)
        summary = service.store_entries(entries, commit_interval=batch_size)
    print("Store summary:", summary.to_dict())


def _show_entry(entry: Entry) -> None:
    readings = ";".join(entry.kana) or "-"
    print(f"- {';'.join(entry.kanji)} [{readings}] {entry.sequence}")
    if entry.information:
        print(f"    tags: {', '.join(detail.value for detail in entry.information)}")
    for number, gloss in enumerate(entry.glosses, start=1):
        print(f"    {number}. {gloss.definition}")


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse an EDICT2 dictionary file into structured entries.",
    )
    parser.add_argument("path", type=Path, help="EDICT2 source file")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_ENCODING,
        help="Source file encoding, e.g. euc-jp (default: %(default)s)",
    )
    parser.add_argument(
        "--skip-errors",
        action="store_true",
        help="Log and skip malformed lines instead of aborting.",
    )
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of entries to parse")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional path to save parsed entries as JSON",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Store parsed entries in the database (EDICT_DATABASE_URL)",
    )
    parser.add_argument(
        "--batch-size",
        type=int,
        default=500,
        help="How often to flush when saving (default: %(default)s)",
    )
    parser.add_argument(
        "--show",
        type=int,
        default=0,
        help="Display first N parsed entries in the console",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if not args.verbose else logging.DEBUG,
        format="%(levelname)s %(message)s",
    )

    try:
        entries = read_entries(
            args.path,
            encoding=args.encoding,
            skip_errors=args.skip_errors,
            limit=args.limit,
        )
    except (FileNotFoundError, UnicodeDecodeError, LineParseError) as exc:
        LOGGER.error("%s", exc)
        return 1

    print(f"Parsed entries: {len(entries)}")
    for entry in entries[: max(0, args.show)]:
        _show_entry(entry)

    if args.output:
        _export_results(args.output, entries)
        print(f"Saved entries to {args.output}")

    if args.save:
        _store_results(entries, args.batch_size)

    return 0


if __name__ == "__main__":
    sys.exit(main())

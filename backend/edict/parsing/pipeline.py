"""Line and document parsing for EDICT2 dictionaries."""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, List, Tuple

from .errors import EdictParseError, LineParseError, MalformedGlossError, MalformedLineError
from .records import Entry, Gloss
from .taxonomy import Detail
from .text_parser import (
    AnnotationKind,
    classify_annotation,
    details_from_codes,
    fix_key,
    parse_gloss,
    parse_key,
    peel_annotation_group,
)


LOGGER = logging.getLogger(__name__)

FIELD_SEPARATOR = '/'
PRIORITY_MARKER = '(P)'
RECORDING_QUALIFIER = 'X'

SEQUENCE_REGEX = re.compile(r'EntL[0-9]+[A-Za-z]?')

ERROR_POLICIES = ("strict", "skip")


def is_sequence_field(field: str) -> bool:
    return SEQUENCE_REGEX.fullmatch(field) is not None


def is_priority_marker(field: str) -> bool:
    return field.strip() == PRIORITY_MARKER


def has_recording(sequence: str) -> bool:
    return sequence.endswith(RECORDING_QUALIFIER)


def split_information(block: str) -> Tuple[List[Detail], str]:
    """Peel the entry-wide tags that open the first sense block.

    Only known annotation codes are taken; the first sense number, cross
    reference, free-text group or plain text ends the entry-level run.
    """

    information: List[Detail] = []
    remaining = block.strip()
    while remaining.startswith('('):
        try:
            peeled = peel_annotation_group(remaining)
        except MalformedGlossError:
            raise MalformedGlossError(block) from None
        if peeled is None:
            break
        content, rest = peeled
        annotation = classify_annotation(content)
        if annotation.kind is not AnnotationKind.DETAIL:
            break
        information.extend(details_from_codes(annotation.identifier))
        remaining = rest
    return information, remaining


def _build_gloss(block: str) -> Gloss:
    definition, details, xrefs = parse_gloss(block)
    return Gloss(definition=definition, details=details or [], xrefs=xrefs or [])


def _parse_line(line: str) -> Entry:
    fields = line.rstrip('\r\n').split(FIELD_SEPARATOR)
    if len(fields) < 2:
        raise MalformedLineError("missing field separator")

    header, *rest = fields
    while rest and not rest[-1].strip():
        rest.pop()

    sequence = ""
    if rest and is_sequence_field(rest[-1].strip()):
        sequence = rest.pop().strip()

    priority = False
    blocks: List[str] = []
    for field in rest:
        if is_priority_marker(field):
            priority = True
            continue
        if not field.strip():
            continue
        blocks.append(field)

    if not blocks:
        raise MalformedLineError("no sense block")

    kanji, kana = parse_key(header)
    information, first_block = split_information(blocks[0])
    glosses = [_build_gloss(first_block)]
    glosses.extend(_build_gloss(block) for block in blocks[1:])

    return Entry(
        kanji=[fix_key(form) for form in kanji],
        kana=[fix_key(form) for form in kana],
        information=information,
        glosses=glosses,
        sequence=sequence,
        recording_available=has_recording(sequence),
        priority=priority,
    )


def parse_line(line: str) -> Entry:
    """Parse one raw line, wrapping any failure in :class:`LineParseError`."""

    try:
        return _parse_line(line)
    except LineParseError:
        raise
    except EdictParseError as exc:
        raise LineParseError(line, exc) from exc


class ParsingPipeline:
    """Applies the line parser to every non-blank line of a document."""

    def parse_line(self, line: str) -> Entry:
        return parse_line(line)

    def iter_entries(self, lines: Iterable[str], *, errors: str = "strict") -> Iterator[Entry]:
        if errors not in ERROR_POLICIES:
            raise ValueError(f"Unsupported error policy: {errors}")
        return self._iter_entries(lines, skip_errors=errors == "skip")

    def parse_lines(self, lines: Iterable[str], *, errors: str = "strict") -> List[Entry]:
        return list(self.iter_entries(lines, errors=errors))

    def parse_content(self, content: str, *, errors: str = "strict") -> List[Entry]:
        return self.parse_lines(content.splitlines(), errors=errors)

    def _iter_entries(self, lines: Iterable[str], *, skip_errors: bool) -> Iterator[Entry]:
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            try:
                yield self.parse_line(line)
            except LineParseError as exc:
                located = exc.with_line_number(line_number)
                if not skip_errors:
                    raise located from exc.reason
                LOGGER.warning("Skipping unparsable %s", located)


def parse_content(content: str) -> List[Entry]:
    """Convenience helper that parses the provided raw content."""

    return ParsingPipeline().parse_content(content)

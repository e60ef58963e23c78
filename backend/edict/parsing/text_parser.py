"""Sub-parsers for the pieces of an EDICT2 line: key, annotations and glosses."""

from __future__ import annotations

import logging
import re
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple

from .errors import MalformedGlossError, MalformedKeyError
from .taxonomy import Detail, detail_for, is_known_code


LOGGER = logging.getLogger(__name__)

FORM_SEPARATOR = ';'
CODE_SEPARATOR = ','
XREF_PREFIX = 'See '

SENSE_NUMBER_REGEX = re.compile(r'[0-9]+')


class AnnotationKind(Enum):
    IGNORE = "ignore"
    XREF = "xref"
    DETAIL = "detail"
    TEXT = "text"


class Annotation(NamedTuple):
    kind: AnnotationKind
    identifier: str


def parse_key(header: str) -> Tuple[List[str], List[str]]:
    """
    Разбор заголовка строки вида ``A;B;C [x;y;z]``.

    Args:
        header: Текст до первого разделителя ``/``

    Returns:
        Кортеж (kanji, kana); kana пуст, если блока чтений нет

    Raises:
        MalformedKeyError: ``[`` без закрывающей ``]``
    """
    header = header.strip()

    bracket_start = header.find('[')
    if bracket_start == -1:
        return _split_forms(header), []

    bracket_end = header.find(']', bracket_start + 1)
    if bracket_end == -1:
        raise MalformedKeyError(header)

    kanji = _split_forms(header[:bracket_start])
    kana = _split_forms(header[bracket_start + 1:bracket_end])
    return kanji, kana


def _split_forms(text: str) -> List[str]:
    return [form.strip() for form in text.split(FORM_SEPARATOR)]


def fix_key(form: str) -> str:
    """Отрезает приклеенные пометки: ``咖哩(ateji)`` -> ``咖哩``."""
    paren = form.find('(')
    if paren == -1:
        return form
    return form[:paren]


def classify_annotation(text: str) -> Annotation:
    """
    Классификация содержимого одной скобочной группы.

    Порядок проверки: номер значения, перекрёстная ссылка ``See ...``,
    известные коды (в том числе список через запятую), свободный текст.
    Свободный текст возвращается без изменений, вместе с пробелами.
    """
    if SENSE_NUMBER_REGEX.fullmatch(text):
        return Annotation(AnnotationKind.IGNORE, "")

    if text.startswith(XREF_PREFIX):
        return Annotation(AnnotationKind.XREF, text[len(XREF_PREFIX):])

    if all(is_known_code(code) for code in text.split(CODE_SEPARATOR)):
        return Annotation(AnnotationKind.DETAIL, text)

    return Annotation(AnnotationKind.TEXT, text)


def details_from_codes(identifier: str) -> List[Detail]:
    details: List[Detail] = []
    for code in identifier.split(CODE_SEPARATOR):
        detail = detail_for(code)
        if detail is not None:
            details.append(detail)
    return details


def peel_annotation_group(text: str) -> Optional[Tuple[str, str]]:
    """
    Снимает одну ведущую группу ``(...)`` с начала текста.

    Группа считается аннотацией, только если за ``)`` идёт пробел или конец
    текста; иначе возвращается ``None`` и скобка остаётся частью определения.

    Returns:
        Кортеж (содержимое группы, остаток текста) или ``None``
    """
    if not text.startswith('('):
        return None

    paren_end = text.find(')', 1)
    if paren_end == -1:
        raise MalformedGlossError(text)

    remainder = text[paren_end + 1:]
    if remainder and not remainder.startswith(' '):
        return None

    return text[1:paren_end], remainder.lstrip(' ')


def parse_gloss(block: str) -> Tuple[str, Optional[List[Detail]], Optional[List[str]]]:
    """
    Разбор одного значения (текста между двумя ``/``).

    Args:
        block: Например ``(n) (See foobar) foo``

    Returns:
        Кортеж (definition, details, xrefs); details и xrefs равны ``None``,
        если соответствующих групп не было
    """
    details: Optional[List[Detail]] = None
    xrefs: Optional[List[str]] = None

    remaining = block.strip()
    while remaining.startswith('('):
        try:
            peeled = peel_annotation_group(remaining)
        except MalformedGlossError:
            raise MalformedGlossError(block) from None
        if peeled is None:
            break
        content, remaining = peeled

        annotation = classify_annotation(content)
        if annotation.kind is AnnotationKind.XREF:
            if xrefs is None:
                xrefs = []
            xrefs.append(annotation.identifier)
        elif annotation.kind is AnnotationKind.DETAIL:
            if details is None:
                details = []
            details.extend(details_from_codes(annotation.identifier))
        elif annotation.kind is AnnotationKind.TEXT:
            LOGGER.debug("Dropping free-text annotation %r", annotation.identifier)

    return remaining.strip(), details, xrefs

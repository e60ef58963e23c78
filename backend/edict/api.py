from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from edict.database import get_session
from edict.parsing import LineParseError, get_parsing_pipeline
from edict.parsing.taxonomy import describe_taxonomy
from edict.services.entry_store import EntryStoreService


class ParseRequest(BaseModel):
    lines: List[str] = Field(
        default_factory=list,
        description="Raw EDICT2 lines, already decoded.",
    )
    skip_errors: bool = Field(
        default=False,
        description="Skip unparsable lines instead of failing the whole request.",
    )


class ParseResponse(BaseModel):
    count: int
    entries: List[Dict[str, Any]]


class ParseFailure(BaseModel):
    line: str
    line_number: Optional[int]
    reason: str


class TaxonomyItem(BaseModel):
    code: str
    name: str
    category: str


router = APIRouter(tags=["edict"])


@router.get("/taxonomy", response_model=List[TaxonomyItem])
def list_taxonomy() -> List[TaxonomyItem]:
    return [TaxonomyItem(**item) for item in describe_taxonomy()]


@router.post(
    "/parse",
    response_model=ParseResponse,
    responses={422: {"model": ParseFailure}},
)
def parse_lines(payload: ParseRequest) -> ParseResponse:
    pipeline = get_parsing_pipeline()
    errors = "skip" if payload.skip_errors else "strict"
    try:
        entries = pipeline.parse_lines(payload.lines, errors=errors)
    except LineParseError as exc:
        failure = ParseFailure(
            line=exc.line,
            line_number=exc.line_number,
            reason=str(exc.reason),
        )
        raise HTTPException(
            status_code=422,
            detail=failure.model_dump(),
        ) from exc
    return ParseResponse(
        count=len(entries),
        entries=[entry.to_dict() for entry in entries],
    )


@router.get("/entries/{sequence}")
def get_entry(sequence: str, db: Session = Depends(get_session)) -> Dict[str, Any]:
    service = EntryStoreService(db)
    entry = service.get_entry(sequence)
    if entry is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Entry {sequence} not found",
        )
    return entry

"""Shared data models for resolution and retrieval."""

from typing import Literal, Optional, Union

from pydantic import BaseModel, field_validator

from citefetch.core.errors import ValidationError

NO_MATCHES_MESSAGE = "No matches found"

# Catalog identifiers are never literally "0"; older callers used it as "no match".
LEGACY_SENTINEL = "0"


class CitationQuery(BaseModel):
    """Journal / volume / page triple identifying one article."""

    journal: str
    volume: str
    page: str

    model_config = {"frozen": True}

    def blank_fields(self) -> list[str]:
        return [
            name
            for name in ("journal", "volume", "page")
            if not getattr(self, name).strip()
        ]


# ── Resolution Outcome ───────────────────────────────────────────────


class Found(BaseModel):
    """A resolved PubMed identifier."""

    kind: Literal["found"] = "found"
    pmid: str

    model_config = {"frozen": True}

    @field_validator("pmid")
    @classmethod
    def real_identifier(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Identifier must not be blank")
        if v == LEGACY_SENTINEL:
            raise ValueError("'0' is reserved and never a catalog identifier")
        return v


class NotFound(BaseModel):
    """No record matched the query."""

    kind: Literal["not_found"] = "not_found"

    model_config = {"frozen": True}


Resolution = Union[Found, NotFound]


def as_resolution(identifier: Union[str, Found, NotFound]) -> Resolution:
    """Coerce direct user input into a Found/NotFound outcome."""
    if isinstance(identifier, (Found, NotFound)):
        return identifier
    value = identifier.strip()
    if not value:
        raise ValidationError(["pmid"])
    if value == LEGACY_SENTINEL:
        return NotFound()
    return Found(pmid=value)


# ── Retrieval Result ─────────────────────────────────────────────────


class Retrieval(BaseModel):
    """What the calling application receives: a raw record or "no matches"."""

    pmid: Optional[str] = None
    record: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.record is not None

    @property
    def message(self) -> str:
        return self.record if self.found else NO_MATCHES_MESSAGE

    @classmethod
    def no_matches(cls) -> "Retrieval":
        return cls()

from __future__ import annotations

import datetime

from pydantic import BaseModel, Field, field_validator

from akkuea_curation.curation.types import CurationResult, CurationStatus

MAX_PAGE_SIZE = 200
DEFAULT_PAGE_SIZE = 50


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


# --- Request / Response ---


class ResourceRequest(BaseModel):
    title: str = Field(max_length=200)
    content: str
    theme: str = ""
    level: str = ""
    language: str = ""
    format: str = ""  # pdf, video, audio, text, ...

    @field_validator("title", "content")
    @classmethod
    def require_text(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class Resource(BaseModel):
    id: int
    title: str
    content: str
    theme: str = ""
    level: str = ""
    language: str = ""
    format: str = ""
    status: CurationStatus = CurationStatus.PENDING
    created_at: datetime.datetime = Field(default_factory=_utcnow)
    updated_at: datetime.datetime = Field(default_factory=_utcnow)


class ResourceFilters(BaseModel):
    """List filters. Status is exact; the rest match case-insensitively."""

    status: CurationStatus | None = None
    theme: str | None = None
    level: str | None = None
    language: str | None = None
    format: str | None = None
    limit: int = Field(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE)
    offset: int = Field(default=0, ge=0)

    def matches(self, resource: Resource) -> bool:
        if self.status is not None and resource.status != self.status:
            return False
        for name in ("theme", "level", "language", "format"):
            wanted = getattr(self, name)
            if wanted is not None and getattr(resource, name).lower() != wanted.lower():
                return False
        return True


class ResourcePage(BaseModel):
    data: list[Resource]
    count: int
    limit: int
    offset: int


class CuratedResource(BaseModel):
    """Create/update payload: the stored row plus the verdict that set its status."""

    resource: Resource
    curation: CurationResult

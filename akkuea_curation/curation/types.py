from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from akkuea_curation.config import Settings


# --- Enums ---


class CurationStatus(str, Enum):
    """Moderation outcome stored on the resource row."""

    APPROVED = "Approved"
    PENDING = "Pending"
    REJECTED = "Rejected"

    @classmethod
    def parse(cls, value: str) -> CurationStatus | None:
        """Case-insensitive lookup; None for anything outside the three values."""
        normalized = value.strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        return None


class ProviderKind(str, Enum):
    """Classification backends the orchestrator can dispatch to."""

    XAI = "xai"

    @classmethod
    def resolve(cls, identifier: str) -> ProviderKind | None:
        return _PROVIDER_ALIASES.get(identifier.strip().lower())


_PROVIDER_ALIASES: dict[str, ProviderKind] = {
    "xai": ProviderKind.XAI,
    "grok": ProviderKind.XAI,
    "grok3": ProviderKind.XAI,
}


# --- Result contract ---


class CurationResult(BaseModel):
    status: CurationStatus
    reason: str = ""

    model_config = {"frozen": True}

    @classmethod
    def approved(cls, reason: str) -> CurationResult:
        return cls(status=CurationStatus.APPROVED, reason=reason)

    @classmethod
    def pending(cls, reason: str) -> CurationResult:
        return cls(status=CurationStatus.PENDING, reason=reason)

    @classmethod
    def rejected(cls, reason: str) -> CurationResult:
        return cls(status=CurationStatus.REJECTED, reason=reason)


# --- Provider configuration ---


@dataclass(frozen=True)
class ProviderConfig:
    """Resolved once from settings and injected into the curation service."""

    provider: str = "xai"
    api_key: str = ""
    base_url: str = "https://api.x.ai/v1"
    model: str = "grok-3-mini"
    timeout_s: float = 12.0

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_settings(cls, settings: Settings) -> ProviderConfig:
        return cls(
            provider=settings.curation_provider,
            api_key=settings.xai_api_key,
            base_url=settings.xai_base_url,
            model=settings.xai_model,
            timeout_s=settings.curation_timeout_s,
        )

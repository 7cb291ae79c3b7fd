"""Curation orchestrator: heuristics + provider into one non-failing verdict.

  heuristics ── Rejected ──────────────────────────────► return (provider skipped)
       │
       └─ Approved / Pending ─► provider dispatch
                                   ├─ known provider ─► gateway result
                                   │                    └─ error ─► Pending
                                   └─ unknown ────────► Pending

curate_content() never raises: a broken provider must not block the write path
and must not let content through.
"""

from __future__ import annotations

import logging

import httpx

from akkuea_curation.config import Settings
from akkuea_curation.curation.heuristics import HeuristicFilter
from akkuea_curation.curation.provider import CurationProviderError, XAIGateway
from akkuea_curation.curation.types import (
    CurationResult,
    CurationStatus,
    ProviderConfig,
    ProviderKind,
)

logger = logging.getLogger(__name__)

UNKNOWN_PROVIDER_REASON = "Unknown curation provider; defaulting to Pending"


class CurationService:
    """Decides Approved / Pending / Rejected for a submitted resource.

    Holds only read-only configuration, so one instance serves concurrent
    requests.
    """

    def __init__(
        self,
        config: ProviderConfig,
        gateway: XAIGateway | None = None,
        heuristic_filter: HeuristicFilter | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config = config
        self._heuristics = heuristic_filter or HeuristicFilter()
        self._gateways: dict[ProviderKind, XAIGateway] = {
            ProviderKind.XAI: gateway or XAIGateway(config, http_client=http_client),
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> CurationService:
        return cls(ProviderConfig.from_settings(settings))

    @property
    def config(self) -> ProviderConfig:
        return self._config

    async def curate_content(
        self,
        title: str,
        content: str,
        language: str,
        format: str,
    ) -> CurationResult:
        heuristic = self._heuristics.evaluate(title, content)
        if heuristic.status == CurationStatus.REJECTED:
            logger.info("Heuristics rejected resource '%s': %s", title[:60], heuristic.reason)
            return heuristic

        kind = ProviderKind.resolve(self._config.provider)
        gateway = self._gateways.get(kind) if kind is not None else None
        if gateway is None:
            logger.warning("Unknown curation provider %r", self._config.provider)
            return CurationResult.pending(UNKNOWN_PROVIDER_REASON)

        try:
            return await gateway.classify(title, content, language, format)
        except CurationProviderError as e:
            logger.warning("AI curation error: %s", e)
            return CurationResult.pending(f"AI curation error: {e}")
        except Exception as e:
            logger.exception("Unexpected curation failure for '%s'", title[:60])
            return CurationResult.pending(f"AI curation error: {e}")

    async def aclose(self) -> None:
        for gateway in self._gateways.values():
            await gateway.aclose()

"""Content curation for submitted resources.

- Heuristic pre-check (blocklist + minimum length)
- xAI classification with strict JSON parsing and keyword fallback
- Orchestrator that always resolves to Approved / Pending / Rejected
"""

from akkuea_curation.curation.service import CurationService
from akkuea_curation.curation.types import CurationResult, CurationStatus, ProviderConfig

__all__ = ["CurationResult", "CurationService", "CurationStatus", "ProviderConfig"]

"""xAI (Grok) classification gateway.

OpenAI-compatible chat completions:
  POST {base_url}/chat/completions, Bearer auth, {model, messages}
  → {"choices": [{"message": {"content": "..."}}]}

  - Single attempt, no retries. The whole call is bounded by the configured timeout.
  - Missing API key is not an error: the resource lands in Pending.
  - Transport / status / decoding failures raise CurationProviderError;
    the orchestrator turns those into Pending.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time

import httpx
import openai
from openai import AsyncOpenAI

from akkuea_curation.curation.dictionary import APPROVAL_KEYWORDS, REJECTION_KEYWORDS, find_first
from akkuea_curation.curation.types import CurationResult, CurationStatus, ProviderConfig

logger = logging.getLogger(__name__)

TITLE_LIMIT = 300
CONTENT_LIMIT = 6000
_ELLIPSIS = "..."

_MODERATION_SYSTEM_PROMPT = (
    "You are a strict content moderator for an educational platform. "
    "Given a resource's title, content, language, and format, classify it as "
    "Approved (safe, educational), "
    "Pending (uncertain or needs manual review), or "
    "Rejected (inappropriate, unsafe, spam, hateful, explicit, illegal). "
    'Respond ONLY in JSON: {"status":"Approved|Pending|Rejected","reason":"short reason"}. '
    "Keep reason concise."
)


# --- Errors ---


class CurationProviderError(Exception):
    """The provider could not produce a classification."""


class ProviderTimeoutError(CurationProviderError):
    pass


class ProviderRequestError(CurationProviderError):
    """Connection failure or non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ProviderResponseError(CurationProviderError):
    """2xx response that could not be decoded or carried no choices."""


# --- Helpers ---


def truncate(text: str, limit: int) -> str:
    """Cut *text* to at most *limit* characters, marking the cut with an ellipsis.

    Limits of 3 or less are hard cuts (no room for the marker).
    """
    if len(text) <= limit:
        return text
    if limit <= len(_ELLIPSIS):
        return text[:limit]
    return text[: limit - len(_ELLIPSIS)] + _ELLIPSIS


def build_messages(title: str, content: str, language: str, format: str) -> list[dict[str, str]]:
    user = (
        f"Title: {truncate(title, TITLE_LIMIT)}\n"
        f"Language: {language}\n"
        f"Format: {format}\n"
        f"Content:\n{truncate(content, CONTENT_LIMIT)}"
    )
    return [
        {"role": "system", "content": _MODERATION_SYSTEM_PROMPT},
        {"role": "user", "content": user},
    ]


def _from_json_contract(payload: object) -> CurationResult | None:
    """Map a decoded ``{"status", "reason"}`` object; None if it does not fit the contract."""
    if not isinstance(payload, dict):
        return None
    status = payload.get("status")
    reason = payload.get("reason")
    if status is not None and not isinstance(status, str):
        return None
    if reason is not None and not isinstance(reason, str):
        return None

    reason = reason or ""
    if not status:
        return CurationResult.pending(reason)

    parsed = CurationStatus.parse(status)
    if parsed is None:
        logger.warning("Model returned unknown status %r, treating as Pending", status)
        return CurationResult.pending(reason or f"Unrecognized model status: {status}")
    return CurationResult(status=parsed, reason=reason)


def parse_classification(text: str) -> CurationResult:
    """Strict JSON first, then keyword matching on the raw text."""
    try:
        result = _from_json_contract(json.loads(text))
    except ValueError:
        result = None
    if result is not None:
        return result

    lower = text.lower()
    if find_first(lower, REJECTION_KEYWORDS):
        return CurationResult.rejected("Model indicated rejection")
    if find_first(lower, APPROVAL_KEYWORDS):
        return CurationResult.approved("Model indicated approval")
    return CurationResult.pending("Unclear model response")


# --- Gateway ---


class XAIGateway:
    """Classifies a resource with an xAI chat model."""

    def __init__(
        self,
        config: ProviderConfig,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._config = config
        self._timeout_s = config.timeout_s
        self._client: AsyncOpenAI | None = None
        if config.has_api_key:
            self._client = AsyncOpenAI(
                api_key=config.api_key,
                base_url=config.base_url,
                timeout=config.timeout_s,
                max_retries=0,
                http_client=http_client,
            )

    @property
    def configured(self) -> bool:
        return self._client is not None

    async def classify(
        self,
        title: str,
        content: str,
        language: str,
        format: str,
    ) -> CurationResult:
        """Ask the model for a verdict.

        Raises:
            CurationProviderError: timeout, transport failure, non-2xx status,
                undecodable body or a response without choices.
        """
        if self._client is None:
            return CurationResult.pending("XAI_API_KEY not configured")

        start = time.monotonic()
        try:
            response = await asyncio.wait_for(
                self._client.chat.completions.create(
                    model=self._config.model,
                    messages=build_messages(title, content, language, format),
                ),
                timeout=self._timeout_s,
            )
        except (asyncio.TimeoutError, openai.APITimeoutError) as e:
            raise ProviderTimeoutError(
                f"xAI request timed out after {self._timeout_s:g}s"
            ) from e
        except openai.APIStatusError as e:
            raise ProviderRequestError(f"xAI API status {e.status_code}", status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            raise ProviderRequestError(f"xAI connection failed: {e}") from e
        except (openai.OpenAIError, ValueError) as e:
            raise ProviderResponseError(f"xAI response could not be decoded: {e}") from e

        choices = getattr(response, "choices", None)
        if not choices:
            raise ProviderResponseError("xAI: no choices in response")

        message = getattr(choices[0], "message", None)
        text = getattr(message, "content", None)
        if not isinstance(text, str):
            text = ""
        result = parse_classification(text)

        logger.info(
            "xAI classified resource as %s (%.0fms): %s",
            result.status.value,
            (time.monotonic() - start) * 1000,
            result.reason[:80],
        )
        return result

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.close()

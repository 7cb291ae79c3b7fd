"""Shared test utilities: fake provider wire + sample payloads."""

import inspect
import json

import httpx

SAFE_TITLE = "Photosynthesis basics"
SAFE_CONTENT = (
    "An introduction to photosynthesis for middle school students, "
    "with diagrams and a short quiz."
)


def chat_response(content: str, status_code: int = 200) -> httpx.Response:
    """OpenAI-compatible chat completion body carrying *content* as the model reply."""
    return httpx.Response(
        status_code,
        json={"choices": [{"message": {"role": "assistant", "content": content}}]},
    )


def verdict_response(status: str, reason: str) -> httpx.Response:
    return chat_response(json.dumps({"status": status, "reason": reason}))


def mock_http_client(handler) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
    """httpx client whose requests go to *handler*; also returns the list of seen requests."""
    seen: list[httpx.Request] = []

    async def _handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        result = handler(request)
        if inspect.isawaitable(result):
            result = await result
        return result

    return httpx.AsyncClient(transport=httpx.MockTransport(_handle)), seen


def user_message(request: httpx.Request) -> str:
    body = json.loads(request.content)
    return body["messages"][1]["content"]

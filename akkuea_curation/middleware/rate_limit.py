"""Per-IP rate limit for writes that trigger a provider call.

Reads pass through untouched; POST/PUT under the guarded prefixes are counted
in a sliding 60s window.
"""

import time
from collections import defaultdict

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

_WRITE_METHODS = frozenset({"POST", "PUT"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(
        self,
        app,
        calls_per_minute: int = 30,
        path_prefixes: tuple[str, ...] = ("/resources", "/curation"),
    ):
        super().__init__(app)
        self.calls_per_minute = calls_per_minute
        self.path_prefixes = path_prefixes
        self._requests: dict[str, list[float]] = defaultdict(list)

    def _is_guarded(self, request: Request) -> bool:
        return request.method in _WRITE_METHODS and request.url.path.startswith(self.path_prefixes)

    async def dispatch(self, request: Request, call_next):
        if not self._is_guarded(request):
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        window = now - 60

        # Drop entries outside the window
        recent = [t for t in self._requests[client_ip] if t > window]
        if recent:
            self._requests[client_ip] = recent
        else:
            self._requests.pop(client_ip, None)

        if len(self._requests[client_ip]) >= self.calls_per_minute:
            return JSONResponse(
                status_code=429,
                content={"detail": {"error": "rate_limited", "message": "Rate limit exceeded"}},
            )

        self._requests[client_ip].append(now)
        return await call_next(request)

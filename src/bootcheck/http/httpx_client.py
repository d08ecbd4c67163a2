# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import logging
import math

import httpx

from ..version import __version__
from .client import HttpClient
from .models import HttpRequest, HttpResponse

DEFAULT_TIMEOUT = 5.0
DEFAULT_USER_AGENT = f"bootcheck/{__version__}"

logger = logging.getLogger(__name__)


def _bounded(timeout: float | None) -> bool:
    return timeout is not None and math.isfinite(timeout) and timeout > 0


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper that never raises on transport errors."""

    def __init__(self, timeout: float | None = None, client: httpx.Client | None = None):
        self.timeout = timeout if _bounded(timeout) else DEFAULT_TIMEOUT
        self._client = client or httpx.Client(follow_redirects=False, timeout=self.timeout)

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        headers.setdefault("User-Agent", DEFAULT_USER_AGENT)
        timeout = request.timeout if _bounded(request.timeout) else self.timeout

        try:
            with self._client.stream(
                request.method,
                request.url,
                headers=headers,
                timeout=timeout,
            ) as resp:
                content = bytearray()
                for chunk in resp.iter_bytes():
                    if chunk:
                        content.extend(chunk)

                encoding = resp.encoding or "utf-8"
                try:
                    text = bytes(content).decode(encoding, errors="replace")
                except LookupError:
                    text = bytes(content).decode("utf-8", errors="replace")

            logger.debug("%s %s -> %s (%d bytes)", request.method, request.url, resp.status_code, len(content))
            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=dict(resp.headers),
                text=text,
                url=str(resp.url),
            )
        except Exception as exc:  # noqa: BLE001
            logger.debug("%s %s failed: %r", request.method, request.url, exc)
            return HttpResponse(
                ok=False,
                url=request.url,
                error_message=str(exc) or type(exc).__name__,
                error_type=type(exc).__name__,
                exception=exc,
            )

    def close(self) -> None:
        self._client.close()

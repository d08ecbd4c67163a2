# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Single-shot liveness probe."""

from __future__ import annotations

import logging

from ..errors import ErrorCategory, categorize_exception
from ..http.client import HttpClient, create_default_http_client
from ..models import HttpRequest, ProbeRequest, ProbeResult

logger = logging.getLogger(__name__)


class HealthProbe:
    """One GET, one response, no retries. The body is surfaced, never parsed."""

    def __init__(self, http_client: HttpClient | None = None):
        self.http_client = http_client or create_default_http_client()

    def probe(self, request: ProbeRequest) -> ProbeResult:
        logger.info("Probing %s (timeout=%ss)", request.url, request.timeout)
        response = self.http_client.request(
            HttpRequest(url=request.url, method=request.method, timeout=request.timeout)
        )
        if not response.ok:
            if response.exception is not None:
                category = categorize_exception(response.exception)
            else:
                category = ErrorCategory.UNKNOWN_ERROR
            return ProbeResult(
                ok=False,
                error_category=category,
                error_message=response.error_message or category.value,
            )
        return ProbeResult(ok=True, status_code=response.status_code, body=response.text)

    def close(self) -> None:
        self.http_client.close()

    def __enter__(self) -> HealthProbe:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()

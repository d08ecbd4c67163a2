# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Dataclass exports for bootcheck."""

from ..http.models import Headers, HttpRequest, HttpResponse
from .probe import ProbeRequest, ProbeResult
from .schema import ApplyResult, ScriptPayload

__all__ = [
    "ApplyResult",
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "ProbeRequest",
    "ProbeResult",
    "ScriptPayload",
]

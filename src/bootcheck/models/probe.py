# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Probe request/response models."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ..config import _float_env, _int_env, _str_env
from ..errors import ErrorCategory

DEFAULT_PROBE_HOST = "localhost"
DEFAULT_PROBE_PORT = 3000
DEFAULT_PROBE_PATH = "/health"
DEFAULT_PROBE_TIMEOUT = 5.0


@dataclass(frozen=True)
class ProbeRequest:
    hostname: str = DEFAULT_PROBE_HOST
    port: int = DEFAULT_PROBE_PORT
    path: str = DEFAULT_PROBE_PATH
    method: str = "GET"
    timeout: float = DEFAULT_PROBE_TIMEOUT

    def __post_init__(self) -> None:
        if self.method != "GET":
            raise ValueError(f"Probe method must be GET, got {self.method!r}")
        if self.timeout is None or not math.isfinite(self.timeout) or self.timeout <= 0:
            object.__setattr__(self, "timeout", DEFAULT_PROBE_TIMEOUT)
        if not self.path.startswith("/"):
            object.__setattr__(self, "path", f"/{self.path}")

    @property
    def url(self) -> str:
        return f"http://{self.hostname}:{self.port}{self.path}"

    @classmethod
    def from_env(cls) -> ProbeRequest:
        """Defaults overridden by BOOTCHECK_PROBE_* variables."""
        return cls(
            hostname=_str_env("BOOTCHECK_PROBE_HOST", DEFAULT_PROBE_HOST),
            port=_int_env("BOOTCHECK_PROBE_PORT", DEFAULT_PROBE_PORT),
            path=_str_env("BOOTCHECK_PROBE_PATH", DEFAULT_PROBE_PATH),
            timeout=_float_env("BOOTCHECK_PROBE_TIMEOUT", DEFAULT_PROBE_TIMEOUT),
        )


@dataclass
class ProbeResult:
    ok: bool
    status_code: int | None = None
    body: str = ""
    error_category: ErrorCategory = ErrorCategory.NONE
    error_message: str | None = None

    @property
    def healthy(self) -> bool:
        return self.ok and self.status_code is not None and 200 <= self.status_code < 300

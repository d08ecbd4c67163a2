# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Schema script and apply-result models."""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ApplyError


@dataclass(frozen=True)
class ScriptPayload:
    """Raw script text; never parsed or split."""

    path: str
    text: str


@dataclass
class ApplyResult:
    ok: bool
    script_path: str
    error: ApplyError | None = None
    elapsed: float = 0.0

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None

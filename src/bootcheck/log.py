# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging setup shared by the bootcheck entry points."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "BOOTCHECK_LOG_LEVEL"
FALLBACK_LOG_LEVEL = "WARNING"
# Transport loggers that emit one INFO line per request.
NOISY_LOGGERS = ("httpx", "httpcore")


def resolve_log_level(level: str | None = None) -> str:
    """Explicit level, then BOOTCHECK_LOG_LEVEL (read at call time), then WARNING."""
    name = (level or os.getenv(LOG_LEVEL_ENV) or FALLBACK_LOG_LEVEL).strip().upper()
    return name if isinstance(logging.getLevelName(name), int) else FALLBACK_LOG_LEVEL


def setup_logging(level: str | None = None) -> str:
    """Configure root logging for a CLI run and return the level name applied."""
    effective_level = resolve_log_level(level)
    logging.basicConfig(
        level=getattr(logging, effective_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    transport_level = logging.DEBUG if effective_level == "DEBUG" else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(transport_level)
    return effective_level


__all__ = ["resolve_log_level", "setup_logging"]

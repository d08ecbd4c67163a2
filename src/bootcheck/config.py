# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for bootcheck."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any

DEFAULT_SCRIPT_PATH = "sql/database.sql"
TLS_SSLMODES = {"require", "verify-ca", "verify-full"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        parsed = float(value) if value else default
        return parsed if math.isfinite(parsed) else default
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        parsed = int(value) if value else default
        return parsed if parsed > 0 else default
    except ValueError:
        return default


def _optional_int_env(name: str, default: int | None) -> int | None:
    try:
        value = os.getenv(name)
        if not value:
            return default
        parsed = int(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass(frozen=True)
class ConnectionConfig:
    """Datastore connection parameters, resolved once per run."""

    host: str = "localhost"
    port: int = 5432
    database: str = "santeAfrikDb"
    user: str = "postgres"
    password: str = "postgres"
    use_tls: bool = False
    # None means the driver waits indefinitely.
    connect_timeout: int | None = None
    statement_timeout_ms: int | None = None

    @classmethod
    def from_env(cls) -> ConnectionConfig:
        """Create a config from DB_* environment variables (evaluated at call time)."""
        sslmode = os.getenv("DB_SSLMODE", "").strip().lower()
        return cls(
            host=_str_env("DB_HOST", cls.host),
            port=_int_env("DB_PORT", cls.port),
            database=_str_env("DB_NAME", cls.database),
            user=_str_env("DB_USER", cls.user),
            password=_str_env("DB_PASSWORD", cls.password),
            use_tls=sslmode in TLS_SSLMODES,
            connect_timeout=_optional_int_env("DB_CONNECT_TIMEOUT", cls.connect_timeout),
            statement_timeout_ms=_optional_int_env("DB_STATEMENT_TIMEOUT_MS", cls.statement_timeout_ms),
        )

    def to_dsn_kwargs(self) -> dict[str, Any]:
        """Keyword arguments understood by libpq-based drivers."""
        kwargs: dict[str, Any] = {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.user,
            "password": self.password,
            "sslmode": "require" if self.use_tls else "disable",
        }
        if self.connect_timeout is not None:
            kwargs["connect_timeout"] = self.connect_timeout
        if self.statement_timeout_ms is not None:
            kwargs["options"] = f"-c statement_timeout={self.statement_timeout_ms}"
        return kwargs

    def describe(self) -> str:
        tls = "on" if self.use_tls else "off"
        return f"{self.user}@{self.host}:{self.port}/{self.database} (tls={tls})"


def load_connection_config() -> ConnectionConfig:
    """Load datastore settings from environment with the documented defaults."""
    return ConnectionConfig.from_env()


def resolve_script_path(path: str | None = None) -> str:
    return path or _str_env("BOOTCHECK_SCRIPT_PATH", DEFAULT_SCRIPT_PATH)

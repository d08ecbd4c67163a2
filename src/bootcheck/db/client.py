# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Datastore client abstraction and factory."""

from typing import Protocol

from ..config import ConnectionConfig


class DatabaseConnection(Protocol):
    """A single open connection; ``execute`` submits a script as one unit."""

    def execute(self, script: str) -> None: ...

    def close(self) -> None: ...


class DatabaseClient(Protocol):
    """Opens connections. Implementations raise ApplyError on failure."""

    def connect(self, config: ConnectionConfig) -> DatabaseConnection: ...


def create_default_database_client() -> DatabaseClient:
    """Factory for the default psycopg2-backed client."""
    from .psycopg_client import PsycopgClient

    return PsycopgClient()

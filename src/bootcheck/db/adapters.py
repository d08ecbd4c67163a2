# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""In-memory datastore used by tests."""

from __future__ import annotations

from ..config import ConnectionConfig
from ..errors import ApplyError, ApplyErrorKind
from .client import DatabaseClient, DatabaseConnection


class StubConnection(DatabaseConnection):
    def __init__(self, owner: StubDatabaseClient):
        self._owner = owner
        self.closed = False

    def execute(self, script: str) -> None:
        if self.closed:
            raise ApplyError(ApplyErrorKind.EXECUTION_FAILED, "connection already closed")
        self._owner.executed.append(script)
        if self._owner.reject_with is not None:
            raise ApplyError(ApplyErrorKind.EXECUTION_FAILED, self._owner.reject_with)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._owner.open_connections -= 1


class StubDatabaseClient(DatabaseClient):
    """
    Programmable fake datastore.

    ``open_connections`` tracks live connections so tests can assert release.
    """

    def __init__(self, *, refuse_with: str | None = None, reject_with: str | None = None):
        self.refuse_with = refuse_with
        self.reject_with = reject_with
        self.open_connections = 0
        self.connect_calls: list[ConnectionConfig] = []
        self.executed: list[str] = []

    def connect(self, config: ConnectionConfig) -> StubConnection:
        self.connect_calls.append(config)
        if self.refuse_with is not None:
            raise ApplyError(ApplyErrorKind.CONNECTION_FAILED, self.refuse_with)
        self.open_connections += 1
        return StubConnection(self)

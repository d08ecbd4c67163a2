# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""psycopg2-backed DatabaseClient implementation."""

from __future__ import annotations

import logging

import psycopg2

from ..config import ConnectionConfig
from ..errors import ApplyError, ApplyErrorKind
from .client import DatabaseClient, DatabaseConnection

logger = logging.getLogger(__name__)


def driver_message(exc: Exception) -> str:
    """Primary server message when available, else the driver's text."""
    diag = getattr(exc, "diag", None)
    primary = getattr(diag, "message_primary", None) if diag is not None else None
    return primary or str(exc).strip() or type(exc).__name__


class PsycopgConnection(DatabaseConnection):
    """Autocommit connection so the script runs as one simple-query unit."""

    def __init__(self, connection):  # noqa: ANN001
        self._connection = connection
        self._connection.autocommit = True

    def execute(self, script: str) -> None:
        try:
            with self._connection.cursor() as cursor:
                cursor.execute(script)
        except psycopg2.Error as exc:
            raise ApplyError(ApplyErrorKind.EXECUTION_FAILED, driver_message(exc)) from exc

    def close(self) -> None:
        if not self._connection.closed:
            self._connection.close()


class PsycopgClient(DatabaseClient):
    def connect(self, config: ConnectionConfig) -> PsycopgConnection:
        logger.debug("Connecting to %s", config.describe())
        try:
            connection = psycopg2.connect(**config.to_dsn_kwargs())
        except psycopg2.Error as exc:
            raise ApplyError(ApplyErrorKind.CONNECTION_FAILED, driver_message(exc)) from exc
        return PsycopgConnection(connection)

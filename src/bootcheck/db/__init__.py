# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Datastore client exports."""

from .adapters import StubConnection, StubDatabaseClient
from .client import DatabaseClient, DatabaseConnection, create_default_database_client
from .psycopg_client import PsycopgClient, PsycopgConnection

__all__ = [
    "DatabaseClient",
    "DatabaseConnection",
    "PsycopgClient",
    "PsycopgConnection",
    "StubConnection",
    "StubDatabaseClient",
    "create_default_database_client",
]

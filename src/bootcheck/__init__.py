# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
bootcheck package entrypoint.

Two single-shot operational tools: a schema applier that runs a SQL script
against a PostgreSQL datastore, and a health probe that issues one bounded GET
to a liveness endpoint. Datastore and HTTP access sit behind injectable client
protocols so both tools can run against in-memory stubs.
"""

from .config import ConnectionConfig, load_connection_config
from .db import DatabaseClient, PsycopgClient, StubDatabaseClient, create_default_database_client
from .errors import ApplyError, ApplyErrorKind, ErrorCategory
from .http import HttpClient, HttpRequest, HttpResponse, HttpxClient, StubHttpClient, create_default_http_client
from .log import setup_logging
from .models import ApplyResult, ProbeRequest, ProbeResult, ScriptPayload
from .probe import HealthProbe
from .schema import SchemaApplier, read_script
from .version import __version__

__all__ = [
    "ApplyError",
    "ApplyErrorKind",
    "ApplyResult",
    "ConnectionConfig",
    "DatabaseClient",
    "ErrorCategory",
    "HealthProbe",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "ProbeRequest",
    "ProbeResult",
    "PsycopgClient",
    "SchemaApplier",
    "ScriptPayload",
    "StubDatabaseClient",
    "StubHttpClient",
    "create_default_database_client",
    "create_default_http_client",
    "load_connection_config",
    "read_script",
    "setup_logging",
    "__version__",
]

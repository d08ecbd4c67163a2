# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Apply a declarative SQL script to a datastore as a single execution unit."""

from __future__ import annotations

import logging
import time
from contextlib import closing
from pathlib import Path

from ..config import ConnectionConfig
from ..db.client import DatabaseClient, create_default_database_client
from ..errors import ApplyError, ApplyErrorKind
from ..models import ApplyResult, ScriptPayload

logger = logging.getLogger(__name__)


def read_script(path: str | Path) -> ScriptPayload:
    """Read the whole script as UTF-8 text, raising FILE_NOT_FOUND on any read failure."""
    script_path = Path(path)
    try:
        text = script_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise ApplyError(ApplyErrorKind.FILE_NOT_FOUND, f"cannot read script {script_path}: {reason}") from exc
    return ScriptPayload(path=str(script_path), text=text)


class SchemaApplier:
    """
    Run one script against one connection.

    The script is read before connecting so a missing file never opens a
    connection. The connection is closed on every exit path. No rollback,
    diffing or retry is done here; re-runnability is up to the script itself.
    """

    def __init__(self, db_client: DatabaseClient | None = None):
        self.db_client = db_client or create_default_database_client()

    def apply(self, script_path: str | Path, config: ConnectionConfig) -> ApplyResult:
        started = time.monotonic()
        try:
            payload = read_script(script_path)
            logger.info("Applying %s (%d chars) to %s", payload.path, len(payload.text), config.describe())
            with closing(self.db_client.connect(config)) as connection:
                connection.execute(payload.text)
        except ApplyError as exc:
            logger.debug("Apply failed: %s", exc)
            return ApplyResult(
                ok=False,
                script_path=str(script_path),
                error=exc,
                elapsed=time.monotonic() - started,
            )

        elapsed = time.monotonic() - started
        logger.info("Applied %s in %.3fs", payload.path, elapsed)
        return ApplyResult(ok=True, script_path=payload.path, elapsed=elapsed)

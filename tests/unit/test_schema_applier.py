# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

from bootcheck.config import ConnectionConfig
from bootcheck.db.adapters import StubDatabaseClient
from bootcheck.errors import ApplyError, ApplyErrorKind
from bootcheck.schema import SchemaApplier, read_script

IDEMPOTENT_SQL = "CREATE TABLE IF NOT EXISTS users (id SERIAL PRIMARY KEY);\nCREATE INDEX IF NOT EXISTS users_id ON users (id);\n"


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "database.sql"
    path.write_text(IDEMPOTENT_SQL, encoding="utf-8")
    return path


def test_apply_success_releases_connection(script):
    db = StubDatabaseClient()
    cfg = ConnectionConfig(host="db", database="app")

    result = SchemaApplier(db).apply(script, cfg)

    assert result.ok is True
    assert result.error is None
    assert result.script_path == str(script)
    assert db.connect_calls == [cfg]
    # Whole file submitted verbatim in one call.
    assert db.executed == [IDEMPOTENT_SQL]
    assert db.open_connections == 0


def test_apply_missing_file_never_connects(tmp_path):
    db = StubDatabaseClient()

    result = SchemaApplier(db).apply(tmp_path / "missing.sql", ConnectionConfig())

    assert result.ok is False
    assert result.error.kind is ApplyErrorKind.FILE_NOT_FOUND
    assert "missing.sql" in result.error_message
    assert db.connect_calls == []


def test_apply_non_utf8_file_is_unreadable(tmp_path):
    path = tmp_path / "latin1.sql"
    path.write_bytes(b"SELECT '\xe9';")
    db = StubDatabaseClient()

    result = SchemaApplier(db).apply(path, ConnectionConfig())

    assert result.error.kind is ApplyErrorKind.FILE_NOT_FOUND
    assert db.connect_calls == []


def test_apply_connection_failure(script):
    db = StubDatabaseClient(refuse_with="could not connect to server: Connection refused")

    result = SchemaApplier(db).apply(script, ConnectionConfig())

    assert result.ok is False
    assert result.error.kind is ApplyErrorKind.CONNECTION_FAILED
    assert "Connection refused" in result.error_message
    assert db.executed == []
    assert db.open_connections == 0


def test_apply_execution_failure_still_releases_connection(script):
    db = StubDatabaseClient(reject_with='syntax error at or near "CREAT"')

    result = SchemaApplier(db).apply(script, ConnectionConfig())

    assert result.ok is False
    assert result.error.kind is ApplyErrorKind.EXECUTION_FAILED
    assert result.error_message == 'syntax error at or near "CREAT"'
    assert len(db.executed) == 1
    assert db.open_connections == 0


def test_apply_twice_with_idempotent_script(script):
    db = StubDatabaseClient()
    applier = SchemaApplier(db)

    first = applier.apply(script, ConnectionConfig())
    second = applier.apply(script, ConnectionConfig())

    assert first.ok and second.ok
    assert db.executed == [IDEMPOTENT_SQL, IDEMPOTENT_SQL]
    assert db.open_connections == 0


def test_apply_submits_blank_script_as_is(tmp_path):
    path = tmp_path / "blank.sql"
    path.write_text("   \n", encoding="utf-8")
    db = StubDatabaseClient()

    assert SchemaApplier(db).apply(path, ConnectionConfig()).ok is True
    assert db.executed == ["   \n"]


def test_unexpected_driver_error_propagates_after_release(script):
    class ExplodingConnection:
        def __init__(self):
            self.closed = False

        def execute(self, script):  # noqa: ARG002
            raise RuntimeError("driver bug")

        def close(self):
            self.closed = True

    conn = ExplodingConnection()

    class Client:
        def connect(self, config):  # noqa: ARG002
            return conn

    with pytest.raises(RuntimeError):
        SchemaApplier(Client()).apply(script, ConnectionConfig())
    assert conn.closed is True


def test_read_script(script, tmp_path):
    payload = read_script(script)
    assert payload.text == IDEMPOTENT_SQL
    assert payload.path == str(script)

    with pytest.raises(ApplyError) as excinfo:
        read_script(tmp_path)
    assert excinfo.value.kind is ApplyErrorKind.FILE_NOT_FOUND

# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""bootcheck-apply: run a SQL script against the configured datastore."""

from __future__ import annotations

import argparse
import sys

from dotenv import find_dotenv, load_dotenv

from ..config import ConnectionConfig, load_connection_config, resolve_script_path
from ..db.client import DatabaseClient
from ..log import setup_logging
from ..models import ApplyResult
from ..schema import SchemaApplier


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Apply a SQL script to the database configured by DB_* variables")
    parser.add_argument(
        "script",
        nargs="?",
        default=None,
        help="Path to the SQL script (default: $BOOTCHECK_SCRIPT_PATH or sql/database.sql)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: $BOOTCHECK_LOG_LEVEL or WARNING)")
    return parser


def _report(result: ApplyResult) -> int:
    if result.ok:
        print("✅ Database script applied successfully")
        return 0
    print(f"❌ DB apply error: {result.error_message}", file=sys.stderr)
    return 1


def run(script_path: str, config: ConnectionConfig, db_client: DatabaseClient | None = None) -> int:
    return _report(SchemaApplier(db_client).apply(script_path, config))


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True), override=False)
    setup_logging(args.log_level)

    return run(resolve_script_path(args.script), load_connection_config())


if __name__ == "__main__":
    raise SystemExit(main())

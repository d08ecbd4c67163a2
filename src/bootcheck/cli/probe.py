# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""bootcheck-probe: one GET against a liveness endpoint."""

from __future__ import annotations

import argparse
import dataclasses
import sys

from dotenv import find_dotenv, load_dotenv

from ..errors import error_category_to_reason
from ..http.client import HttpClient, create_default_http_client
from ..log import setup_logging
from ..models import ProbeRequest, ProbeResult
from ..probe import HealthProbe


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Send a single GET to a service health endpoint")
    parser.add_argument("--host", dest="hostname", default=None, help="Target host (default: localhost)")
    parser.add_argument("--port", type=int, default=None, help="Target port (default: 3000)")
    parser.add_argument("--path", default=None, help="Endpoint path (default: /health)")
    parser.add_argument("--timeout", type=float, default=None, help="Seconds to wait before giving up (default: 5)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: $BOOTCHECK_LOG_LEVEL or WARNING)")
    return parser


def build_request(args: argparse.Namespace) -> ProbeRequest:
    """Flags override BOOTCHECK_PROBE_* variables, which override defaults."""
    request = ProbeRequest.from_env()
    overrides = {
        name: getattr(args, name)
        for name in ("hostname", "port", "path", "timeout")
        if getattr(args, name) is not None
    }
    return dataclasses.replace(request, **overrides) if overrides else request


def _report(request: ProbeRequest, result: ProbeResult) -> int:
    if not result.ok:
        reason = error_category_to_reason(result.error_category)
        print(f"❌ Error: {result.error_message} ({reason})", file=sys.stderr)
        print(f"💡 Make sure the service is running and listening on {request.hostname}:{request.port}", file=sys.stderr)
        return 1

    print(f"Server responded - Status: {result.status_code}")
    print(f"📄 Response: {result.body}")
    if not result.healthy:
        print(f"⚠️ {request.url} answered with a non-2xx status")
    print("✅ Service responded")
    return 0


def run(request: ProbeRequest, http_client: HttpClient | None = None) -> int:
    with HealthProbe(http_client or create_default_http_client(request.timeout)) as probe:
        result = probe.probe(request)
    return _report(request, result)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv(find_dotenv(usecwd=True), override=False)
    setup_logging(args.log_level)

    return run(build_request(args))


if __name__ == "__main__":
    raise SystemExit(main())

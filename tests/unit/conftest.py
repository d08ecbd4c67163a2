# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import pytest

PROXY_VARS = ("HTTP_PROXY", "HTTPS_PROXY", "ALL_PROXY", "http_proxy", "https_proxy", "all_proxy")


@pytest.fixture(autouse=True)
def no_proxy_env(monkeypatch):
    """Local-port probes must not be routed through a proxy from the host environment."""
    for name in PROXY_VARS:
        monkeypatch.delenv(name, raising=False)

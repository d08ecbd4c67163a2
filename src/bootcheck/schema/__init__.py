# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

from .applier import SchemaApplier, read_script

__all__ = ["SchemaApplier", "read_script"]

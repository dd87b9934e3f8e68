#!/usr/bin/env python3
# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Demo: raise vs warn failure modes and per-call overrides.

This example demonstrates:
1. RAISE MODE: the first violation raises and the function never runs
2. WARN MODE: violations are logged and the function runs anyway
3. PER-CALL OVERRIDE: one function opts out of the configured mode
"""

import logging

from argguard import IncorrectArgumentType, accepts, configure, sequence_of

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")


# ═══════════════════════════════════════════════════════════════════════════
# Tools
# ═══════════════════════════════════════════════════════════════════════════

@accepts({"table": str, "limit": [int, None]})
def query(table, limit=None):
    """Query a table."""
    return f"[DB] SELECT * FROM {table} LIMIT {limit}"


@accepts({"recipients": sequence_of(str)}, mode="warn")
def notify_all(recipients):
    """Send a notification; never blocks on bad input."""
    return f"[EMAIL] Sent to {len(recipients)} recipient(s)"


# ═══════════════════════════════════════════════════════════════════════════
# Demos
# ═══════════════════════════════════════════════════════════════════════════

def demo_raise_mode():
    print("\n=== RAISE MODE ===")
    configure(mode="raise")
    print(query("users", 10))
    try:
        query("users", "ten")
    except IncorrectArgumentType as error:
        print(f"Blocked: {error}")


def demo_warn_mode():
    print("\n=== WARN MODE ===")
    configure(mode="warn")
    # Logged on the "argguard" logger; the call still goes through.
    print(query(42, "ten"))


def demo_override():
    print("\n=== PER-CALL OVERRIDE ===")
    configure(mode="raise")
    # notify_all is declared with mode="warn", so it logs instead of raising.
    print(notify_all(["ops@example.com", None]))


if __name__ == "__main__":
    demo_raise_mode()
    demo_warn_mode()
    demo_override()

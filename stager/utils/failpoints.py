"""Worker Asset Stager - Failpoint injection for resilience testing.

Provides deterministic crash injection so tests can verify that an
interrupted copy never leaves a partial file at the destination.

Safety gate: failpoints are only active when STAGER_ENABLE_FAILPOINTS=1.
The default is a complete no-op.

Environment variables:
- STAGER_ENABLE_FAILPOINTS: Set to "1" to enable the failpoint system
- STAGER_FAILPOINT: Name of the failpoint to trigger (e.g., "ATOMIC_COPY_BEFORE_RENAME")
- STAGER_FAILPOINT_EXIT_CODE: Exit code to use when crashing (default: 42)

Usage:
    from stager.utils.failpoints import maybe_fail

    maybe_fail("ATOMIC_COPY_BEFORE_RENAME")
"""

from __future__ import annotations

import os

_PREFIX = "FAILPOINT_"


def _normalize(name: str) -> str:
    name = name.upper()
    if name.startswith(_PREFIX):
        name = name[len(_PREFIX) :]
    return name


def maybe_fail(point: str) -> None:
    """Crash the process with os._exit() if `point` is the active failpoint.

    os._exit() bypasses finally blocks and atexit handlers, which is what a
    killed build process looks like.

    Args:
        point: The failpoint name, with or without the "FAILPOINT_" prefix.
    """
    if os.environ.get("STAGER_ENABLE_FAILPOINTS") != "1":
        return

    target = os.environ.get("STAGER_FAILPOINT", "")
    if not target:
        return

    if _normalize(point) != _normalize(target):
        return

    try:
        exit_code = int(os.environ.get("STAGER_FAILPOINT_EXIT_CODE", "42"))
    except ValueError:
        exit_code = 42

    os._exit(exit_code)

"""Build revision lookup for the ``--version`` banner.

The identifier is resolved once per process: an explicit environment
override first, then git metadata next to the package sources, then the
``unknown`` placeholder used for installs without a checkout.
"""

from __future__ import annotations

import logging
import os
import subprocess
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

#: Environment variable that pins the revision (set by packaging pipelines).
BUILD_REV_ENV = "HIWORLD_BUILD_REV"
#: Placeholder reported when no revision can be determined.
UNKNOWN_REVISION = "unknown"


def _git_short_hash(cwd: Path) -> str | None:
    """Return ``git rev-parse --short HEAD`` for ``cwd``, or None on failure."""
    try:
        proc = subprocess.run(  # noqa: S603
            ["git", "rev-parse", "--short", "HEAD"],  # noqa: S607
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
            timeout=5,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        logger.debug("git revision lookup failed: %s", exc)
        return None
    if proc.returncode != 0:
        return None
    candidate = proc.stdout.strip()
    return candidate or None


@lru_cache(maxsize=1)
def resolve_build_revision() -> str:
    """Return the short commit hash the running code was built from.

    Returns:
        Value of ``HIWORLD_BUILD_REV`` when set, otherwise the short git hash
        of the checkout containing this package, otherwise ``"unknown"``.

    Note:
        Cached for the process lifetime; call ``resolve_build_revision.cache_clear()``
        in tests that change the environment.
    """
    pinned = os.getenv(BUILD_REV_ENV)
    if pinned and pinned.strip():
        return pinned.strip()
    return _git_short_hash(Path(__file__).resolve().parent) or UNKNOWN_REVISION


__all__ = [
    "BUILD_REV_ENV",
    "UNKNOWN_REVISION",
    "resolve_build_revision",
]

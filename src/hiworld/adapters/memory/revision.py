"""Fixed build revision for tests that assert on the version banner."""

from __future__ import annotations

MEMORY_REVISION = "0000000"


def resolve_build_revision_in_memory() -> str:
    """Return :data:`MEMORY_REVISION` without consulting git or the environment."""
    return MEMORY_REVISION


__all__ = ["MEMORY_REVISION", "resolve_build_revision_in_memory"]

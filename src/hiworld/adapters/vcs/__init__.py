"""Version-control adapter - build revision lookup.

Contents:
    * :func:`.revision.resolve_build_revision` - Cached short commit hash
"""

from __future__ import annotations

from .revision import resolve_build_revision

__all__ = ["resolve_build_revision"]

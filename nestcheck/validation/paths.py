"""Path rendering for error locations."""
from __future__ import annotations

from typing import Any, Optional


def render_key(key: Any) -> str:
    return key if isinstance(key, str) else repr(key)


def join_path(parent_path: Optional[str], key: Any) -> str:
    """Return the path of ``key`` below ``parent_path``.

    The root key is rendered bare when it is a string; nested keys and
    array indexes are appended as ``[repr(key)]``.
    """
    if parent_path is None:
        return render_key(key)
    return f"{parent_path}[{key!r}]"


__all__ = ["join_path", "render_key"]

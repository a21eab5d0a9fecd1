"""Dependency helpers for geocv use-cases.

Use-cases accept their dependencies (data frame, seed, progress) explicitly
rather than reading globals. This module keeps *small* helpers only.
"""

from __future__ import annotations

from typing import Optional


def resolve_seed(seed: Optional[int], *, fallback: int = 0) -> int:
    """Return a deterministic seed.

    Configs have an optional seed; when absent we still want repeatable
    behavior, hence a stable fallback.
    """

    return int(seed) if seed is not None else int(fallback)

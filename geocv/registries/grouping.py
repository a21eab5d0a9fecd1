from __future__ import annotations

from typing import Callable, Optional

from geocv.components.interfaces import Clusterer
from geocv.contracts.grouping_configs import GroupingModel
from geocv.core.errors import InvalidConfiguration
from geocv.registries.base import Registry

ClustererFactory = Callable[[GroupingModel, Optional[int]], Clusterer]

_GROUPINGS: Registry[str, ClustererFactory] = Registry(_name="grouping strategies")

_BUILTINS_LOADED = False


def register_grouping_strategy(strategy: str) -> Callable[[ClustererFactory], ClustererFactory]:
    return _GROUPINGS.register(strategy.lower())


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from geocv.registries.builtins import grouping as _  # noqa: F401
    _BUILTINS_LOADED = True


def make_clusterer(cfg: GroupingModel, *, seed: Optional[int] = None) -> Clusterer:
    _ensure_builtins()
    strategy = getattr(cfg, "strategy", "random")
    factory = _GROUPINGS.try_get(str(strategy).lower())
    if factory is None:
        raise InvalidConfiguration(f"Unknown grouping strategy: {strategy!r}")
    return factory(cfg, seed)


def list_grouping_strategies() -> list[str]:
    _ensure_builtins()
    return sorted(list(_GROUPINGS.keys()))

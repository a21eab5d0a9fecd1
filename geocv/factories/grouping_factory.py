from __future__ import annotations

from typing import Optional

from geocv.components.interfaces import Clusterer
from geocv.contracts.grouping_configs import GroupingModel
from geocv.registries.grouping import make_clusterer


def make_grouping(cfg: GroupingModel, *, seed: Optional[int] = None) -> Clusterer:
    """Thin wrapper around the grouping registry."""
    return make_clusterer(cfg, seed=seed)

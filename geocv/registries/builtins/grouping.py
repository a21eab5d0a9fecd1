"""Built-in grouping strategy registrations."""

from __future__ import annotations

from typing import Optional

from geocv.components.grouping.clusterers import KMeansClusterer, RandomGroupAssigner
from geocv.contracts.grouping_configs import GroupingModel
from geocv.registries.grouping import register_grouping_strategy


@register_grouping_strategy("random")
def _random(cfg: GroupingModel, seed: Optional[int]):
    return RandomGroupAssigner(seed=seed)


@register_grouping_strategy("spatial")
def _spatial(cfg: GroupingModel, seed: Optional[int]):
    return KMeansClusterer(cfg=cfg, seed=seed)


@register_grouping_strategy("environmental")
def _environmental(cfg: GroupingModel, seed: Optional[int]):
    return KMeansClusterer(cfg=cfg, seed=seed)

"""Built-in regressor registrations."""

from __future__ import annotations

from typing import Any, Optional

from geocv.components.models.builders import (
    DecisionTreeRegressorBuilder,
    KNNRegressorBuilder,
    LinRegBuilder,
    RandomForestRegressorBuilder,
    RidgeRegressorBuilder,
)
from geocv.registries.models import register_model_builder


@register_model_builder("rfreg")
def _rfreg(cfg: Any, seed: Optional[int]):
    return RandomForestRegressorBuilder(cfg=cfg, seed=seed)


@register_model_builder("treereg")
def _treereg(cfg: Any, seed: Optional[int]):
    return DecisionTreeRegressorBuilder(cfg=cfg, seed=seed)


@register_model_builder("linreg")
def _linreg(cfg: Any, seed: Optional[int]):
    return LinRegBuilder(cfg=cfg)


@register_model_builder("ridgereg")
def _ridgereg(cfg: Any, seed: Optional[int]):
    return RidgeRegressorBuilder(cfg=cfg, seed=seed)


@register_model_builder("knnreg")
def _knnreg(cfg: Any, seed: Optional[int]):
    return KNNRegressorBuilder(cfg=cfg)

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Dict, Optional

from sklearn.base import RegressorMixin
from sklearn.ensemble import RandomForestRegressor
from sklearn.linear_model import LinearRegression, Ridge
from sklearn.neighbors import KNeighborsRegressor
from sklearn.pipeline import Pipeline, make_pipeline
from sklearn.preprocessing import StandardScaler
from sklearn.tree import DecisionTreeRegressor

from geocv.components.interfaces import ModelBuilder
from geocv.contracts.model_configs import (
    DecisionTreeRegressorConfig,
    KNNRegressorConfig,
    LinearRegConfig,
    RandomForestRegressorConfig,
    RidgeRegressorConfig,
)


def _estimator_kwargs(estimator_cls: type, cfg: Any, seed: Optional[int] = None) -> Dict[str, Any]:
    """Config fields the estimator accepts (None means sklearn's default).

    ``seed`` fills ``random_state`` unless the config pins its own.
    """
    params = inspect.signature(estimator_cls).parameters
    raw = cfg.model_dump(exclude={"algo"}, exclude_none=True)
    kw = {k: v for k, v in raw.items() if k in params}
    if seed is not None and "random_state" in params:
        kw.setdefault("random_state", int(seed))
    return kw


@dataclass
class RandomForestRegressorBuilder(ModelBuilder):
    cfg: RandomForestRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self, *, seed: Optional[int] = None) -> RegressorMixin:
        kw = _estimator_kwargs(RandomForestRegressor, self.cfg, seed if seed is not None else self.seed)
        return RandomForestRegressor(**kw)


@dataclass
class DecisionTreeRegressorBuilder(ModelBuilder):
    cfg: DecisionTreeRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self, *, seed: Optional[int] = None) -> RegressorMixin:
        kw = _estimator_kwargs(DecisionTreeRegressor, self.cfg, seed if seed is not None else self.seed)
        return DecisionTreeRegressor(**kw)


@dataclass
class LinRegBuilder(ModelBuilder):
    cfg: LinearRegConfig

    def make_estimator(self, *, seed: Optional[int] = None) -> RegressorMixin:
        kw = _estimator_kwargs(LinearRegression, self.cfg)
        return LinearRegression(**kw)


@dataclass
class RidgeRegressorBuilder(ModelBuilder):
    cfg: RidgeRegressorConfig
    seed: Optional[int] = None

    def make_estimator(self, *, seed: Optional[int] = None) -> RegressorMixin:
        kw = _estimator_kwargs(Ridge, self.cfg, seed if seed is not None else self.seed)
        return Ridge(**kw)


@dataclass
class KNNRegressorBuilder(ModelBuilder):
    """k-NN on standardized predictors (distances are scale-sensitive)."""

    cfg: KNNRegressorConfig

    def make_estimator(self, *, seed: Optional[int] = None) -> Pipeline:
        kw = _estimator_kwargs(KNeighborsRegressor, self.cfg)
        return make_pipeline(StandardScaler(), KNeighborsRegressor(**kw))

"""Shared schema contracts.

This package contains Pydantic models and Literal-based choice types used to
validate configuration payloads and describe results across geocv.

Export policy:
- Keep module imports explicit in most of the codebase:
    from geocv.contracts.run_config import CVRunConfig
- The names re-exported here are a small set of convenience imports for
  callers that prefer a single namespace.
"""

from .choices import FoldStatus, GroupingStrategyName, OnErrorPolicy
from .data_configs import DataModel
from .eval_configs import EvalModel
from .grouping_configs import GroupingModel
from .model_configs import (
    DecisionTreeRegressorConfig,
    KNNRegressorConfig,
    LinearRegConfig,
    ModelConfig,
    RandomForestRegressorConfig,
    RidgeRegressorConfig,
)
from .run_config import ComparisonRunConfig, CVRunConfig

__all__ = [
    # choice types
    "FoldStatus",
    "GroupingStrategyName",
    "OnErrorPolicy",
    # configs
    "DataModel",
    "GroupingModel",
    "EvalModel",
    "ModelConfig",
    "RandomForestRegressorConfig",
    "DecisionTreeRegressorConfig",
    "LinearRegConfig",
    "RidgeRegressorConfig",
    "KNNRegressorConfig",
    "CVRunConfig",
    "ComparisonRunConfig",
]

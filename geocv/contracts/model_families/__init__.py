"""Per-family model configuration contracts.

Every config is discriminated by its ``algo`` literal and maps 1:1 onto a
scikit-learn regressor whose constructor accepts the config fields.
"""

from .linear import LinearRegConfig, RidgeRegressorConfig
from .neighbors import KNNRegressorConfig
from .registry import ModelConfig, get_model_family_by_algo
from .trees import DecisionTreeRegressorConfig, RandomForestRegressorConfig

__all__ = [
    "ModelConfig",
    "get_model_family_by_algo",
    "RandomForestRegressorConfig",
    "DecisionTreeRegressorConfig",
    "LinearRegConfig",
    "RidgeRegressorConfig",
    "KNNRegressorConfig",
]

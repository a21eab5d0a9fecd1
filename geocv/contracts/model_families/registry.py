from __future__ import annotations

from typing import Annotated, Union

from pydantic import Field

from .linear import LinearRegConfig, RidgeRegressorConfig
from .neighbors import KNNRegressorConfig
from .trees import DecisionTreeRegressorConfig, RandomForestRegressorConfig


ModelConfig = Annotated[
    Union[
        RandomForestRegressorConfig,
        DecisionTreeRegressorConfig,
        LinearRegConfig,
        RidgeRegressorConfig,
        KNNRegressorConfig,
    ],
    Field(discriminator="algo"),
]


def get_model_family_by_algo(algo: str) -> str:
    mapping = {
        "rfreg": RandomForestRegressorConfig.family,
        "treereg": DecisionTreeRegressorConfig.family,
        "linreg": LinearRegConfig.family,
        "ridgereg": RidgeRegressorConfig.family,
        "knnreg": KNNRegressorConfig.family,
    }
    if algo not in mapping:
        raise KeyError(f"Unknown model algo: {algo!r}")
    return mapping[algo]

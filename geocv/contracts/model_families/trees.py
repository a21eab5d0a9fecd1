from __future__ import annotations

from typing import ClassVar, Literal, Optional, Union

from pydantic import BaseModel

from ..choices import MaxFeaturesName, RegTreeCriterion, TreeSplitter


class DecisionTreeRegressorConfig(BaseModel):
    algo: Literal["treereg"] = "treereg"

    family: ClassVar[str] = "trees"

    criterion: RegTreeCriterion = "squared_error"
    splitter: TreeSplitter = "best"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    min_weight_fraction_leaf: float = 0.0
    max_features: Optional[Union[int, float, MaxFeaturesName]] = None
    random_state: Optional[int] = None
    max_leaf_nodes: Optional[int] = None
    min_impurity_decrease: float = 0.0
    ccp_alpha: float = 0.0


class RandomForestRegressorConfig(BaseModel):
    algo: Literal["rfreg"] = "rfreg"

    family: ClassVar[str] = "trees"

    n_estimators: int = 500
    criterion: RegTreeCriterion = "squared_error"
    max_depth: Optional[int] = None
    min_samples_split: int = 2
    min_samples_leaf: int = 1
    min_weight_fraction_leaf: float = 0.0
    # mtry as a fraction of the predictors; 1/3 is the usual regression default
    max_features: Union[int, float, MaxFeaturesName] = 1.0 / 3.0
    max_leaf_nodes: Optional[int] = None
    min_impurity_decrease: float = 0.0
    bootstrap: bool = True
    oob_score: bool = False
    n_jobs: Optional[int] = None
    random_state: Optional[int] = None
    ccp_alpha: float = 0.0
    max_samples: Optional[Union[int, float]] = None

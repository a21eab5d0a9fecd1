from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field, field_validator

from .data_configs import DataModel
from .eval_configs import EvalModel
from .grouping_configs import GroupingModel
from .model_configs import ModelConfig, RandomForestRegressorConfig


class CVRunConfig(BaseModel):
    """One blocked cross-validation run (one grouping strategy)."""

    data: DataModel
    grouping: GroupingModel = Field(default_factory=GroupingModel)
    model: ModelConfig = Field(default_factory=RandomForestRegressorConfig)
    eval: EvalModel = Field(default_factory=EvalModel)


class ComparisonRunConfig(BaseModel):
    """Several grouping strategies evaluated on the same data and model."""

    data: DataModel
    groupings: List[GroupingModel]
    model: ModelConfig = Field(default_factory=RandomForestRegressorConfig)
    eval: EvalModel = Field(default_factory=EvalModel)

    @field_validator("groupings")
    @classmethod
    def _unique_labels(cls, v: List[GroupingModel]) -> List[GroupingModel]:
        if not v:
            raise ValueError("groupings must contain at least one grouping")
        labels = [g.label for g in v]
        dupes = sorted({lab for lab in labels if labels.count(lab) > 1})
        if dupes:
            raise ValueError(
                f"grouping names must be unique; duplicated: {dupes}. "
                "Set `name` to tell groupings of the same strategy apart."
            )
        return v

    def run_configs(self) -> List[CVRunConfig]:
        return [
            CVRunConfig(data=self.data, grouping=g, model=self.model, eval=self.eval)
            for g in self.groupings
        ]

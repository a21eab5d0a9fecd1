from typing import List

from pydantic import BaseModel, Field

from geocv.contracts.data_configs import DataModel
from geocv.contracts.eval_configs import EvalModel
from geocv.contracts.grouping_configs import GroupingModel
from geocv.contracts.model_configs import ModelConfig, RandomForestRegressorConfig
from geocv.contracts.results import CrossValidationReport, CrossValidationSummary, StrategyComparison


class CVRequest(BaseModel):
    data: DataModel
    grouping: GroupingModel = Field(default_factory=GroupingModel)
    model: ModelConfig = Field(default_factory=RandomForestRegressorConfig)
    eval: EvalModel = Field(default_factory=EvalModel)


class CVResponse(BaseModel):
    report: CrossValidationReport
    summary: CrossValidationSummary


class CompareRequest(BaseModel):
    data: DataModel
    groupings: List[GroupingModel]
    model: ModelConfig = Field(default_factory=RandomForestRegressorConfig)
    eval: EvalModel = Field(default_factory=EvalModel)


class CompareResponse(BaseModel):
    comparison: StrategyComparison
    summaries: List[CrossValidationSummary]


class StrategiesResponse(BaseModel):
    strategies: List[str]
    models: List[str]

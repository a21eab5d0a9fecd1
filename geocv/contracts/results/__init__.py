from .common import Label, ResultModel
from .cross_validation import (
    ConfigurationProblem,
    CrossValidationReport,
    CrossValidationSummary,
    FoldError,
    FoldResult,
    StrategyComparison,
)

__all__ = [
    "ResultModel",
    "Label",
    "FoldError",
    "FoldResult",
    "ConfigurationProblem",
    "CrossValidationSummary",
    "CrossValidationReport",
    "StrategyComparison",
]

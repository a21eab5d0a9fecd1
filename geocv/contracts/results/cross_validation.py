from __future__ import annotations

import math
import statistics
from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import Field

from ..choices import FoldErrorKind, FoldFlag, FoldStatus
from .common import Label, ResultModel

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


class FoldError(ResultModel):
    """Per-fold error marker (the fold was planned but produced no metrics)."""

    kind: FoldErrorKind
    message: str


class ConfigurationProblem(ResultModel):
    """A fold that could not be constructed at all (e.g. an empty group)."""

    group_label: Label
    message: str


class FoldResult(ResultModel):
    fold_id: int
    group_label: Label

    rsq: Optional[float] = None
    rmse: Optional[float] = None

    n_train: int = 0
    n_test: int = 0
    n_train_dropped: int = 0
    n_test_dropped: int = 0

    status: FoldStatus = "ok"
    flags: List[FoldFlag] = Field(default_factory=list)
    error: Optional[FoldError] = None

    feature_importances: Optional[Dict[str, float]] = None

    @property
    def succeeded(self) -> bool:
        """True when the fold produced metrics (possibly with a degenerate R²)."""
        return self.status in ("ok", "degenerate")


def _finite(values: List[Optional[float]]) -> List[float]:
    return [float(v) for v in values if v is not None and math.isfinite(v)]


def _mean(values: List[float]) -> Optional[float]:
    return float(statistics.fmean(values)) if values else None


def _median(values: List[float]) -> Optional[float]:
    return float(statistics.median(values)) if values else None


class CrossValidationSummary(ResultModel):
    strategy: str
    n_folds: int
    n_ok: int
    n_degenerate: int
    n_failed: int
    n_cancelled: int
    n_configuration_errors: int
    mean_rsq: Optional[float] = None
    median_rsq: Optional[float] = None
    mean_rmse: Optional[float] = None
    median_rmse: Optional[float] = None


class CrossValidationReport(ResultModel):
    """Ordered per-fold results of one blocked cross-validation run.

    Summary statistics are derived on access from the folds whose metric is
    defined; they are never stored on the report.
    """

    strategy: str
    algo: str
    n_groups: int
    seed: Optional[int] = None

    folds: List[FoldResult] = Field(default_factory=list)
    configuration_errors: List[ConfigurationProblem] = Field(default_factory=list)
    notes: List[str] = Field(default_factory=list)

    # --- derived -----------------------------------------------------------

    @property
    def fold_ids(self) -> List[int]:
        return [f.fold_id for f in self.folds]

    @property
    def succeeded_folds(self) -> List[FoldResult]:
        return [f for f in self.folds if f.succeeded]

    @property
    def failed_folds(self) -> List[FoldResult]:
        return [f for f in self.folds if f.status in ("failed", "cancelled")]

    @property
    def rsq_values(self) -> List[float]:
        return _finite([f.rsq for f in self.succeeded_folds])

    @property
    def rmse_values(self) -> List[float]:
        return _finite([f.rmse for f in self.succeeded_folds])

    @property
    def mean_rsq(self) -> Optional[float]:
        return _mean(self.rsq_values)

    @property
    def median_rsq(self) -> Optional[float]:
        return _median(self.rsq_values)

    @property
    def mean_rmse(self) -> Optional[float]:
        return _mean(self.rmse_values)

    @property
    def median_rmse(self) -> Optional[float]:
        return _median(self.rmse_values)

    def fold(self, fold_id: int) -> FoldResult:
        for f in self.folds:
            if f.fold_id == fold_id:
                return f
        raise KeyError(f"No fold with id {fold_id!r}")

    def summary(self) -> CrossValidationSummary:
        statuses = [f.status for f in self.folds]
        return CrossValidationSummary(
            strategy=self.strategy,
            n_folds=len(self.folds),
            n_ok=statuses.count("ok"),
            n_degenerate=statuses.count("degenerate"),
            n_failed=statuses.count("failed"),
            n_cancelled=statuses.count("cancelled"),
            n_configuration_errors=len(self.configuration_errors),
            mean_rsq=self.mean_rsq,
            median_rsq=self.median_rsq,
            mean_rmse=self.mean_rmse,
            median_rmse=self.median_rmse,
        )

    def to_frame(self) -> "pd.DataFrame":
        """Tabular view: one row per fold, ascending fold id."""
        from geocv.reporting.tables import report_to_frame

        return report_to_frame(self)


class StrategyComparison(ResultModel):
    """Reports of several grouping strategies run on the same data/model."""

    reports: List[CrossValidationReport] = Field(default_factory=list)

    @property
    def strategies(self) -> List[str]:
        return [r.strategy for r in self.reports]

    def report(self, strategy: str) -> CrossValidationReport:
        for r in self.reports:
            if r.strategy == strategy:
                return r
        raise KeyError(f"No report for strategy {strategy!r}")

    def summaries(self) -> List[CrossValidationSummary]:
        return [r.summary() for r in self.reports]

    def to_frame(self) -> "pd.DataFrame":
        """One summary row per strategy, in run order."""
        from geocv.reporting.tables import comparison_to_frame

        return comparison_to_frame(self)

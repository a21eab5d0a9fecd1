from __future__ import annotations

"""Fold metrics: RMSE and R² as squared Pearson correlation.

R² here is ``corr(predicted, observed) ** 2`` (the convention of the
soil-mapping literature), not sklearn's coefficient of determination. The
correlation is undefined when either side is constant or fewer than two rows
are scored; :func:`squared_pearson` raises :class:`DegenerateMetric` in those
cases instead of returning NaN, and :func:`score_regression_fold` turns that
into an explicit sentinel plus a flag.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from sklearn.metrics import mean_squared_error

from geocv.core.errors import DegenerateMetric
from geocv.core.shapes import check_same_length, coerce_1d

# R² reported for zero-variance folds
RSQ_SENTINEL = 0.0


def _as_float_1d(a, name: str) -> np.ndarray:
    arr = np.asarray(coerce_1d(a), dtype=float)
    if not np.isfinite(arr).all():
        raise ValueError(f"{name} contains missing/non-finite values")
    return arr


def rmse(y_true, y_pred) -> float:
    """Root-mean-square error; always >= 0, 0 only for exact predictions."""
    yt = _as_float_1d(y_true, "y_true")
    yp = _as_float_1d(y_pred, "y_pred")
    check_same_length(yt, yp, names=("y_true", "y_pred"))
    if yt.size == 0:
        raise ValueError("rmse requires at least one observation")
    return float(math.sqrt(mean_squared_error(yt, yp)))


def squared_pearson(y_true, y_pred) -> float:
    """Squared Pearson correlation between observed and predicted values.

    Raises
    ------
    DegenerateMetric
        fewer than two rows, or zero variance in observed or predicted values.
    """
    yt = _as_float_1d(y_true, "y_true")
    yp = _as_float_1d(y_pred, "y_pred")
    check_same_length(yt, yp, names=("y_true", "y_pred"))

    if yt.size < 2:
        raise DegenerateMetric(
            f"R² is undefined for {yt.size} scored row(s)",
            reason="rsq_undefined_single_row",
        )
    if np.ptp(yt) == 0.0:
        raise DegenerateMetric(
            "Observed values have zero variance; correlation is undefined",
            reason="zero_variance_observed",
        )
    if np.ptp(yp) == 0.0:
        raise DegenerateMetric(
            "Predicted values have zero variance; correlation is undefined",
            reason="zero_variance_predicted",
        )

    with np.errstate(invalid="ignore", divide="ignore"):
        r = float(np.corrcoef(yt, yp)[0, 1])
    if not math.isfinite(r):
        # variance underflow on near-constant inputs
        raise DegenerateMetric(
            "Correlation is not finite (near-zero variance)",
            reason="zero_variance_observed",
        )
    return float(min(max(r * r, 0.0), 1.0))


@dataclass(frozen=True)
class FoldScores:
    rmse: float
    rsq: Optional[float]
    n: int
    flags: Tuple[str, ...] = ()

    @property
    def degenerate(self) -> bool:
        return bool(self.flags)


def score_regression_fold(y_true, y_pred) -> FoldScores:
    """Compute RMSE and R² for one fold, flagging undefined R²."""
    err = rmse(y_true, y_pred)
    n = int(np.asarray(y_true).reshape(-1).shape[0])
    try:
        rsq: Optional[float] = squared_pearson(y_true, y_pred)
        flags: Tuple[str, ...] = ()
    except DegenerateMetric as e:
        rsq = None if e.reason == "rsq_undefined_single_row" else RSQ_SENTINEL
        flags = (e.reason,)
    return FoldScores(rmse=err, rsq=rsq, n=n, flags=flags)


@dataclass
class PearsonRmseScorer:
    """Default fold scorer (squared Pearson R² + RMSE)."""

    def score(self, y_true: np.ndarray, y_pred: np.ndarray) -> FoldScores:
        return score_regression_fold(y_true, y_pred)

from __future__ import annotations

"""Tabular (pandas) views of cross-validation reports."""

from typing import TYPE_CHECKING

import pandas as pd

if TYPE_CHECKING:  # pragma: no cover
    from geocv.contracts.results import CrossValidationReport, StrategyComparison

FOLD_COLUMNS = [
    "fold_id",
    "group_label",
    "rsq",
    "rmse",
    "n_train",
    "n_test",
    "n_train_dropped",
    "n_test_dropped",
    "status",
    "flags",
    "error",
]

SUMMARY_COLUMNS = [
    "strategy",
    "n_folds",
    "n_ok",
    "n_degenerate",
    "n_failed",
    "n_cancelled",
    "n_configuration_errors",
    "mean_rsq",
    "median_rsq",
    "mean_rmse",
    "median_rmse",
]


def report_to_frame(report: "CrossValidationReport") -> pd.DataFrame:
    """One row per fold in ascending fold id; undefined metrics are NaN."""

    rows = []
    for f in report.folds:
        rows.append(
            {
                "fold_id": f.fold_id,
                "group_label": f.group_label,
                "rsq": f.rsq,
                "rmse": f.rmse,
                "n_train": f.n_train,
                "n_test": f.n_test,
                "n_train_dropped": f.n_train_dropped,
                "n_test_dropped": f.n_test_dropped,
                "status": f.status,
                "flags": ",".join(f.flags),
                "error": f"{f.error.kind}: {f.error.message}" if f.error is not None else None,
            }
        )
    df = pd.DataFrame(rows, columns=FOLD_COLUMNS)
    df["rsq"] = df["rsq"].astype(float)
    df["rmse"] = df["rmse"].astype(float)
    return df


def comparison_to_frame(comparison: "StrategyComparison") -> pd.DataFrame:
    """One summary row per strategy, in run order."""

    rows = [s.model_dump() for s in comparison.summaries()]
    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    for col in ("mean_rsq", "median_rsq", "mean_rmse", "median_rmse"):
        df[col] = df[col].astype(float)
    return df

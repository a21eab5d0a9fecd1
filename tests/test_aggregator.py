from __future__ import annotations

import pandas as pd
import pytest

from geocv.components.aggregation import aggregate_fold_results
from geocv.components.splitters import build_group_folds
from geocv.contracts.results import FoldError, FoldResult


def _result(fold_id: int, *, rsq=0.5, rmse=1.0, status="ok") -> FoldResult:
    error = None
    if status in ("failed", "cancelled"):
        rsq = rmse = None
        error = FoldError(kind="ExternalFitFailure" if status == "failed" else "Cancelled", message="x")
    return FoldResult(fold_id=fold_id, group_label=fold_id, rsq=rsq, rmse=rmse, status=status, error=error)


def test_results_are_ordered_by_fold_id() -> None:
    plan = build_group_folds([1, 1, 2, 2, 3, 3])
    results = {3: _result(3), 1: _result(1), 2: _result(2)}

    report = aggregate_fold_results(plan, results, strategy="random", algo="linreg")

    assert report.fold_ids == [1, 2, 3]
    assert report.n_groups == 3
    assert report.strategy == "random"


def test_every_planned_fold_needs_one_result() -> None:
    plan = build_group_folds([1, 1, 2, 2, 3, 3])

    with pytest.raises(ValueError, match="No result"):
        aggregate_fold_results(plan, [_result(1), _result(3)], strategy="random")
    with pytest.raises(ValueError, match="more than one"):
        aggregate_fold_results(plan, [_result(1), _result(1), _result(2), _result(3)], strategy="random")
    with pytest.raises(ValueError, match="not in the plan"):
        aggregate_fold_results(plan, [_result(i) for i in range(1, 5)], strategy="random")


def test_configuration_problems_are_carried_over() -> None:
    plan = build_group_folds([1, 1, 2, 2], expected_groups=[1, 2, 3], allow_missing_groups=True)

    report = aggregate_fold_results(plan, [_result(1), _result(2)], strategy="spatial", n_groups=3)

    assert len(report.folds) == 2
    assert [p.group_label for p in report.configuration_errors] == [3]
    assert "no members" in report.configuration_errors[0].message
    assert report.summary().n_configuration_errors == 1


def test_summaries_use_only_defined_metrics() -> None:
    plan = build_group_folds([1, 2, 3, 4])
    results = [
        _result(1, rsq=0.2, rmse=1.0),
        _result(2, rsq=0.6, rmse=3.0),
        _result(3, status="failed"),
        _result(4, rsq=None, rmse=2.0, status="degenerate"),
    ]

    report = aggregate_fold_results(plan, results, strategy="random")
    summary = report.summary()

    assert report.mean_rsq == pytest.approx(0.4)
    assert report.median_rsq == pytest.approx(0.4)
    assert report.mean_rmse == pytest.approx(2.0)
    assert report.median_rmse == pytest.approx(2.0)
    assert (summary.n_ok, summary.n_degenerate, summary.n_failed) == (2, 1, 1)
    assert [f.fold_id for f in report.failed_folds] == [3]


def test_summaries_are_none_without_defined_metrics() -> None:
    plan = build_group_folds([1, 2])

    report = aggregate_fold_results(plan, [_result(1, status="failed"), _result(2, status="cancelled")], strategy="random")

    assert report.mean_rsq is None
    assert report.median_rmse is None
    assert report.summary().n_cancelled == 1


def test_tabular_view() -> None:
    plan = build_group_folds([1, 2, 3])
    report = aggregate_fold_results(
        plan, [_result(1), _result(2, status="failed"), _result(3, rsq=0.9, rmse=0.1)], strategy="random"
    )

    frame = report.to_frame()

    assert isinstance(frame, pd.DataFrame)
    assert frame["fold_id"].tolist() == [1, 2, 3]
    assert {"fold_id", "group_label", "rsq", "rmse", "n_train", "n_test", "status", "error"} <= set(frame.columns)
    assert pd.isna(frame.loc[1, "rsq"])
    assert frame.loc[1, "error"].startswith("ExternalFitFailure")


def test_report_is_immutable() -> None:
    plan = build_group_folds([1, 2])
    report = aggregate_fold_results(plan, [_result(1), _result(2)], strategy="random")

    with pytest.raises(Exception):
        report.strategy = "spatial"

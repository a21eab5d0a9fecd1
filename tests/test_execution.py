from __future__ import annotations

import threading
import time

import pytest

from geocv.components.execution import resolve_n_workers, run_fold_tasks
from geocv.components.splitters import build_group_folds
from geocv.contracts.results import FoldError, FoldResult
from geocv.core.errors import InvalidConfiguration


def _folds(k: int):
    labels = [g for g in range(1, k + 1) for _ in range(3)]
    return build_group_folds(labels).folds


def _ok(fold) -> FoldResult:
    return FoldResult(
        fold_id=fold.fold_id,
        group_label=int(fold.group_label),
        rsq=0.1 * fold.fold_id,
        rmse=float(fold.fold_id),
        n_train=fold.n_train,
        n_test=fold.n_test,
    )


def _failed(fold) -> FoldResult:
    return FoldResult(
        fold_id=fold.fold_id,
        group_label=int(fold.group_label),
        status="failed",
        error=FoldError(kind="ExternalFitFailure", message="boom"),
    )


def test_resolve_n_workers() -> None:
    assert resolve_n_workers(1, 5) == 1
    assert resolve_n_workers(-1, 5) == 5
    assert resolve_n_workers(8, 3) == 3
    assert resolve_n_workers(2, 0) == 1


def test_results_are_keyed_by_fold_not_completion_order() -> None:
    folds = _folds(5)

    def slow_first(fold):
        # earlier folds finish later
        time.sleep(0.02 * (len(folds) - fold.fold_id))
        return _ok(fold)

    seq = run_fold_tasks(folds, slow_first, n_jobs=1)
    par = run_fold_tasks(folds, slow_first, n_jobs=5)

    assert sorted(par) == [1, 2, 3, 4, 5]
    assert {k: v.model_dump() for k, v in seq.items()} == {k: v.model_dump() for k, v in par.items()}


def test_continue_policy_keeps_running_after_a_failure() -> None:
    folds = _folds(4)

    results = run_fold_tasks(folds, lambda f: _failed(f) if f.fold_id == 2 else _ok(f), on_error="continue")

    assert [results[i].status for i in range(1, 5)] == ["ok", "failed", "ok", "ok"]


def test_cancel_policy_marks_outstanding_folds_sequential() -> None:
    folds = _folds(4)
    calls = []

    def evaluate(fold):
        calls.append(fold.fold_id)
        return _failed(fold) if fold.fold_id == 2 else _ok(fold)

    results = run_fold_tasks(folds, evaluate, on_error="cancel")

    assert calls == [1, 2]
    assert [results[i].status for i in range(1, 5)] == ["ok", "failed", "cancelled", "cancelled"]
    assert results[3].error.kind == "Cancelled"
    assert results[3].n_test == 0


def test_cancel_policy_marks_outstanding_folds_in_pool() -> None:
    folds = _folds(6)
    started = []
    lock = threading.Lock()

    def evaluate(fold):
        with lock:
            started.append(fold.fold_id)
        if fold.fold_id == 1:
            return _failed(fold)
        time.sleep(0.2)
        return _ok(fold)

    results = run_fold_tasks(folds, evaluate, n_jobs=2, on_error="cancel")

    assert sorted(results) == [1, 2, 3, 4, 5, 6]
    assert results[1].status == "failed"
    cancelled = [i for i, r in results.items() if r.status == "cancelled"]
    assert cancelled
    assert not set(cancelled) & set(started)


def test_run_level_errors_propagate() -> None:
    folds = _folds(3)

    def evaluate(fold):
        raise InvalidConfiguration("broken run")

    with pytest.raises(InvalidConfiguration):
        run_fold_tasks(folds, evaluate, n_jobs=1)
    with pytest.raises(InvalidConfiguration):
        run_fold_tasks(folds, evaluate, n_jobs=3)


def test_unknown_policy_is_rejected() -> None:
    with pytest.raises(ValueError):
        run_fold_tasks(_folds(2), _ok, on_error="ignore")


def test_progress_is_reported_per_fold(progress) -> None:
    folds = _folds(4)

    run_fold_tasks(folds, _ok, n_jobs=2, progress=progress)

    assert progress.inits == [4]
    assert sorted(progress.updates) == [1, 2, 3, 4]
    assert progress.finalized == 1


def test_cancelled_folds_complete_the_progress_bar(progress) -> None:
    folds = _folds(4)

    results = run_fold_tasks(folds, lambda f: _failed(f) if f.fold_id == 1 else _ok(f), on_error="cancel", progress=progress)

    assert [results[i].status for i in range(1, 5)] == ["failed", "cancelled", "cancelled", "cancelled"]
    assert progress.updates == [1, 2, 3, 4]
    assert progress.finalized == 1

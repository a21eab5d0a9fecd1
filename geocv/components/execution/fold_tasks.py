from __future__ import annotations

"""Fan-out / fan-in of per-fold evaluation.

Folds are independent: each task reads only its own rows of the shared,
read-only dataset and returns its own result. Results are keyed by fold id,
so the completion order of a thread pool never changes the report.

Parallel runs use joblib's threading backend: fold tasks share the dataset
without copies and scikit-learn releases the GIL in its heavy kernels.

Cancellation policy (``on_error``):
- ``"continue"``: every fold runs; failed folds carry their error marker.
- ``"cancel"``: the first failed fold sets a stop flag; folds that start
  afterwards return a ``cancelled`` result without training. Folds already
  running finish normally.

Run-level errors raised by a task (anything that is not captured into a fold
result) set the same flag and propagate.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Optional, Sequence

from joblib import Parallel, delayed

from geocv.components.evaluation.fold_evaluator import failed_fold_result
from geocv.components.splitters.types import Fold
from geocv.contracts.choices import OnErrorPolicy
from geocv.contracts.results import FoldResult
from geocv.core.progress import ProgressCallback

logger = logging.getLogger(__name__)

FoldEvaluation = Callable[[Fold], FoldResult]


def resolve_n_workers(n_jobs: int, n_tasks: int) -> int:
    if n_tasks <= 0:
        return 1
    if n_jobs is None or int(n_jobs) == 0:
        return 1
    n = n_tasks if int(n_jobs) < 0 else int(n_jobs)
    return max(1, min(n, n_tasks))


def cancelled_fold_result(fold: Fold) -> FoldResult:
    return failed_fold_result(
        fold,
        RuntimeError(f"Fold {fold.fold_id} was cancelled after an earlier fold failed"),
        kind="Cancelled",
        status="cancelled",
    )


@dataclass
class _FoldTask:
    """Wraps the evaluation with the shared stop flag."""

    evaluate: FoldEvaluation
    on_error: OnErrorPolicy
    stop: threading.Event = field(default_factory=threading.Event)

    def __call__(self, fold: Fold) -> FoldResult:
        if self.stop.is_set():
            return cancelled_fold_result(fold)
        try:
            res = self.evaluate(fold)
        except BaseException:
            self.stop.set()
            raise
        if res.status == "failed" and self.on_error == "cancel":
            if not self.stop.is_set():
                logger.warning("Fold %d failed; cancelling folds that have not started", fold.fold_id)
            self.stop.set()
        return res


class _Tracker:
    """Counts finished folds (cancelled ones included) and forwards progress."""

    def __init__(self, total: int, progress: Optional[ProgressCallback], label: str) -> None:
        self.total = total
        self.done = 0
        self.progress = progress
        self.label = label
        if progress is not None:
            progress.init(total=total, label=f"{label}: 0/{total} folds")

    def tick(self, result: FoldResult) -> None:
        # cancelled folds count as finished so the bar reaches ``total``
        self.done += 1
        logger.debug("%s: fold %d finished (%s), %d/%d", self.label, result.fold_id, result.status, self.done, self.total)
        if self.progress is not None:
            self.progress.update(current=self.done, label=f"{self.label}: {self.done}/{self.total} folds")

    def finish(self) -> None:
        if self.progress is not None:
            self.progress.finalize(label=f"{self.label}: done")


def _iter_results(folds: Sequence[Fold], task: _FoldTask, n_workers: int) -> Iterable[FoldResult]:
    if n_workers == 1:
        return (task(fold) for fold in folds)
    parallel = Parallel(n_jobs=n_workers, backend="threading", batch_size=1, return_as="generator_unordered")
    return parallel(delayed(task)(fold) for fold in folds)


def run_fold_tasks(
    folds: Sequence[Fold],
    evaluate: FoldEvaluation,
    *,
    n_jobs: int = 1,
    on_error: OnErrorPolicy = "continue",
    progress: Optional[ProgressCallback] = None,
    label: str = "cv",
) -> Dict[int, FoldResult]:
    """Evaluate every fold and return results keyed by fold id.

    ``n_jobs == 1`` runs a plain loop; otherwise joblib threads with one task
    per fold (``-1`` = one worker per fold).
    """

    if on_error not in ("continue", "cancel"):
        raise ValueError(f"Unknown on_error policy: {on_error!r}")

    tracker = _Tracker(len(folds), progress, label)
    task = _FoldTask(evaluate=evaluate, on_error=on_error)

    results: Dict[int, FoldResult] = {}
    for res in _iter_results(folds, task, resolve_n_workers(n_jobs, len(folds))):
        results[res.fold_id] = res
        tracker.tick(res)

    tracker.finish()
    return results

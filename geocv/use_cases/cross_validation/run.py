from __future__ import annotations

"""Blocked cross-validation orchestration (one grouping strategy).

Flow: load table -> validate columns -> assign groups -> build
leave-one-group-out folds -> evaluate folds (sequentially or in a thread
pool) -> aggregate into an ordered report.

Run-level problems (:class:`~geocv.core.errors.InvalidConfiguration`) are
raised before any model is trained. Per-fold problems end up on the fold's
result.
"""

import logging
from functools import partial
from typing import List, Optional

import pandas as pd

from geocv.components.aggregation import aggregate_fold_results
from geocv.components.evaluation.fold_evaluator import check_columns, evaluate_fold
from geocv.components.execution import run_fold_tasks
from geocv.components.features.encoding import categorical_columns
from geocv.components.splitters import Fold, build_folds_from_assignment
from geocv.contracts.model_configs import get_model_family_by_algo
from geocv.contracts.results import CrossValidationReport, FoldResult
from geocv.contracts.run_config import CVRunConfig
from geocv.core.progress import ProgressCallback
from geocv.factories.data_loading_factory import make_data_loader
from geocv.factories.model_factory import make_model
from geocv.runtime.random.rng import RngManager
from geocv.use_cases._deps import resolve_seed

from .grouping import assign_groups

logger = logging.getLogger(__name__)


def _notes(frame: pd.DataFrame, cfg: CVRunConfig, grouping_seed: int) -> List[str]:
    notes = [f"{len(frame)} rows; grouping {cfg.grouping.strategy!r} with seed {grouping_seed}."]
    if cfg.grouping.columns and cfg.grouping.strategy != "random":
        scaled = "standardized " if cfg.grouping.effective_standardize() else ""
        notes.append(f"Groups from k-means on {scaled}columns {list(cfg.grouping.columns)}.")
    cats = categorical_columns(frame[list(cfg.data.predictors)])
    if cats:
        notes.append(f"Categorical predictors one-hot encoded within each fold: {cats}.")
    if cfg.eval.compute_importances and get_model_family_by_algo(cfg.model.algo) != "trees":
        notes.append(f"Feature importances are only reported for tree models; none for {cfg.model.algo!r}.")
    return notes


def _evaluate_one(
    fold: Fold,
    *,
    frame: pd.DataFrame,
    cfg: CVRunConfig,
    model_builder,
    seeds: dict[int, int],
) -> FoldResult:
    return evaluate_fold(
        fold,
        frame,
        target=cfg.data.target,
        predictors=cfg.data.predictors,
        model_builder=model_builder,
        seed=seeds[fold.fold_id],
        compute_importances=cfg.eval.compute_importances,
    )


def run_blocked_cv(
    cfg: CVRunConfig,
    *,
    data: Optional[pd.DataFrame] = None,
    rng: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> CrossValidationReport:
    """Run leave-one-group-out cross-validation for one grouping strategy.

    Parameters
    ----------
    cfg:
        Run configuration. ``cfg.data.path`` is read unless ``data`` is given.
    data:
        In-memory sample table; row order defines row indices.
    rng:
        Overrides ``cfg.eval.seed`` as the root seed.
    progress:
        Receives one update per completed fold.
    """

    frame = make_data_loader(cfg.data, frame=data).load()
    check_columns(frame, cfg.data.target, cfg.data.predictors)

    seed = resolve_seed(int(rng) if rng is not None else cfg.eval.seed, fallback=0)
    rngm = RngManager(seed)

    assignment = assign_groups(frame, cfg.grouping, rngm)
    plan = build_folds_from_assignment(
        assignment,
        allow_missing_groups=cfg.eval.allow_missing_groups,
    )

    model_builder = make_model(cfg.model)
    seeds = rngm.fold_seeds(plan.fold_ids)

    logger.info(
        "Blocked CV start: strategy=%s algo=%s k=%d folds=%d rows=%d n_jobs=%d",
        cfg.grouping.label,
        cfg.model.algo,
        cfg.grouping.n_groups,
        len(plan),
        len(frame),
        cfg.eval.n_jobs,
    )

    results = run_fold_tasks(
        plan.folds,
        partial(_evaluate_one, frame=frame, cfg=cfg, model_builder=model_builder, seeds=seeds),
        n_jobs=cfg.eval.n_jobs,
        on_error=cfg.eval.on_error,
        progress=progress,
        label=cfg.grouping.label,
    )

    report = aggregate_fold_results(
        plan,
        results,
        strategy=cfg.grouping.label,
        algo=cfg.model.algo,
        n_groups=cfg.grouping.n_groups,
        seed=seed,
        notes=_notes(frame, cfg, assignment.seed),
    )

    summary = report.summary()
    logger.info(
        "Blocked CV done: strategy=%s ok=%d degenerate=%d failed=%d cancelled=%d mean_rsq=%s mean_rmse=%s",
        summary.strategy,
        summary.n_ok,
        summary.n_degenerate,
        summary.n_failed,
        summary.n_cancelled,
        summary.mean_rsq,
        summary.mean_rmse,
    )
    return report

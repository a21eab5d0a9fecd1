"""Blocked cross-validation service (HTTP-agnostic).

Loads the table through the I/O adapter, runs the geocv use-case and returns
plain dicts for the router. Progress records are pre-initialised so the first
poll after submitting a run never 404s.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from geocv.api import compare_strategies, list_grouping_strategies, list_model_algos, run_blocked_cv
from geocv.contracts.run_config import ComparisonRunConfig, CVRunConfig

from ..adapters.io import load_table
from ..progress.callback import RegistryProgressCallback
from ..progress.registry import PROGRESS

logger = logging.getLogger(__name__)


def _with_progress(progress_id: Optional[str], total: int, fn: Callable[[Any], Any]) -> Any:
    if not progress_id:
        return fn(None)

    PROGRESS.init(progress_id, total=total, label="Starting…")
    cb = RegistryProgressCallback(progress_id)
    try:
        return fn(cb)
    except Exception as e:
        cb.fail(str(e))
        raise


def run_cross_validation(cfg: CVRunConfig) -> Dict[str, Any]:
    frame = load_table(cfg.data)

    report = _with_progress(
        cfg.eval.progress_id,
        cfg.grouping.n_groups,
        lambda cb: run_blocked_cv(cfg, data=frame, progress=cb),
    )
    return {"report": report, "summary": report.summary()}


def run_comparison(cfg: ComparisonRunConfig) -> Dict[str, Any]:
    frame = load_table(cfg.data)

    comparison = _with_progress(
        cfg.eval.progress_id,
        sum(g.n_groups for g in cfg.groupings),
        lambda cb: compare_strategies(cfg, data=frame, progress=cb),
    )
    return {"comparison": comparison, "summaries": comparison.summaries()}


def available_options() -> Dict[str, Any]:
    return {"strategies": list_grouping_strategies(), "models": list_model_algos()}

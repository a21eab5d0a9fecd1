from __future__ import annotations

"""Side-by-side comparison of grouping strategies on the same data and model."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from geocv.contracts.results import StrategyComparison
from geocv.contracts.run_config import ComparisonRunConfig
from geocv.core.progress import ProgressCallback
from geocv.factories.data_loading_factory import make_data_loader

from .cross_validation import run_blocked_cv

logger = logging.getLogger(__name__)


@dataclass
class _ComparisonProgress:
    """Maps per-run fold progress onto one bar covering every strategy.

    Each run owns a slice of ``budgets[i]`` steps; when it finishes the bar
    jumps to the end of that slice even if the run planned fewer folds.
    """

    inner: ProgressCallback
    budgets: List[int]
    offset: int = 0
    _run: int = 0

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        self.inner.update(current=self.offset, label=label)

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        budget = self.budgets[self._run]
        self.inner.update(current=self.offset + min(int(current), budget), label=label)

    def finalize(self, *, label: Optional[str] = None) -> None:
        self.offset += self.budgets[self._run]
        self._run += 1
        self.inner.update(current=self.offset, label=label)


def compare_strategies(
    cfg: ComparisonRunConfig,
    *,
    data: Optional[pd.DataFrame] = None,
    rng: Optional[int] = None,
    progress: Optional[ProgressCallback] = None,
) -> StrategyComparison:
    """Run one blocked CV per grouping and collect the reports in input order.

    The table is loaded once and shared by every run. All runs use the same
    root seed, so fold models differ only through the grouping.
    """

    frame = make_data_loader(cfg.data, frame=data).load()
    run_cfgs = cfg.run_configs()

    scoped: Optional[_ComparisonProgress] = None
    if progress is not None:
        budgets = [int(g.n_groups) for g in cfg.groupings]
        progress.init(total=sum(budgets), label="Comparing strategies")
        scoped = _ComparisonProgress(progress, budgets)

    logger.info("Comparing %d grouping(s): %s", len(run_cfgs), [g.label for g in cfg.groupings])

    reports = [run_blocked_cv(rc, data=frame, rng=rng, progress=scoped) for rc in run_cfgs]

    if progress is not None:
        progress.finalize(label="Comparison done")
    return StrategyComparison(reports=reports)

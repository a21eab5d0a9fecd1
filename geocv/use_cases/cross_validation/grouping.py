from __future__ import annotations

"""Row -> group assignment for one grouping configuration."""

import logging

import numpy as np
import pandas as pd

from geocv.components.grouping.types import GroupAssignment
from geocv.contracts.grouping_configs import GroupingModel
from geocv.core.errors import InvalidConfiguration
from geocv.factories.grouping_factory import make_grouping
from geocv.runtime.random.rng import RngManager

logger = logging.getLogger(__name__)


def grouping_seed(cfg: GroupingModel, rngm: RngManager) -> int:
    """An explicit grouping seed wins; otherwise a named child of the run seed."""
    if cfg.seed is not None:
        return int(cfg.seed)
    return rngm.grouping_seed(cfg.label)


def grouping_features(data: pd.DataFrame, cfg: GroupingModel) -> np.ndarray:
    """Matrix handed to the clusterer.

    ``random`` only needs the row count. k-means strategies need complete,
    numeric grouping columns: every row must get a label, so rows cannot be
    dropped here.
    """

    if cfg.strategy == "random":
        return np.arange(len(data), dtype=float).reshape(-1, 1)

    if not cfg.columns:
        raise InvalidConfiguration(
            f"The {cfg.strategy!r} grouping strategy needs `columns` "
            "(coordinates for spatial, covariates for environmental)."
        )
    missing = [c for c in cfg.columns if c not in data.columns]
    if missing:
        raise InvalidConfiguration(f"Grouping columns not found in dataset: {missing}")

    block = data[list(cfg.columns)]
    non_numeric = [c for c in block.columns if not pd.api.types.is_numeric_dtype(block[c])]
    if non_numeric:
        raise InvalidConfiguration(f"Grouping columns must be numeric; got {non_numeric}")
    n_missing = int(block.isna().any(axis=1).sum())
    if n_missing:
        raise InvalidConfiguration(
            f"{n_missing} row(s) have missing values in grouping columns {list(cfg.columns)}; "
            "every row needs a group."
        )
    return block.to_numpy(dtype=float)


def assign_groups(data: pd.DataFrame, cfg: GroupingModel, rngm: RngManager) -> GroupAssignment:
    seed = grouping_seed(cfg, rngm)
    clusterer = make_grouping(cfg, seed=seed)
    labels = clusterer.assign(grouping_features(data, cfg), cfg.n_groups)

    assignment = GroupAssignment.from_labels(labels, cfg.n_groups, strategy=cfg.strategy, seed=seed)
    logger.debug("%s grouping (seed=%d): sizes %s", cfg.label, seed, assignment.group_sizes())
    return assignment

from __future__ import annotations

"""Label-producing strategies (random / spatial / environmental).

All strategies share the :class:`geocv.components.interfaces.Clusterer`
protocol, so fold construction and evaluation do not care which one produced
the labels. Labels are always ``1..n_groups``.
"""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
from sklearn.cluster import KMeans
from sklearn.preprocessing import StandardScaler

from geocv.components.interfaces import Clusterer
from geocv.contracts.grouping_configs import GroupingModel
from geocv.core.errors import InvalidConfiguration
from geocv.core.shapes import coerce_feature_matrix

logger = logging.getLogger(__name__)


def _check_n_groups(n_groups: int) -> int:
    k = int(n_groups)
    if k < 1:
        raise InvalidConfiguration(f"n_groups must be a positive integer; got {n_groups!r}")
    return k


@dataclass
class RandomGroupAssigner(Clusterer):
    """Shuffle rows into ``n_groups`` near-equal buckets.

    Bucket sizes differ by at most one row. Only the number of rows in
    ``features`` is used.
    """

    seed: Optional[int] = None

    def assign(self, features: np.ndarray, n_groups: int) -> np.ndarray:
        k = _check_n_groups(n_groups)
        n = int(np.asarray(features).shape[0])
        rng = np.random.default_rng(self.seed)
        labels = (np.arange(n) % k) + 1
        return rng.permutation(labels).astype(int)


@dataclass
class KMeansClusterer(Clusterer):
    """k-means blocks on selected numeric columns.

    Used for spatial blocks (coordinates) and environmental blocks
    (covariates). With ``standardize`` the columns are z-scored first so that
    covariates on large scales do not dominate the distance.
    """

    cfg: GroupingModel
    seed: Optional[int] = None

    def _prepare(self, features: np.ndarray) -> np.ndarray:
        try:
            X = coerce_feature_matrix(features, context=f"{self.cfg.strategy} grouping columns")
        except ValueError as e:
            raise InvalidConfiguration(str(e)) from e
        if self.cfg.effective_standardize():
            X = StandardScaler().fit_transform(X)
        return X

    def assign(self, features: np.ndarray, n_groups: int) -> np.ndarray:
        k = _check_n_groups(n_groups)
        X = self._prepare(features)
        if X.shape[0] < k:
            raise InvalidConfiguration(
                f"Cannot form {k} {self.cfg.strategy} clusters from {X.shape[0]} rows."
            )

        km = KMeans(
            n_clusters=k,
            init=self.cfg.init,
            n_init=self.cfg.n_init,
            max_iter=self.cfg.max_iter,
            random_state=self.seed,
        )
        raw = km.fit_predict(X)

        labels = np.asarray(raw, dtype=int) + 1
        n_distinct = int(np.unique(labels).size)
        if n_distinct < k:
            # Duplicate points can leave k-means with fewer distinct clusters.
            logger.warning(
                "%s clustering produced %d non-empty groups out of %d requested",
                self.cfg.strategy,
                n_distinct,
                k,
            )
        return labels

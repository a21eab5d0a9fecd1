from __future__ import annotations
from typing import Protocol, Any, Optional, Tuple

import numpy as np
import pandas as pd

class DataLoader(Protocol):
    def load(self) -> pd.DataFrame:
        """Return the dataset as a frame; row order defines row indices."""
        ...

class Clusterer(Protocol):
    """Produces one group label per row.

    Implementations must return integer labels in ``1..n_groups`` and be
    reproducible for a fixed seed. A label may end up with no members (e.g.
    fewer rows than groups); the fold builder reports that.
    """

    def assign(self, features: np.ndarray, n_groups: int) -> np.ndarray:
        ...

class ModelBuilder(Protocol):
    def make_estimator(self, *, seed: Optional[int] = None) -> Any:
        """Return a configured, unfitted regressor exposing fit/predict."""
        ...

class Encoder(Protocol):
    def fit_transform_train_test(
        self,
        X_train: pd.DataFrame,
        X_test: pd.DataFrame,
    ) -> Tuple[pd.DataFrame, pd.DataFrame]:
        """Fit on train, transform both; return numeric (X_train, X_test) frames."""
        ...

class Scorer(Protocol):
    def score(
        self,
        y_true: np.ndarray,
        y_pred: np.ndarray,
    ) -> "FoldScores":
        """Return fold metrics; undefined metrics are flagged, never NaN."""
        ...

from __future__ import annotations

"""Public shape utilities.

Conventions
-----------
- feature matrices are 2D: (n_samples, n_features)
- label / target vectors are 1D: (n_samples,)
"""

import numpy as np


def coerce_feature_matrix(X, *, context: str = "features") -> np.ndarray:
    """Coerce to a finite 2D float matrix.

    - Accepts 1D and reshapes to (n_samples, 1)
    - Enforces 2D, non-empty and finite values.
    """

    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X[:, None]

    if X.ndim != 2:
        raise ValueError(f"{context} must be 2D; got {X.shape}")

    n_rows, n_cols = X.shape
    if n_rows < 1 or n_cols < 1:
        raise ValueError(f"{context} must have at least 1 sample and 1 feature; got {X.shape}")

    if not np.isfinite(X).all():
        n_bad = int((~np.isfinite(X)).sum())
        raise ValueError(f"{context} contains {n_bad} missing/non-finite values")

    return X


def coerce_1d(a) -> np.ndarray:
    """Return a 1D view of ``a`` (column vectors are flattened)."""

    arr = np.asarray(a)
    if arr.ndim == 2 and 1 in arr.shape:
        return arr.reshape(-1)
    if arr.ndim != 1:
        raise ValueError(f"Expected a 1D array; got shape {arr.shape}")
    return arr


def check_same_length(a: np.ndarray, b: np.ndarray, *, names: tuple[str, str] = ("a", "b")) -> None:
    if a.shape[0] != b.shape[0]:
        raise ValueError(
            f"Length mismatch: {names[0]}({a.shape[0]}) vs {names[1]}({b.shape[0]})."
        )

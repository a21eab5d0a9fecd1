from __future__ import annotations

"""Small sklearn-centric helpers.

Uses duck-typing instead of importing sklearn at import time.
"""

from typing import Any, Optional

import numpy as np


def unwrap_final_estimator(model: Any) -> Any:
    """Return the final estimator for a Pipeline-like model, else the model itself."""
    steps = getattr(model, "steps", None)
    if isinstance(steps, list) and len(steps) > 0:
        return steps[-1][1]
    return model


def feature_importances(model: Any) -> Optional[np.ndarray]:
    """Impurity-based importances of a fitted tree model, or None if unavailable."""
    est = unwrap_final_estimator(model)
    imp = getattr(est, "feature_importances_", None)
    if imp is None:
        return None
    return np.asarray(imp, dtype=float).reshape(-1)

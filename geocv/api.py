"""Public geocv API.

This module is the **stable public surface** for invoking use-cases.

Prefer importing from here instead of reaching into internal subpackages:

    from geocv.api import compare_strategies, run_blocked_cv

The backend and scripts may depend on this module.

The underlying implementations live under :mod:`geocv.use_cases`.
"""

from __future__ import annotations

from geocv.use_cases import compare_strategies, run_blocked_cv

# Non-use-case helpers that are still part of the stable public surface.
from geocv.components.splitters import build_group_folds
from geocv.core.progress import ProgressCallback
from geocv.io.readers import load_from_data_model
from geocv.registries.grouping import list_grouping_strategies
from geocv.registries.models import list_model_algos

__all__ = [
    "run_blocked_cv",
    "compare_strategies",
    "build_group_folds",
    "load_from_data_model",
    "list_grouping_strategies",
    "list_model_algos",
    "ProgressCallback",
]

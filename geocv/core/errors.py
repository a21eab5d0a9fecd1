from __future__ import annotations

"""Error taxonomy for blocked cross-validation.

Run-level errors (:class:`InvalidConfiguration`) abort before any fold is
trained. Per-fold errors (:class:`EmptyFold`, :class:`ExternalFitFailure`) are
captured into the fold's result by the evaluator and never abort a run.
:class:`DegenerateMetric` is raised by metric helpers and converted into a
sentinel value plus a fold flag.
"""

from typing import Any, Optional


class GeoCVError(Exception):
    """Base class for all geocv errors."""


class InvalidConfiguration(GeoCVError, ValueError):
    """The run is structurally broken (k < 2, empty group, unknown column, ...)."""

    def __init__(self, message: str, *, group_label: Optional[Any] = None) -> None:
        super().__init__(message)
        self.group_label = group_label


class EmptyFold(GeoCVError):
    """A fold's train or test subset is empty after missing-value filtering."""

    def __init__(self, message: str, *, fold_id: Optional[int] = None, subset: str = "test") -> None:
        super().__init__(message)
        self.fold_id = fold_id
        self.subset = subset


class DegenerateMetric(GeoCVError, ArithmeticError):
    """A metric is mathematically undefined for the given inputs."""

    def __init__(self, message: str, *, reason: str) -> None:
        super().__init__(message)
        self.reason = reason


class ExternalFitFailure(GeoCVError):
    """The delegated model fit/predict call raised."""

    def __init__(self, message: str, *, fold_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.fold_id = fold_id


__all__ = [
    "GeoCVError",
    "InvalidConfiguration",
    "EmptyFold",
    "DegenerateMetric",
    "ExternalFitFailure",
]

from __future__ import annotations

"""Fold contracts.

Fold builders yield a *single, stable* fold payload shape so that evaluators
and orchestrators never guess tuple layouts.
"""

from dataclasses import dataclass, field
from typing import Any, List, Tuple

import numpy as np

from geocv.core.errors import InvalidConfiguration


def _frozen_index(a) -> np.ndarray:
    arr = np.asarray(a, dtype=int).reshape(-1)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Fold:
    """One leave-one-group-out split.

    Notes
    -----
    - ``train_idx`` / ``test_idx`` are sorted positional row indices into the
      dataset and are read-only.
    - ``fold_id`` is the 1-based construction order, independent of the value
      of ``group_label``.
    """

    fold_id: int
    group_label: Any
    train_idx: np.ndarray
    test_idx: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "train_idx", _frozen_index(self.train_idx))
        object.__setattr__(self, "test_idx", _frozen_index(self.test_idx))

    @property
    def n_train(self) -> int:
        return int(self.train_idx.shape[0])

    @property
    def n_test(self) -> int:
        return int(self.test_idx.shape[0])

    def key(self) -> Tuple[int, Any, Tuple[int, ...], Tuple[int, ...]]:
        """Hashable identity used to compare fold sets."""
        return (
            self.fold_id,
            self.group_label,
            tuple(self.train_idx.tolist()),
            tuple(self.test_idx.tolist()),
        )


@dataclass(frozen=True)
class FoldPlan:
    """Folds built from one group assignment.

    ``problems`` holds the configuration errors found while building (groups
    with no members) when the partial-result policy is active.
    """

    folds: Tuple[Fold, ...]
    n_rows: int
    expected_groups: Tuple[Any, ...]
    problems: Tuple[InvalidConfiguration, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.folds)

    def __iter__(self):
        return iter(self.folds)

    @property
    def fold_ids(self) -> List[int]:
        return [f.fold_id for f in self.folds]

    def fold(self, fold_id: int) -> Fold:
        for f in self.folds:
            if f.fold_id == fold_id:
                return f
        raise KeyError(f"No fold with id {fold_id!r}")

from __future__ import annotations

"""Leave-one-group-out fold construction.

Turns a label vector into disjoint train/test index sets: the test set of the
fold for label ``l`` is every row labelled ``l``, the training set is every
other row. No randomness is introduced here, so the same labels always give
the same folds.
"""

import logging
from typing import Any, Iterable, List, Optional, Sequence

import numpy as np

from geocv.components.grouping.types import GroupAssignment
from geocv.core.errors import InvalidConfiguration

from .types import Fold, FoldPlan

logger = logging.getLogger(__name__)


def _py(v: Any) -> Any:
    """numpy scalar -> python scalar (labels end up in JSON payloads)."""
    return v.item() if isinstance(v, np.generic) else v


def _sorted_labels(values: Iterable[Any]) -> List[Any]:
    try:
        return sorted(values)
    except TypeError as e:
        raise InvalidConfiguration(f"Group labels must be mutually comparable: {e}") from e


def build_group_folds(
    labels: Sequence[Any],
    *,
    expected_groups: Optional[Iterable[Any]] = None,
    allow_missing_groups: bool = False,
) -> FoldPlan:
    """Build one fold per expected group label.

    Parameters
    ----------
    labels:
        One group label per row; row ``i`` of the dataset has ``labels[i]``.
    expected_groups:
        The label set the run asked for (e.g. ``range(1, k + 1)``). ``None``
        uses the sorted unique labels.
    allow_missing_groups:
        When a requested group has no members, ``False`` raises
        :class:`InvalidConfiguration`; ``True`` skips that fold and records the
        error on the returned plan.

    Raises
    ------
    InvalidConfiguration
        ``k < 2``, labels outside the expected set, an empty group in strict
        mode, or fewer than two populated groups.
    """

    arr = np.asarray(labels).reshape(-1)
    n_rows = int(arr.shape[0])
    if n_rows == 0:
        raise InvalidConfiguration("Cannot build folds for an empty dataset.")

    present = _sorted_labels({_py(v) for v in arr.tolist()})
    if expected_groups is None:
        expected = present
    else:
        expected = _sorted_labels({_py(v) for v in expected_groups})

    k = len(expected)
    if k < 2:
        raise InvalidConfiguration(
            f"Blocked cross-validation needs at least 2 groups; got k={k}. "
            "With a single group no training rows remain once it is held out."
        )

    expected_set = set(expected)
    unknown = [v for v in present if v not in expected_set]
    if unknown:
        raise InvalidConfiguration(
            f"Labels {unknown} are not among the expected groups {expected}."
        )

    folds: List[Fold] = []
    problems: List[InvalidConfiguration] = []
    fold_id = 0
    for label in expected:
        test_mask = arr == label
        if not bool(test_mask.any()):
            err = InvalidConfiguration(
                f"Group {label!r} has no members; its fold cannot be built.",
                group_label=label,
            )
            if not allow_missing_groups:
                raise err
            logger.warning("Skipping fold for empty group %r", label)
            problems.append(err)
            continue

        fold_id += 1
        folds.append(
            Fold(
                fold_id=fold_id,
                group_label=label,
                train_idx=np.flatnonzero(~test_mask),
                test_idx=np.flatnonzero(test_mask),
            )
        )

    if len(folds) < 2:
        raise InvalidConfiguration(
            f"Only {len(folds)} of {k} groups have members; at least 2 are required."
        )

    return FoldPlan(
        folds=tuple(folds),
        n_rows=n_rows,
        expected_groups=tuple(expected),
        problems=tuple(problems),
    )


def build_folds_from_assignment(
    assignment: GroupAssignment,
    *,
    allow_missing_groups: bool = False,
) -> FoldPlan:
    """Convenience wrapper using the assignment's expected label set."""
    return build_group_folds(
        assignment.labels,
        expected_groups=assignment.expected_groups,
        allow_missing_groups=allow_missing_groups,
    )

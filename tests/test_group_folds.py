from __future__ import annotations

import numpy as np
import pytest

from geocv.components.grouping.types import GroupAssignment
from geocv.components.splitters import build_folds_from_assignment, build_group_folds
from geocv.core.errors import InvalidConfiguration


def test_ten_rows_five_groups() -> None:
    labels = [1, 1, 2, 2, 3, 3, 4, 4, 5, 5]

    plan = build_group_folds(labels, expected_groups=range(1, 6))

    assert len(plan) == 5
    assert plan.fold_ids == [1, 2, 3, 4, 5]
    first = plan.fold(1)
    assert first.test_idx.tolist() == [0, 1]
    assert first.train_idx.tolist() == list(range(2, 10))
    assert all(f.n_test == 2 for f in plan)
    union = sorted(i for f in plan for i in f.test_idx.tolist())
    assert union == list(range(10))


def test_test_sets_partition_rows_and_never_overlap_train() -> None:
    rng = np.random.default_rng(3)
    labels = rng.integers(1, 8, size=200)

    plan = build_group_folds(labels)

    assert len(plan) == len(np.unique(labels))
    seen = np.concatenate([f.test_idx for f in plan])
    assert sorted(seen.tolist()) == list(range(200))
    for f in plan:
        assert set(f.train_idx.tolist()).isdisjoint(f.test_idx.tolist())
        assert f.n_train + f.n_test == 200
        assert np.all(labels[f.test_idx] == f.group_label)
        assert np.all(labels[f.train_idx] != f.group_label)


def test_builder_is_idempotent() -> None:
    labels = [3, 1, 2, 3, 1, 2, 2]

    first = build_group_folds(labels)
    second = build_group_folds(labels)

    assert [f.key() for f in first] == [f.key() for f in second]


def test_fold_ids_follow_label_order_not_label_values() -> None:
    plan = build_group_folds([30, 10, 20, 30, 10])

    assert [(f.fold_id, f.group_label) for f in plan] == [(1, 10), (2, 20), (3, 30)]


def test_single_group_is_rejected() -> None:
    with pytest.raises(InvalidConfiguration, match="at least 2 groups"):
        build_group_folds([1, 1, 1])
    with pytest.raises(InvalidConfiguration):
        build_group_folds([1, 1, 1], expected_groups=range(1, 2))


def test_empty_dataset_is_rejected() -> None:
    with pytest.raises(InvalidConfiguration):
        build_group_folds([])


def test_unknown_labels_are_rejected() -> None:
    with pytest.raises(InvalidConfiguration, match="not among the expected groups"):
        build_group_folds([1, 2, 7], expected_groups=[1, 2, 3])


def test_missing_group_fails_in_strict_mode() -> None:
    labels = [1, 1, 2, 2, 3, 3, 4, 4]

    with pytest.raises(InvalidConfiguration, match="Group 5") as info:
        build_group_folds(labels, expected_groups=range(1, 6))
    assert info.value.group_label == 5


def test_missing_group_is_recorded_in_partial_mode() -> None:
    labels = [1, 1, 2, 2, 3, 3, 4, 4]

    plan = build_group_folds(labels, expected_groups=range(1, 6), allow_missing_groups=True)

    assert len(plan) == 4
    assert plan.fold_ids == [1, 2, 3, 4]
    assert [p.group_label for p in plan.problems] == [5]


def test_partial_mode_still_needs_two_populated_groups() -> None:
    with pytest.raises(InvalidConfiguration, match="Only 1"):
        build_group_folds([2, 2, 2], expected_groups=[1, 2, 3], allow_missing_groups=True)


def test_fold_indices_are_read_only() -> None:
    plan = build_group_folds([1, 2, 1, 2])

    with pytest.raises(ValueError):
        plan.fold(1).test_idx[0] = 3


def test_assignment_wrapper_uses_expected_groups() -> None:
    assignment = GroupAssignment.from_labels([1, 1, 2, 2], n_groups=3)

    assert assignment.missing_groups() == [3]
    plan = build_folds_from_assignment(assignment, allow_missing_groups=True)
    assert len(plan) == 2
    assert plan.expected_groups == (1, 2, 3)

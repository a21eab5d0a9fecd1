from __future__ import annotations

import numpy as np
import pytest

from geocv.components.grouping import KMeansClusterer, RandomGroupAssigner
from geocv.contracts.grouping_configs import GroupingModel
from geocv.core.errors import InvalidConfiguration
from geocv.registries.grouping import list_grouping_strategies, make_clusterer


def _two_clouds(n: int = 20) -> np.ndarray:
    rng = np.random.default_rng(0)
    left = rng.normal(loc=(0.0, 0.0), scale=1.0, size=(n, 2))
    right = rng.normal(loc=(500.0, 500.0), scale=1.0, size=(n, 2))
    return np.vstack([left, right])


def test_random_groups_are_balanced_and_reproducible() -> None:
    features = np.zeros((23, 1))

    labels = RandomGroupAssigner(seed=7).assign(features, 5)
    again = RandomGroupAssigner(seed=7).assign(features, 5)

    assert labels.tolist() == again.tolist()
    assert set(labels.tolist()) == {1, 2, 3, 4, 5}
    counts = np.bincount(labels)[1:]
    assert counts.max() - counts.min() <= 1


def test_random_groups_depend_on_seed() -> None:
    features = np.zeros((100, 1))

    a = RandomGroupAssigner(seed=1).assign(features, 4)
    b = RandomGroupAssigner(seed=2).assign(features, 4)

    assert a.tolist() != b.tolist()


def test_spatial_blocks_separate_point_clouds() -> None:
    cfg = GroupingModel(strategy="spatial", n_groups=2, columns=["x", "y"])

    labels = KMeansClusterer(cfg, seed=0).assign(_two_clouds(), 2)

    assert set(labels.tolist()) == {1, 2}
    assert len(set(labels[:20].tolist())) == 1
    assert len(set(labels[20:].tolist())) == 1
    assert labels[0] != labels[-1]


def test_kmeans_is_reproducible_with_fixed_seed() -> None:
    rng = np.random.default_rng(4)
    X = rng.normal(size=(60, 3))
    cfg = GroupingModel(strategy="environmental", n_groups=4, columns=["a", "b", "c"])

    first = KMeansClusterer(cfg, seed=42).assign(X, 4)
    second = KMeansClusterer(cfg, seed=42).assign(X, 4)

    assert first.tolist() == second.tolist()
    assert first.min() >= 1 and first.max() <= 4


def test_environmental_grouping_standardizes_by_default() -> None:
    assert GroupingModel(strategy="environmental").effective_standardize() is True
    assert GroupingModel(strategy="spatial").effective_standardize() is False
    assert GroupingModel(strategy="environmental", standardize=False).effective_standardize() is False


def test_standardization_balances_covariate_scales() -> None:
    # column 0 separates two groups on a small scale; column 1 is large noise
    rng = np.random.default_rng(9)
    signal = np.r_[np.zeros(30), np.ones(30)] + rng.normal(scale=0.01, size=60)
    noise = rng.uniform(0, 1000.0, size=60)
    X = np.c_[signal, noise]

    cfg = GroupingModel(strategy="environmental", n_groups=2, columns=["s", "n"])
    labels = KMeansClusterer(cfg, seed=0).assign(X, 2)

    # after z-scoring the clean 0/1 split dominates the uniform noise
    assert len(set(labels[:30].tolist())) == 1
    assert len(set(labels[30:].tolist())) == 1


def test_kmeans_rejects_bad_inputs() -> None:
    cfg = GroupingModel(strategy="spatial", n_groups=5, columns=["x", "y"])

    with pytest.raises(InvalidConfiguration):
        KMeansClusterer(cfg, seed=0).assign(np.zeros((3, 2)), 5)
    with pytest.raises(InvalidConfiguration):
        KMeansClusterer(cfg, seed=0).assign(np.array([[0.0, np.nan], [1.0, 1.0]]), 2)


def test_registry_knows_every_strategy() -> None:
    assert list_grouping_strategies() == ["environmental", "random", "spatial"]
    assert isinstance(make_clusterer(GroupingModel(strategy="random"), seed=1), RandomGroupAssigner)
    assert isinstance(
        make_clusterer(GroupingModel(strategy="spatial", columns=["x", "y"]), seed=1),
        KMeansClusterer,
    )

    bogus = GroupingModel.model_construct(strategy="hexagons")
    with pytest.raises(InvalidConfiguration, match="Unknown grouping strategy"):
        make_clusterer(bogus)

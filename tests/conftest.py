from __future__ import annotations

import numpy as np
import pandas as pd
import pytest


def make_samples(n_per_cluster: int = 30, seed: int = 0) -> pd.DataFrame:
    """Four well-separated point clouds with a smooth environmental signal."""
    rng = np.random.default_rng(seed)
    centers = np.array([[0.0, 0.0], [1000.0, 0.0], [0.0, 1000.0], [1000.0, 1000.0]])
    cluster = np.repeat(np.arange(len(centers)), n_per_cluster)
    n = cluster.size

    xy = centers[cluster] + rng.normal(scale=20.0, size=(n, 2))
    elevation = 200.0 + 300.0 * cluster + rng.normal(scale=25.0, size=n)
    mean_temp = 18.0 - 0.006 * elevation + rng.normal(scale=0.3, size=n)
    annual_precip = rng.normal(800.0, 120.0, size=n)
    landcover = rng.choice(["forest", "crop", "grass"], size=n)

    soc = (
        0.01 * elevation
        + 0.002 * annual_precip
        - 0.3 * mean_temp
        + 2.0 * (landcover == "forest")
        + rng.normal(scale=0.5, size=n)
    )
    return pd.DataFrame(
        {
            "x": xy[:, 0],
            "y": xy[:, 1],
            "elevation": elevation,
            "mean_temp": mean_temp,
            "annual_precip": annual_precip,
            "landcover": landcover,
            "soc": soc,
        }
    )


PREDICTORS = ["elevation", "mean_temp", "annual_precip", "landcover"]


@pytest.fixture
def samples() -> pd.DataFrame:
    return make_samples()


class RecordingProgress:
    """ProgressCallback that keeps every call for assertions."""

    def __init__(self) -> None:
        self.inits: list[int] = []
        self.updates: list[int] = []
        self.finalized = 0

    def init(self, *, total: int, label=None) -> None:
        self.inits.append(int(total))

    def update(self, *, current: int, label=None) -> None:
        self.updates.append(int(current))

    def finalize(self, *, label=None) -> None:
        self.finalized += 1


@pytest.fixture
def progress() -> RecordingProgress:
    return RecordingProgress()

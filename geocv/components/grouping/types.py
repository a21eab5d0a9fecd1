from __future__ import annotations

"""Group assignment contract.

A :class:`GroupAssignment` is the hand-off between a clusterer and the fold
builder: one label per row (row order = dataset order) plus the label set the
run expected. Keeping the expected set explicit lets the fold builder tell a
group that was never requested apart from one that came out empty.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class GroupAssignment:
    labels: np.ndarray
    expected_groups: Tuple[int, ...]
    strategy: str = "random"
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        labels = np.asarray(self.labels).reshape(-1)
        labels.setflags(write=False)
        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "expected_groups", tuple(int(g) for g in self.expected_groups))

    @classmethod
    def from_labels(
        cls,
        labels,
        n_groups: int,
        *,
        strategy: str = "random",
        seed: Optional[int] = None,
    ) -> "GroupAssignment":
        return cls(
            labels=np.asarray(labels, dtype=int),
            expected_groups=tuple(range(1, int(n_groups) + 1)),
            strategy=strategy,
            seed=seed,
        )

    @property
    def n_rows(self) -> int:
        return int(self.labels.shape[0])

    @property
    def n_groups(self) -> int:
        return len(self.expected_groups)

    def group_sizes(self) -> dict[int, int]:
        return {g: int(np.sum(self.labels == g)) for g in self.expected_groups}

    def missing_groups(self) -> list[int]:
        return [g for g, n in self.group_sizes().items() if n == 0]

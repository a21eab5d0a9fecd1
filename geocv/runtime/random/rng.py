from __future__ import annotations

"""Named, order-independent seeds for one run.

Every random decision of a run takes its seed from a *name* under one root
seed: ``grouping/<label>`` for the group assignment and ``model/fold<i>`` for
the estimator of fold ``i``. Since names (not draw order) decide the seed,
fold ``i`` gets the same model whether folds run in a loop or in a pool, and
adding a strategy to a comparison does not shift the seeds of the others.
"""

import hashlib
from typing import Iterable, Optional


class RngManager:
    """Single source of truth for randomness within one run."""

    def __init__(self, seed: Optional[int]):
        # uint32 root, the range sklearn accepts for random_state
        self._root = 0 if seed is None else int(seed) & 0xFFFFFFFF

    @property
    def root_seed(self) -> int:
        return self._root

    def child_seed(self, name: str) -> int:
        digest = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        return int.from_bytes(digest[:4], "little", signed=False)

    def grouping_seed(self, label: str) -> int:
        return self.child_seed(f"grouping/{label}")

    def fold_seed(self, fold_id: int) -> int:
        return self.child_seed(f"model/fold{int(fold_id)}")

    def fold_seeds(self, fold_ids: Iterable[int]) -> dict[int, int]:
        return {int(i): self.fold_seed(i) for i in fold_ids}

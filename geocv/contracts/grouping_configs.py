from __future__ import annotations

from typing import List, Optional, Union, Literal

from pydantic import BaseModel, Field, field_validator

from .choices import GroupingStrategyName, KMeansInit


class GroupingModel(BaseModel):
    """How rows are assigned to the k blocks used as CV folds.

    - ``random``: rows are shuffled into ``n_groups`` near-equal buckets.
    - ``spatial``: k-means on coordinate ``columns`` (e.g. ``["x", "y"]``).
    - ``environmental``: k-means on covariate ``columns``; standardized first
      unless ``standardize`` is set to False.

    ``n_groups`` is deliberately not range-checked here: ``k < 2`` is reported
    as :class:`geocv.core.errors.InvalidConfiguration` by the fold builder.
    """

    strategy: GroupingStrategyName = "random"
    n_groups: int = 5
    columns: List[str] = Field(default_factory=list)
    standardize: Optional[bool] = None

    # k-means controls (ignored for random)
    init: KMeansInit = "k-means++"
    n_init: Union[int, Literal["auto"]] = 10
    max_iter: int = 300

    seed: Optional[int] = None
    name: Optional[str] = None

    @field_validator("columns", mode="before")
    @classmethod
    def _split_column_string(cls, v):
        if v is None or v == "":
            return []
        if isinstance(v, str):
            return [t.strip() for t in v.split(",") if t.strip()]
        return v

    @property
    def label(self) -> str:
        """Name used for this grouping in reports (defaults to the strategy)."""
        return self.name or self.strategy

    def effective_standardize(self) -> bool:
        if self.standardize is not None:
            return bool(self.standardize)
        return self.strategy == "environmental"

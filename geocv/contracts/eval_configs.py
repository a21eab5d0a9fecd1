from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, field_validator

from .choices import OnErrorPolicy


class EvalModel(BaseModel):
    seed: Optional[int] = None
    # 1 -> sequential loop; >1 -> thread pool; -1 -> one worker per fold
    n_jobs: int = 1
    on_error: OnErrorPolicy = "continue"
    # Partial-result policy for groups that ended up with no members
    allow_missing_groups: bool = False
    compute_importances: bool = False
    # Optional progress id used by the backend progress endpoint
    progress_id: Optional[str] = None

    @field_validator("n_jobs", mode="before")
    @classmethod
    def _empty_to_one(cls, v):
        if v is None or v == "":
            return 1
        v = int(v)
        if v == 0:
            raise ValueError("n_jobs must be a positive integer or -1")
        return v

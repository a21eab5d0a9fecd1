from __future__ import annotations

"""Result contracts for the engine.

These models represent *outputs* produced by components and use-cases and are
intended to be stable across backend/script changes.

Design goals:
- JSON-friendly field types (lists, dicts, scalars) at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.
- Results are immutable once built (frozen models).

Note: contracts should only depend on stdlib + pydantic.
"""

from typing import Union

from pydantic import BaseModel, ConfigDict

# Group labels are allowed to be integers or strings.
Label = Union[int, str]


class ResultModel(BaseModel):
    """Base class for result contracts (strict and frozen)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

from __future__ import annotations

from typing import ClassVar, Literal, Optional

from pydantic import BaseModel

from ..choices import RidgeSolver


class LinearRegConfig(BaseModel):
    algo: Literal["linreg"] = "linreg"

    family: ClassVar[str] = "linear"

    fit_intercept: bool = True
    copy_X: bool = True
    n_jobs: Optional[int] = None
    positive: bool = False


class RidgeRegressorConfig(BaseModel):
    algo: Literal["ridgereg"] = "ridgereg"

    family: ClassVar[str] = "linear"

    alpha: float = 1.0
    fit_intercept: bool = True
    max_iter: Optional[int] = None
    tol: float = 1e-4
    solver: RidgeSolver = "auto"

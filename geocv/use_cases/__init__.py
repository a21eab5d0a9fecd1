"""geocv use-cases (orchestration entry points)."""

from .comparison import compare_strategies
from .cross_validation import run_blocked_cv

__all__ = ["run_blocked_cv", "compare_strategies"]

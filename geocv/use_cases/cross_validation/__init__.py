from .grouping import assign_groups
from .run import run_blocked_cv

__all__ = ["run_blocked_cv", "assign_groups"]

from .group_folds import build_folds_from_assignment, build_group_folds
from .types import Fold, FoldPlan

__all__ = ["Fold", "FoldPlan", "build_group_folds", "build_folds_from_assignment"]

from .clusterers import KMeansClusterer, RandomGroupAssigner
from .types import GroupAssignment

__all__ = ["GroupAssignment", "RandomGroupAssigner", "KMeansClusterer"]

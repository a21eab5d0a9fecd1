from .regression import (
    DecisionTreeRegressorBuilder,
    KNNRegressorBuilder,
    LinRegBuilder,
    RandomForestRegressorBuilder,
    RidgeRegressorBuilder,
)

__all__ = [
    "RandomForestRegressorBuilder",
    "DecisionTreeRegressorBuilder",
    "LinRegBuilder",
    "RidgeRegressorBuilder",
    "KNNRegressorBuilder",
]

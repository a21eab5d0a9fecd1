from __future__ import annotations

"""Literal-based "choice" types used across contracts.

Keep this file dependency-free (stdlib + typing only) and prefer importing
choice sets from here rather than repeating Literal[...] in schema files.
"""

from typing import Literal, TypeAlias


# -----------------------------
# Grouping
# -----------------------------

GroupingStrategyName: TypeAlias = Literal["random", "spatial", "environmental"]

KMeansInit: TypeAlias = Literal["k-means++", "random"]


# -----------------------------
# Evaluation
# -----------------------------

OnErrorPolicy: TypeAlias = Literal["continue", "cancel"]

FoldStatus: TypeAlias = Literal["ok", "degenerate", "failed", "cancelled"]

FoldErrorKind: TypeAlias = Literal["EmptyFold", "ExternalFitFailure", "Cancelled"]

FoldFlag: TypeAlias = Literal[
    "zero_variance_observed",
    "zero_variance_predicted",
    "rsq_undefined_single_row",
]


# -----------------------------
# Trees / Forests
# -----------------------------

MaxFeaturesName: TypeAlias = Literal["sqrt", "log2"]  # (int|float|None are also allowed at runtime)

RegTreeCriterion: TypeAlias = Literal[
    "squared_error",
    "friedman_mse",
    "absolute_error",
    "poisson",
]
TreeSplitter: TypeAlias = Literal["best", "random"]


# -----------------------------
# Linear / neighbours
# -----------------------------

RidgeSolver: TypeAlias = Literal["auto", "svd", "cholesky", "lsqr", "sparse_cg", "sag", "saga", "lbfgs"]

KNNWeights: TypeAlias = Literal["uniform", "distance"]
KNNAlgorithm: TypeAlias = Literal["auto", "ball_tree", "kd_tree", "brute"]
KNNMetric: TypeAlias = Literal["minkowski", "euclidean", "manhattan", "chebyshev"]


__all__ = [
    "GroupingStrategyName",
    "KMeansInit",
    "OnErrorPolicy",
    "FoldStatus",
    "FoldErrorKind",
    "FoldFlag",
    "MaxFeaturesName",
    "RegTreeCriterion",
    "TreeSplitter",
    "RidgeSolver",
    "KNNWeights",
    "KNNAlgorithm",
    "KNNMetric",
]

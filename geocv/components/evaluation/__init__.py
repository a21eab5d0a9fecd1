from .fold_evaluator import evaluate_fold
from .metrics import RSQ_SENTINEL, FoldScores, PearsonRmseScorer, rmse, score_regression_fold, squared_pearson

__all__ = [
    "evaluate_fold",
    "rmse",
    "squared_pearson",
    "score_regression_fold",
    "FoldScores",
    "PearsonRmseScorer",
    "RSQ_SENTINEL",
]

from __future__ import annotations

"""Train/predict/score one fold.

Each call is stateless: it reads its own rows from the shared (read-only)
dataset, fits a fresh estimator and returns an immutable
:class:`~geocv.contracts.results.FoldResult`. Per-fold problems (empty subsets
after missing-value removal, fit/predict failures) are captured into the
result; only structural problems raise.
"""

import logging
from typing import Any, Optional, Sequence

import numpy as np
import pandas as pd

from geocv.components.features.encoding import FoldOneHotEncoder, categorical_columns, column_sources
from geocv.components.interfaces import Encoder, ModelBuilder, Scorer
from geocv.components.splitters.types import Fold
from geocv.contracts.results import FoldError, FoldResult
from geocv.core.errors import EmptyFold, ExternalFitFailure, InvalidConfiguration
from geocv.core.sklearn_utils import feature_importances

from .metrics import PearsonRmseScorer

logger = logging.getLogger(__name__)


def contract_label(label: Any) -> Any:
    """Coerce a group label to an int or str for result payloads."""
    if isinstance(label, np.generic):
        label = label.item()
    if isinstance(label, bool):
        return str(label)
    if isinstance(label, int):
        return label
    if isinstance(label, float) and label.is_integer():
        return int(label)
    return str(label)


def check_columns(data: pd.DataFrame, target: str, predictors: Sequence[str]) -> None:
    if not predictors:
        raise InvalidConfiguration("At least one predictor column is required.")
    if target in predictors:
        raise InvalidConfiguration(f"Target {target!r} is also listed as a predictor.")
    missing = [c for c in [target, *predictors] if c not in data.columns]
    if missing:
        raise InvalidConfiguration(f"Columns not found in dataset: {missing}")
    if not pd.api.types.is_numeric_dtype(data[target]):
        raise InvalidConfiguration(f"Target column {target!r} must be numeric; got dtype {data[target].dtype}.")


def _subset(data: pd.DataFrame, idx: np.ndarray, columns: list[str]) -> tuple[pd.DataFrame, int]:
    """Rows at positional ``idx`` with missing or infinite values removed; returns (frame, n_dropped)."""
    frame = data.iloc[idx][columns]
    clean = frame.replace([np.inf, -np.inf], np.nan).dropna(how="any")
    return clean, int(len(frame) - len(clean))


def _aggregate_importances(
    model: Any,
    encoded_columns: Sequence[str],
    predictors: Sequence[str],
    categorical: Sequence[str],
) -> Optional[dict[str, float]]:
    imp = feature_importances(model)
    if imp is None or imp.shape[0] != len(encoded_columns):
        return None
    sources = column_sources(encoded_columns, predictors, categorical)
    out = {p: 0.0 for p in predictors}
    for col, value in zip(encoded_columns, imp.tolist()):
        src = sources[str(col)]
        out[src] = out.get(src, 0.0) + float(value)
    return out


def _fit_predict(
    fold: Fold,
    model_builder: ModelBuilder,
    seed: Optional[int],
    X_train: pd.DataFrame,
    y_train: np.ndarray,
    X_test: pd.DataFrame,
) -> tuple[Any, np.ndarray]:
    try:
        model = model_builder.make_estimator(seed=seed)
        model.fit(X_train.to_numpy(), y_train)
        y_pred = np.asarray(model.predict(X_test.to_numpy()), dtype=float).reshape(-1)
    except Exception as e:
        raise ExternalFitFailure(
            f"Fold {fold.fold_id}: model fit/predict failed: {type(e).__name__}: {e}",
            fold_id=fold.fold_id,
        ) from e

    if y_pred.shape[0] != X_test.shape[0]:
        raise ExternalFitFailure(
            f"Fold {fold.fold_id}: model returned {y_pred.shape[0]} predictions "
            f"for {X_test.shape[0]} test rows",
            fold_id=fold.fold_id,
        )
    if not np.isfinite(y_pred).all():
        raise ExternalFitFailure(
            f"Fold {fold.fold_id}: model returned non-finite predictions",
            fold_id=fold.fold_id,
        )
    return model, y_pred


def failed_fold_result(
    fold: Fold,
    exc: BaseException,
    *,
    kind: str,
    n_train: int = 0,
    n_test: int = 0,
    n_train_dropped: int = 0,
    n_test_dropped: int = 0,
    status: str = "failed",
) -> FoldResult:
    return FoldResult(
        fold_id=fold.fold_id,
        group_label=contract_label(fold.group_label),
        n_train=n_train,
        n_test=n_test,
        n_train_dropped=n_train_dropped,
        n_test_dropped=n_test_dropped,
        status=status,
        error=FoldError(kind=kind, message=str(exc)),
    )


def evaluate_fold(
    fold: Fold,
    data: pd.DataFrame,
    *,
    target: str,
    predictors: Sequence[str],
    model_builder: ModelBuilder,
    seed: Optional[int] = None,
    scorer: Optional[Scorer] = None,
    encoder: Optional[Encoder] = None,
    compute_importances: bool = False,
) -> FoldResult:
    """Fit on the fold's training rows, predict its test rows, score.

    Missing-value policy: rows with a missing or infinite target or predictor are dropped
    from both subsets before fitting and scoring; the drop counts are kept on
    the result.
    """

    predictors = list(predictors)
    check_columns(data, target, predictors)
    scorer = scorer or PearsonRmseScorer()
    encoder = encoder or FoldOneHotEncoder()
    columns = [target, *predictors]

    train, n_train_dropped = _subset(data, fold.train_idx, columns)
    test, n_test_dropped = _subset(data, fold.test_idx, columns)
    sizes = dict(
        n_train=int(len(train)),
        n_test=int(len(test)),
        n_train_dropped=n_train_dropped,
        n_test_dropped=n_test_dropped,
    )

    try:
        if test.empty:
            raise EmptyFold(
                f"Fold {fold.fold_id} (group {fold.group_label!r}): no test rows left "
                f"after dropping {n_test_dropped} row(s) with missing values",
                fold_id=fold.fold_id,
                subset="test",
            )
        if train.empty:
            raise EmptyFold(
                f"Fold {fold.fold_id} (group {fold.group_label!r}): no training rows left "
                f"after dropping {n_train_dropped} row(s) with missing values",
                fold_id=fold.fold_id,
                subset="train",
            )

        X_train, X_test = encoder.fit_transform_train_test(train[predictors], test[predictors])
        y_train = train[target].to_numpy(dtype=float)
        y_test = test[target].to_numpy(dtype=float)

        model, y_pred = _fit_predict(fold, model_builder, seed, X_train, y_train, X_test)
    except EmptyFold as e:
        logger.warning("%s", e)
        return failed_fold_result(fold, e, kind="EmptyFold", **sizes)
    except ExternalFitFailure as e:
        logger.warning("%s", e)
        return failed_fold_result(fold, e, kind="ExternalFitFailure", **sizes)

    scores = scorer.score(y_test, y_pred)
    status = "degenerate" if scores.degenerate else "ok"
    if scores.degenerate:
        logger.warning(
            "Fold %d (group %r): R² undefined (%s); reporting %s",
            fold.fold_id,
            fold.group_label,
            ", ".join(scores.flags),
            scores.rsq,
        )

    importances = None
    if compute_importances:
        importances = _aggregate_importances(
            model,
            list(X_train.columns),
            predictors,
            categorical_columns(train[predictors]),
        )

    logger.debug(
        "Fold %d (group %r): n_train=%d n_test=%d rsq=%s rmse=%.4f",
        fold.fold_id,
        fold.group_label,
        sizes["n_train"],
        sizes["n_test"],
        scores.rsq,
        scores.rmse,
    )

    return FoldResult(
        fold_id=fold.fold_id,
        group_label=contract_label(fold.group_label),
        rsq=scores.rsq,
        rmse=scores.rmse,
        status=status,
        flags=list(scores.flags),
        feature_importances=importances,
        **sizes,
    )

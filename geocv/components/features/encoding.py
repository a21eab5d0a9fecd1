from __future__ import annotations

"""Within-fold predictor encoding.

Categorical predictors (e.g. land cover, soil class, geology) are one-hot
encoded *per fold*: dummies are built on the training rows and the test rows
are aligned to the training columns. Encoding once before splitting would let
test-only categories leak into the training design matrix.
"""

from dataclasses import dataclass

import pandas as pd


def onehot_align_train_test(
    X_train_raw: pd.DataFrame,
    X_test_raw: pd.DataFrame,
    *,
    drop_first: bool = False,
) -> tuple[pd.DataFrame, pd.DataFrame]:
    """One-hot encode train and test separately and align test to train.

    - categories unseen in training become all-zero rows in test
    - categories that only appear in test are dropped
    - output frames are float
    """
    X_train_oh = pd.get_dummies(X_train_raw, drop_first=drop_first)
    X_test_oh = pd.get_dummies(X_test_raw, drop_first=drop_first)

    X_test_oh = X_test_oh.reindex(columns=X_train_oh.columns, fill_value=0)

    return X_train_oh.astype(float), X_test_oh.astype(float)


def categorical_columns(frame: pd.DataFrame) -> list[str]:
    return [
        str(c)
        for c in frame.columns
        if not pd.api.types.is_numeric_dtype(frame[c])
    ]


def column_sources(encoded_columns, predictors, categorical) -> dict[str, str]:
    """Map each encoded column back onto the predictor it came from.

    ``get_dummies`` names dummies ``<predictor>_<category>``; numeric
    predictors keep their own name.
    """
    numeric = set(predictors) - set(categorical)
    out: dict[str, str] = {}
    # Longest prefix first so "soil_type" wins over "soil" for "soil_type_A".
    cats = sorted(categorical, key=len, reverse=True)
    for col in encoded_columns:
        col = str(col)
        if col in numeric:
            out[col] = col
            continue
        for c in cats:
            if col.startswith(f"{c}_"):
                out[col] = c
                break
        else:
            out[col] = col
    return out


@dataclass
class FoldOneHotEncoder:
    """Encoder strategy wrapping :func:`onehot_align_train_test`."""

    drop_first: bool = False

    def fit_transform_train_test(
        self,
        X_train: pd.DataFrame,
        X_test: pd.DataFrame,
    ) -> tuple[pd.DataFrame, pd.DataFrame]:
        return onehot_align_train_test(X_train, X_test, drop_first=self.drop_first)

"""Table loading helper for the backend boundary (parsing lives in geocv)."""

from __future__ import annotations

import pandas as pd

from geocv.api import load_from_data_model
from geocv.contracts.data_configs import DataModel

from .errors import LoadError


def load_table(cfg: DataModel) -> pd.DataFrame:
    """Load the sample table, wrapping any parsing failure in :class:`LoadError`."""
    try:
        return load_from_data_model(cfg)
    except LoadError:
        raise
    except Exception as e:
        raise LoadError(str(e)) from e

from __future__ import annotations

from typing import Optional

import pandas as pd

from geocv.components.data_loaders import TableLoader
from geocv.components.interfaces import DataLoader
from geocv.contracts.data_configs import DataModel


def make_data_loader(cfg: DataModel, *, frame: Optional[pd.DataFrame] = None) -> DataLoader:
    """Return the default table loader (file-backed unless ``frame`` is given)."""
    return TableLoader(cfg, frame=frame)

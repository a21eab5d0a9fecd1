from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from geocv.contracts.data_configs import DataModel
from geocv.io.readers import load_from_data_model


@dataclass
class TableLoader:
    """Loads the sample table described by ``cfg``.

    ``frame`` short-circuits file access (in-memory data from scripts/tests).
    """

    cfg: DataModel
    frame: Optional[pd.DataFrame] = None

    def load(self) -> pd.DataFrame:
        if self.frame is not None:
            return self.frame.reset_index(drop=True)
        return load_from_data_model(self.cfg)

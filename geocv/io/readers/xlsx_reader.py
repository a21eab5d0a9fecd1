from __future__ import annotations

"""Excel .xlsx reader (first row is the header)."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .base import normalize_columns, require_file


def load_xlsx_table(
    file_path: Union[str, Path],
    *,
    sheet_name: Optional[Union[str, int]] = None,
) -> pd.DataFrame:
    path = require_file(file_path, kind="XLSX")
    df = pd.read_excel(path.as_posix(), sheet_name=sheet_name or 0, header=0)
    return normalize_columns(df, context=f"XLSX '{path.name}'")


@dataclass
class XlsxReader:
    sheet_name: Optional[Union[str, int]] = None

    def read(self, path: Union[str, Path], **kwargs) -> pd.DataFrame:
        return load_xlsx_table(path, sheet_name=kwargs.get("sheet_name", self.sheet_name))

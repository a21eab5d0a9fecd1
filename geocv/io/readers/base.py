from __future__ import annotations

"""Reader base contracts and shared helpers."""

from pathlib import Path
from typing import Protocol, Union

import pandas as pd


class Reader(Protocol):
    """Protocol for parsing adapters."""

    def read(self, path: Union[str, Path], **kwargs) -> pd.DataFrame: ...


def require_file(path: Union[str, Path], kind: str = "Table") -> Path:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"{kind} file not found: {p}")
    if not p.is_file():
        raise ValueError(f"{kind} path is not a file: {p}")
    return p


def normalize_columns(df: pd.DataFrame, *, context: str) -> pd.DataFrame:
    """Strip column names and reject duplicates (columns are addressed by name)."""

    df = df.rename(columns=lambda c: str(c).strip())
    dupes = sorted({c for c in df.columns if list(df.columns).count(c) > 1})
    if dupes:
        raise ValueError(f"{context}: duplicated column names {dupes}")
    if df.shape[1] == 0:
        raise ValueError(f"{context}: no columns found")
    return df.reset_index(drop=True)

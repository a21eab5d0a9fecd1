from __future__ import annotations

"""Auto-dispatching reader + DataModel convenience loader."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from geocv.contracts.data_configs import DataModel

from .tabular_reader import TabularReader
from .xlsx_reader import XlsxReader

SUPPORTED_SUFFIXES = (".csv", ".tsv", ".txt", ".xlsx")


def read_table_auto(
    path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
    sheet_name: Optional[Union[str, int]] = None,
) -> pd.DataFrame:
    """Read a table from ``path`` based on file extension."""

    p = Path(path)
    suf = p.suffix.lower()

    if suf in {".csv", ".tsv", ".txt"}:
        if delimiter is None and suf == ".tsv":
            delimiter = "\t"
        return TabularReader(delimiter=delimiter, encoding=encoding).read(p)
    if suf == ".xlsx":
        return XlsxReader(sheet_name=sheet_name).read(p)

    raise ValueError(
        f"Unsupported file extension '{p.suffix}' for path: {p}. "
        "Supported: .csv/.tsv/.txt, .xlsx"
    )


@dataclass
class AutoReader:
    """Stateful wrapper mainly for dependency injection."""

    def read(self, path: Union[str, Path], **kwargs) -> pd.DataFrame:
        return read_table_auto(path, **kwargs)


def load_from_data_model(cfg: DataModel) -> pd.DataFrame:
    """Load the sample table described by a :class:`DataModel`."""

    if not cfg.path:
        raise ValueError("DataModel requires path")
    return read_table_auto(
        cfg.path,
        delimiter=cfg.delimiter,
        encoding=cfg.encoding,
        sheet_name=cfg.sheet_name,
    )

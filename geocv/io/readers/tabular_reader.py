from __future__ import annotations

"""Delimited text table reader (CSV/TSV/TXT).

Unlike a numeric matrix reader, cells may be empty (kept as NaN; the fold
evaluator drops incomplete rows) and columns may be categorical.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from .base import normalize_columns, require_file


def _read_first_line(path: Path, encoding: Optional[str] = None) -> str:
    enc = encoding or "utf-8"
    with path.open("r", encoding=enc, errors="replace") as f:
        return f.readline().strip("\n")


def _infer_delimiter(sample_line: str) -> str:
    if "\t" in sample_line:
        return "\t"
    if "," in sample_line:
        return ","
    if ";" in sample_line:
        return ";"
    return "whitespace"


def load_delimited_table(
    file_path: Union[str, Path],
    *,
    delimiter: Optional[str] = None,
    encoding: Optional[str] = None,
) -> pd.DataFrame:
    """Load a table with a header row from CSV/TSV/TXT.

    If delimiter is None, it is inferred from the header line.
    """

    path = require_file(file_path)

    delim = delimiter
    if delim is None:
        delim = _infer_delimiter(_read_first_line(path, encoding=encoding))
    if delim == "\\t":
        delim = "\t"

    sep = r"\s+" if delim == "whitespace" else delim
    df = pd.read_csv(
        path.as_posix(),
        sep=sep,
        header=0,
        encoding=encoding or "utf-8",
        engine="python",
    )
    return normalize_columns(df, context=f"Table '{path.name}'")


@dataclass
class TabularReader:
    delimiter: Optional[str] = None
    encoding: Optional[str] = None

    def read(self, path: Union[str, Path], **kwargs) -> pd.DataFrame:
        return load_delimited_table(
            path,
            delimiter=kwargs.get("delimiter", self.delimiter),
            encoding=kwargs.get("encoding", self.encoding),
        )

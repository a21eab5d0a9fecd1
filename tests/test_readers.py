from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from geocv.components.data_loaders import TableLoader
from geocv.contracts.data_configs import DataModel
from geocv.io.readers import load_from_data_model, read_table_auto


def test_delimiter_is_inferred(tmp_path: Path) -> None:
    path = tmp_path / "plots.csv"
    path.write_text("x;y;soc\n1.0;2.0;3.5\n4.0;5.0;\n", encoding="utf-8")

    frame = read_table_auto(path)

    assert frame.columns.tolist() == ["x", "y", "soc"]
    assert len(frame) == 2
    assert np.isnan(frame.loc[1, "soc"])


def test_tsv_and_categorical_columns(tmp_path: Path) -> None:
    path = tmp_path / "plots.tsv"
    path.write_text("cover\tsoc\nforest\t1.5\ncrop\t0.7\n", encoding="utf-8")

    frame = read_table_auto(path)

    assert frame["cover"].tolist() == ["forest", "crop"]
    assert frame["soc"].tolist() == [1.5, 0.7]


def test_xlsx_is_read(tmp_path: Path) -> None:
    path = tmp_path / "plots.xlsx"
    pd.DataFrame({"x": [1.0, 2.0], "soc": [0.5, 0.6]}).to_excel(path, index=False)

    frame = load_from_data_model(DataModel(path=str(path), target="soc", predictors=["x"]))

    assert frame.columns.tolist() == ["x", "soc"]
    assert frame["soc"].tolist() == [0.5, 0.6]


def test_missing_and_unsupported_files(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_table_auto(tmp_path / "nope.csv")

    other = tmp_path / "grid.npy"
    other.write_bytes(b"")
    with pytest.raises(ValueError, match="Unsupported"):
        read_table_auto(other)

    with pytest.raises(ValueError, match="path"):
        load_from_data_model(DataModel(target="soc"))


def test_duplicate_columns_are_rejected(tmp_path: Path) -> None:
    path = tmp_path / "dupes.csv"
    path.write_text("x, x ,soc\n1,2,3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="duplicated"):
        read_table_auto(path)


def test_in_memory_frame_short_circuits_file_access() -> None:
    frame = pd.DataFrame({"soc": [1.0, 2.0]}, index=[10, 20])

    loaded = TableLoader(DataModel(path="does/not/exist.csv", target="soc"), frame=frame).load()

    assert loaded.index.tolist() == [0, 1]

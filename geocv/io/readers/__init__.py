from .auto_reader import AutoReader, load_from_data_model, read_table_auto
from .tabular_reader import TabularReader, load_delimited_table
from .xlsx_reader import XlsxReader, load_xlsx_table

__all__ = [
    "AutoReader",
    "TabularReader",
    "XlsxReader",
    "read_table_auto",
    "load_delimited_table",
    "load_xlsx_table",
    "load_from_data_model",
]

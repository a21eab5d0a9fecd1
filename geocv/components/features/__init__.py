from .encoding import FoldOneHotEncoder, categorical_columns, column_sources, onehot_align_train_test

__all__ = ["FoldOneHotEncoder", "onehot_align_train_test", "categorical_columns", "column_sources"]

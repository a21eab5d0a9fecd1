from .data_loaders import TableLoader

__all__ = ["TableLoader"]

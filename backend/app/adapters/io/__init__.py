"""I/O adapter package.

Backend boundary code for loading sample tables via the geocv public API.
Keep this package free of business logic; it should remain an interface layer.
"""

from .errors import LoadError
from .loader import load_table

__all__ = ["LoadError", "load_table"]

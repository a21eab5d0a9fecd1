"""Backend-local I/O adapter errors.

These errors represent boundary failures (missing files, unreadable or
unsupported tables). Routers map them to HTTP 400 responses.
"""


class LoadError(Exception):
    """Raised when the backend cannot resolve/load a requested dataset."""

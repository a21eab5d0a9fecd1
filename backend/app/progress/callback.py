from __future__ import annotations

"""Backend progress adapter for geocv progress callbacks.

geocv defines a small :class:`geocv.api.ProgressCallback` protocol for
optional progress reporting (one update per completed fold).

The backend tracks progress records in :mod:`backend.app.progress.registry`
and exposes them via the /progress API for the frontend to poll.

This adapter bridges the two without introducing backend dependencies into geocv.
"""

from dataclasses import dataclass
from typing import Optional

from .registry import PROGRESS


@dataclass(frozen=True)
class RegistryProgressCallback:
    """Bind a progress_id to the backend registry and expose the geocv protocol."""

    progress_id: str

    def init(self, *, total: int, label: Optional[str] = None) -> None:
        PROGRESS.init(self.progress_id, total=int(total), label=label or "Starting…")

    def update(self, *, current: int, label: Optional[str] = None) -> None:
        PROGRESS.update(self.progress_id, current=int(current), label=label)

    def finalize(self, *, label: Optional[str] = None) -> None:
        PROGRESS.finalize(self.progress_id, label=label or "Done")

    def fail(self, message: str) -> None:
        PROGRESS.fail(self.progress_id, message=message)

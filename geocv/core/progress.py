from __future__ import annotations

"""Progress hooks for fold execution.

geocv runs without any UI. Use-cases accept an optional callback and call
``init`` once with the number of planned folds, ``update`` after every
finished fold and ``finalize`` when the run is over. Calls come from the
coordinating thread only, never from fold workers.

Backends adapt their own progress stores to this protocol.
"""

from typing import Optional, Protocol


class ProgressCallback(Protocol):
    def init(self, *, total: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def update(self, *, current: int, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

    def finalize(self, *, label: Optional[str] = None) -> None:  # pragma: no cover
        ...

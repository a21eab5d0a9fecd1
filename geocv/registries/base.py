from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterable, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Named mapping from keys (strategy names, model algos) to factories.

        _GROUPINGS = Registry[str, ClustererFactory](_name="grouping strategies")

        @_GROUPINGS.register("spatial")
        def _spatial(cfg, seed):
            ...

    Registering the same key twice replaces the earlier factory.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K) -> Callable[[V], V]:
        def deco(value: V) -> V:
            self._items[key] = value
            return value

        return deco

    def get(self, key: K) -> V:
        try:
            return self._items[key]
        except KeyError:
            known = ", ".join(sorted(map(str, self._items))) or "<none>"
            raise KeyError(f"{self._name}: unknown key {key!r} (known: {known})") from None

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def keys(self) -> Iterable[K]:
        return self._items.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

"""Composite-key map store — contract maps addressed by structured keys.

A composite key is an ordered set of named scalar fields, e.g.
``{"worker-id": "w1", "skill-id": "s1"}``. Records are slotted under the
key's canonical JSON serialization, so two keys built separately with the
same fields in the same order always address the same slot. Field order
is significant: ``{"a": 1, "b": 2}`` and ``{"b": 2, "a": 1}`` are
different keys, as they are on chain.

No handler iterates, range-queries or deletes records; the store offers
none of those.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Optional, Union

_SCALAR_TYPES = (str, int, float, bool, type(None))


class CompositeKey:
    """Immutable ordered field set used to address a record in a map."""

    __slots__ = ("_fields", "_canonical")

    def __init__(self, fields: Mapping[str, Any]) -> None:
        if not fields:
            raise ValueError("Composite key needs at least one field")
        for name, value in fields.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Composite key field names must be non-empty strings: {name!r}")
            if not isinstance(value, _SCALAR_TYPES):
                raise ValueError(
                    f"Composite key field {name!r} must be a scalar, "
                    f"got {type(value).__name__}"
                )
        self._fields = tuple(fields.items())
        self._canonical = json.dumps(
            dict(self._fields), ensure_ascii=False, separators=(",", ":")
        )

    @classmethod
    def of(cls, **fields: Any) -> CompositeKey:
        """Build a key from keyword fields; underscores become hyphens."""
        return cls({name.replace("_", "-"): value for name, value in fields.items()})

    @property
    def canonical(self) -> str:
        return self._canonical

    @property
    def fields(self) -> dict[str, Any]:
        return dict(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompositeKey):
            return NotImplemented
        return self._canonical == other._canonical

    def __hash__(self) -> int:
        return hash(self._canonical)

    def __repr__(self) -> str:
        return f"CompositeKey({self._canonical})"


KeyLike = Union[CompositeKey, Mapping[str, Any]]


def as_key(key: KeyLike) -> CompositeKey:
    """Accept either a CompositeKey or a plain field mapping."""
    if isinstance(key, CompositeKey):
        return key
    if isinstance(key, Mapping):
        return CompositeKey(key)
    raise ValueError(f"Not a composite key: {key!r}")


class MapStore:
    """Named maps of composite key -> record, with overwrite semantics.

    Thread-safety: this class is not thread-safe. The ledger serialises
    every call, so no synchronisation is needed.
    """

    def __init__(self) -> None:
        self._maps: dict[str, dict[str, Any]] = {}

    def create(self, map_name: str) -> None:
        """Create (or re-initialise to empty) a named map."""
        self._maps[map_name] = {}

    def exists(self, map_name: str) -> bool:
        return map_name in self._maps

    def names(self) -> list[str]:
        return sorted(self._maps)

    def size(self, map_name: str) -> int:
        return len(self._slots(map_name))

    def get(self, map_name: str, key: KeyLike) -> Optional[Any]:
        """Return the record stored under key, or None."""
        return self._slots(map_name).get(as_key(key).canonical)

    def has(self, map_name: str, key: KeyLike) -> bool:
        return as_key(key).canonical in self._slots(map_name)

    def put(self, map_name: str, key: KeyLike, record: Any) -> None:
        """Store record under key, replacing any previous record."""
        self._slots(map_name)[as_key(key).canonical] = record

    def clear(self) -> None:
        """Drop every map (used by ledger reset)."""
        self._maps.clear()

    def _slots(self, map_name: str) -> dict[str, Any]:
        slots = self._maps.get(map_name)
        if slots is None:
            raise KeyError(f"Map not initialised: {map_name}")
        return slots


class ReadOnlyMapView:
    """Lookup-only facade over a MapStore, handed to read-only handlers."""

    def __init__(self, store: MapStore) -> None:
        self._store = store

    def get(self, map_name: str, key: KeyLike) -> Optional[Any]:
        return self._store.get(map_name, key)

    def has(self, map_name: str, key: KeyLike) -> bool:
        return self._store.has(map_name, key)

    def put(self, map_name: str, key: KeyLike, record: Any) -> None:
        raise PermissionError(f"Read-only call cannot write to map {map_name}")

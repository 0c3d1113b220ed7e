"""Storage layer: composite-key maps and namespaced variables."""

from workledger.store.maps import CompositeKey, MapStore, ReadOnlyMapView, as_key
from workledger.store.variables import ReadOnlyVariableView, VariableStore

__all__ = [
    "CompositeKey",
    "MapStore",
    "ReadOnlyMapView",
    "ReadOnlyVariableView",
    "VariableStore",
    "as_key",
]

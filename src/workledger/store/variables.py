"""Scalar variables, one value per namespaced name.

Names are ``<contract>.<variable>``. The only variable the contracts
declare is ``admin``.
"""

from __future__ import annotations

from typing import Any


class VariableStore:
    """Namespaced scalar variables."""

    def __init__(self) -> None:
        self._vars: dict[str, Any] = {}

    def get(self, name: str) -> Any:
        """Return the variable's value. Raises KeyError if never set."""
        if name not in self._vars:
            raise KeyError(f"Variable not initialised: {name}")
        return self._vars[name]

    def set(self, name: str, value: Any) -> None:
        self._vars[name] = value

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def clear(self) -> None:
        self._vars.clear()

    @property
    def count(self) -> int:
        return len(self._vars)


class ReadOnlyVariableView:
    """Lookup-only facade over a VariableStore."""

    def __init__(self, store: VariableStore) -> None:
        self._store = store

    def get(self, name: str) -> Any:
        return self._store.get(name)

    def set(self, name: str, value: Any) -> None:
        raise PermissionError(f"Read-only call cannot set variable {name}")

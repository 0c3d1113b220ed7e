"""Contract definitions — handler tables keyed by function name.

A ContractDefinition holds two lookup tables, one for public
(state-changing) functions and one for read-only functions. Handlers are
registered with the ``public`` / ``read_only`` decorators when the
contract module is imported, and every registration is validated then:
a function name can be bound once, to a callable, in exactly one table.
The dispatcher never compares contract or function names beyond a dict
lookup.

Handler signatures:
    public:    handler(ctx: CallContext, *args) -> CallResult
    read-only: handler(ctx: CallContext, *args) -> Any  (None = no record)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from workledger.models.results import CallResult
from workledger.policy.resolver import LedgerPolicy
from workledger.store.maps import MapStore, ReadOnlyMapView
from workledger.store.variables import ReadOnlyVariableView, VariableStore

PublicHandler = Callable[..., CallResult]
ReadOnlyHandler = Callable[..., Any]

ADMIN_VARIABLE = "admin"


@dataclass(frozen=True)
class CallContext:
    """Everything a handler may see during one call.

    For read-only calls, maps and variables are read-only views and
    sender is None.
    """
    contract_name: str
    sender: Optional[str]
    block_height: int
    maps: Union[MapStore, ReadOnlyMapView]
    variables: Union[VariableStore, ReadOnlyVariableView]
    policy: LedgerPolicy

    @property
    def admin_key(self) -> str:
        return f"{self.contract_name}.{ADMIN_VARIABLE}"

    def admin(self) -> str:
        """Return the contract's current admin principal."""
        return self.variables.get(self.admin_key)

    def sender_is_admin(self) -> bool:
        return self.sender is not None and self.sender == self.admin()

    def set_admin(self, principal: str) -> None:
        self.variables.set(self.admin_key, principal)


class ContractDefinition:
    """Named contract with its public and read-only handler tables."""

    def __init__(self, name: str) -> None:
        if not name or not name.strip():
            raise ValueError("Contract name must be non-empty")
        self.name = name
        self._public: dict[str, PublicHandler] = {}
        self._read_only: dict[str, ReadOnlyHandler] = {}

    def public(self, function_name: str) -> Callable[[PublicHandler], PublicHandler]:
        """Decorator registering a state-changing function."""
        def decorator(handler: PublicHandler) -> PublicHandler:
            self._register(self._public, function_name, handler)
            return handler
        return decorator

    def read_only(self, function_name: str) -> Callable[[ReadOnlyHandler], ReadOnlyHandler]:
        """Decorator registering a side-effect-free function."""
        def decorator(handler: ReadOnlyHandler) -> ReadOnlyHandler:
            self._register(self._read_only, function_name, handler)
            return handler
        return decorator

    def public_handler(self, function_name: str) -> Optional[PublicHandler]:
        return self._public.get(function_name)

    def read_only_handler(self, function_name: str) -> Optional[ReadOnlyHandler]:
        return self._read_only.get(function_name)

    @property
    def public_functions(self) -> list[str]:
        return sorted(self._public)

    @property
    def read_only_functions(self) -> list[str]:
        return sorted(self._read_only)

    def _register(
        self,
        table: dict[str, Callable[..., Any]],
        function_name: str,
        handler: Callable[..., Any],
    ) -> None:
        if not function_name or not function_name.strip():
            raise ValueError(f"{self.name}: function name must be non-empty")
        if not callable(handler):
            raise ValueError(f"{self.name}.{function_name}: handler is not callable")
        if function_name in self._public or function_name in self._read_only:
            raise ValueError(f"{self.name}.{function_name} is already registered")
        table[function_name] = handler

    def __repr__(self) -> str:
        return (
            f"ContractDefinition({self.name!r}, public={self.public_functions}, "
            f"read_only={self.read_only_functions})"
        )


class ContractRegistry:
    """Registry of contract definitions available for deployment."""

    def __init__(self) -> None:
        self._contracts: dict[str, ContractDefinition] = {}

    def register(self, definition: ContractDefinition) -> None:
        """Add a contract definition.

        Raises ValueError if a contract with the same name is registered.
        """
        if definition.name in self._contracts:
            raise ValueError(f"Contract already registered: {definition.name}")
        self._contracts[definition.name] = definition

    def get(self, name: str) -> Optional[ContractDefinition]:
        return self._contracts.get(name)

    def names(self) -> list[str]:
        return sorted(self._contracts)

    def __contains__(self, name: object) -> bool:
        return name in self._contracts

"""Mock ledger — the harness facade tests drive the contracts through.

It owns all ledger state as instance attributes:
- Composite-key maps and namespaced variables (contract storage)
- The logical clock (block height), advanced only by the harness
- Deployments (contract name -> deployer principal)
- The call journal

and routes calls to contract handlers:
- call_public() runs a state-changing handler against the live store
- call_read_only() runs a lookup handler against read-only views

Contract failures come back as values (CallResult / ReadResult). An
unexpected exception inside a handler is logged and reported in-band as
a failed result carrying the exception message; it never propagates to
the caller. Handlers finish every check before writing, so a rejected
call leaves storage untouched.

Usage:
    ledger = MockLedger()
    ledger.deploy("skill-certification", "SP1ADMIN")
    result = ledger.call_public(
        "skill-certification", "create-skill", "SP1ADMIN",
        ["skill123", "JavaScript", "Programming"],
    )
    ledger.advance_block()
    valid = ledger.call_read_only(
        "skill-certification", "is-skill-valid", ["worker123", "skill123"],
    ).result
    ledger.reset()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

from workledger.contracts import ContractRegistry, default_registry
from workledger.contracts.base import CallContext, ContractDefinition
from workledger.journal.call_journal import CallJournal, EntryKind, JournalEntry
from workledger.models.results import (
    CONTRACT_NOT_FOUND,
    FUNCTION_NOT_IMPLEMENTED,
    CallResult,
    ReadResult,
)
from workledger.policy.resolver import LedgerPolicy
from workledger.store.maps import KeyLike, MapStore, ReadOnlyMapView
from workledger.store.variables import ReadOnlyVariableView, VariableStore

logger = logging.getLogger(__name__)


def mock_principal(address: str) -> str:
    """Principals are plain strings; the address is the identity."""
    return address


class MockLedger:
    """In-memory ledger hosting the registry contracts."""

    def __init__(
        self,
        policy: Optional[LedgerPolicy] = None,
        registry: Optional[ContractRegistry] = None,
    ) -> None:
        self._policy = policy if policy is not None else LedgerPolicy.default()
        self._registry = registry if registry is not None else default_registry()
        self._maps = MapStore()
        self._variables = VariableStore()
        self._journal = CallJournal()
        self._deployments: dict[str, str] = {}
        self._block_height = self._policy.initial_block_height()
        self._entry_counter = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def deploy(self, contract_name: str, deployer: str) -> bool:
        """Deploy a contract, initialising its maps and admin variable.

        Unknown contract names are ignored (logged, returns False).
        Redeploying a contract re-initialises its storage.
        """
        definition = self._registry.get(contract_name)
        if definition is None or contract_name not in self._policy.known_contracts():
            logger.warning("Ignoring deployment of unknown contract %r", contract_name)
            return False

        layout = self._policy.contract_layout(contract_name)
        for map_name in layout.maps:
            self._maps.create(map_name)
        for variable in layout.variables:
            # Every declared variable starts out holding the deployer (admin).
            self._variables.set(layout.variable_key(variable), deployer)
        self._deployments[contract_name] = deployer

        self._record(
            EntryKind.CONTRACT_DEPLOYED,
            sender=deployer,
            contract=contract_name,
        )
        logger.info(
            "Deployed %s by %s at height %d", contract_name, deployer, self._block_height
        )
        return True

    def reset(self) -> None:
        """Clear all storage, deployments and the journal; rewind the clock."""
        self._maps.clear()
        self._variables.clear()
        self._deployments.clear()
        self._journal.clear()
        self._entry_counter = 0
        self._block_height = self._policy.initial_block_height()
        logger.info("Ledger reset to height %d", self._block_height)

    # ------------------------------------------------------------------
    # Logical clock
    # ------------------------------------------------------------------

    @property
    def block_height(self) -> int:
        return self._block_height

    def advance_block(self, count: int = 1) -> int:
        """Advance the clock by count blocks and return the new height."""
        if count < 1:
            raise ValueError(f"Block count must be positive, got {count}")
        self._block_height += count
        return self._block_height

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def call_public(
        self,
        contract: str,
        function: str,
        sender: str,
        args: Sequence[Any] = (),
    ) -> CallResult:
        """Run a state-changing contract function as sender."""
        definition = self._deployed(contract)
        if definition is None:
            result = CallResult.fail(CONTRACT_NOT_FOUND)
        else:
            handler = definition.public_handler(function)
            if handler is None:
                result = CallResult.fail(FUNCTION_NOT_IMPLEMENTED)
            else:
                ctx = CallContext(
                    contract_name=contract,
                    sender=sender,
                    block_height=self._block_height,
                    maps=self._maps,
                    variables=self._variables,
                    policy=self._policy,
                )
                try:
                    result = handler(ctx, *args)
                except Exception as e:
                    logger.exception("Public call %s.%s failed", contract, function)
                    result = CallResult.fail(str(e))

        logger.debug(
            "call_public %s.%s sender=%s -> success=%s error=%r",
            contract, function, sender, result.success, result.error,
        )
        self._record(
            EntryKind.PUBLIC_CALL,
            sender=sender,
            contract=contract,
            function=function,
            args=tuple(args),
            success=result.success,
            error=result.error,
        )
        return result

    def call_read_only(
        self,
        contract: str,
        function: str,
        args: Sequence[Any] = (),
    ) -> ReadResult:
        """Run a side-effect-free contract function.

        Functions the contract does not define read as None.
        """
        definition = self._deployed(contract)
        if definition is None:
            return ReadResult.fail(CONTRACT_NOT_FOUND)
        handler = definition.read_only_handler(function)
        if handler is None:
            return ReadResult(result=None)

        ctx = CallContext(
            contract_name=contract,
            sender=None,
            block_height=self._block_height,
            maps=ReadOnlyMapView(self._maps),
            variables=ReadOnlyVariableView(self._variables),
            policy=self._policy,
        )
        try:
            value = handler(ctx, *args)
        except Exception as e:
            logger.exception("Read-only call %s.%s failed", contract, function)
            return ReadResult.fail(str(e))
        logger.debug("call_read_only %s.%s -> %r", contract, function, value)
        return ReadResult(result=value)

    # ------------------------------------------------------------------
    # Direct state inspection
    # ------------------------------------------------------------------

    def get_map_entry(self, map_name: str, key: KeyLike) -> Optional[Any]:
        """Return the record stored in a map, bypassing contract accessors.

        Raises KeyError if no deployed contract owns map_name.
        """
        return self._maps.get(map_name, key)

    def get_variable(self, name: str) -> Any:
        """Return a namespaced variable, e.g. ``skill-certification.admin``."""
        return self._variables.get(name)

    def deployed_contracts(self) -> dict[str, str]:
        """Return contract name -> deployer for every deployed contract."""
        return dict(self._deployments)

    @property
    def journal(self) -> CallJournal:
        return self._journal

    @property
    def policy(self) -> LedgerPolicy:
        return self._policy

    def status(self) -> dict[str, Any]:
        """Summary of ledger state."""
        return {
            "block_height": self._block_height,
            "contracts": self.deployed_contracts(),
            "maps": {name: self._maps.size(name) for name in self._maps.names()},
            "variables": self._variables.count,
            "journal": {
                "entries": self._journal.count,
                "failed_calls": len(self._journal.failures()),
            },
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _deployed(self, contract: str) -> Optional[ContractDefinition]:
        if contract not in self._deployments:
            return None
        return self._registry.get(contract)

    def _next_entry_id(self) -> str:
        """Generate a monotonically increasing journal entry ID."""
        self._entry_counter += 1
        return f"TX-{self._entry_counter:08d}"

    def _record(self, kind: EntryKind, sender: str, contract: str, **fields: Any) -> None:
        self._journal.append(
            JournalEntry.create(
                entry_id=self._next_entry_id(),
                kind=kind,
                block_height=self._block_height,
                sender=sender,
                contract=contract,
                **fields,
            )
        )

"""Handler tables for the registries the ledger hosts."""

from workledger.contracts import placeholders, skill_certification, worker_verification
from workledger.contracts.base import (
    CallContext,
    ContractDefinition,
    ContractRegistry,
)


def default_registry() -> ContractRegistry:
    """Return a fresh registry holding the four shipped contracts."""
    registry = ContractRegistry()
    registry.register(worker_verification.contract)
    registry.register(skill_certification.contract)
    registry.register(placeholders.assignment_tracking)
    registry.register(placeholders.performance_rating)
    return registry


__all__ = [
    "CallContext",
    "ContractDefinition",
    "ContractRegistry",
    "default_registry",
]

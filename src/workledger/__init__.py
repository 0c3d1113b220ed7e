"""workledger — mock ledger hosting worker verification, skill
certification, assignment tracking and performance rating registries."""

from workledger.ledger import MockLedger, mock_principal

__all__ = ["MockLedger", "mock_principal"]

"""Assignment-tracking and performance-rating contracts.

Both are deployable (their maps and admin variable are created from the
ledger policy layout) but register no functions yet, so every public
call reports "Function not implemented in mock" and every read-only call
returns None.
"""

from __future__ import annotations

from workledger.contracts.base import ContractDefinition

ASSIGNMENT_TRACKING = "assignment-tracking"
PERFORMANCE_RATING = "performance-rating"

assignment_tracking = ContractDefinition(ASSIGNMENT_TRACKING)
performance_rating = ContractDefinition(PERFORMANCE_RATING)

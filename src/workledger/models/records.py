"""Ledger record models: the values stored in contract maps.

Records are immutable. A handler that "updates" a record writes a new
instance (via dataclasses.replace) under the same composite key, so a
failed check can never leave a half-written record behind.

as_entry() renders a record with the hyphenated field names the
contracts declare on chain, e.g. ``registration-date``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Worker:
    """A registered worker identity (map: workers, key: worker-id)."""
    principal: str
    name: str
    verified: bool
    registration_date: int

    def as_entry(self) -> dict[str, Any]:
        return {
            "principal": self.principal,
            "name": self.name,
            "verified": self.verified,
            "registration-date": self.registration_date,
        }


@dataclass(frozen=True)
class Document:
    """A worker identity document (map: verified-documents).

    Keyed by (worker-id, document-type). verification_date stays 0
    until an admin verifies the document.
    """
    hash: str
    verified: bool = False
    verification_date: int = 0

    def as_entry(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "verified": self.verified,
            "verification-date": self.verification_date,
        }


@dataclass(frozen=True)
class Skill:
    """A certifiable skill (map: skills, key: skill-id)."""
    name: str
    category: str
    created_at: int

    def as_entry(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category,
            "created-at": self.created_at,
        }


@dataclass(frozen=True)
class Certification:
    """A worker's certified skill (map: worker-skills).

    Keyed by (worker-id, skill-id). A certification without an
    expiration_date never expires; one with an expiration_date is valid
    strictly before that block height.
    """
    certified_by: str
    certification_date: int
    level: int
    expiration_date: Optional[int] = None
    proof_hash: Optional[str] = None

    def is_valid_at(self, block_height: int) -> bool:
        if self.expiration_date is None:
            return True
        return block_height < self.expiration_date

    def as_entry(self) -> dict[str, Any]:
        return {
            "certified-by": self.certified_by,
            "certification-date": self.certification_date,
            "expiration-date": self.expiration_date,
            "level": self.level,
            "proof-hash": self.proof_hash,
        }

"""Call journal — append-only record of everything applied to the ledger.

Every deployment and every dispatched public call (successful or not)
produces a journal entry. Entries are immutable once written and carry a
SHA-256 hash of their canonical JSON form, so tests can assert on the
exact sequence of calls a scenario made.

The journal lives in memory only and is cleared by ledger reset.
"""

from __future__ import annotations

import enum
import hashlib
import json
from dataclasses import dataclass
from typing import Any, Optional


class EntryKind(str, enum.Enum):
    """Classification of journal entries."""
    CONTRACT_DEPLOYED = "contract_deployed"
    PUBLIC_CALL = "public_call"


@dataclass(frozen=True)
class JournalEntry:
    """A single immutable journal entry.

    entry_hash is computed at creation time over every other field.
    """
    entry_id: str
    kind: EntryKind
    block_height: int
    sender: str
    contract: str
    function: str
    args: tuple[Any, ...]
    success: bool
    error: Optional[Any]
    entry_hash: str  # SHA-256 of canonical JSON

    @staticmethod
    def create(
        entry_id: str,
        kind: EntryKind,
        block_height: int,
        sender: str,
        contract: str,
        function: str = "",
        args: tuple[Any, ...] = (),
        success: bool = True,
        error: Optional[Any] = None,
    ) -> JournalEntry:
        """Create a new entry with computed hash."""
        canonical = json.dumps(
            {
                "entry_id": entry_id,
                "kind": kind.value,
                "block_height": block_height,
                "sender": sender,
                "contract": contract,
                "function": function,
                "args": list(args),
                "success": success,
                "error": error,
            },
            sort_keys=True,
            ensure_ascii=False,
            default=str,
        ).encode("utf-8")
        digest = hashlib.sha256(canonical).hexdigest()

        return JournalEntry(
            entry_id=entry_id,
            kind=kind,
            block_height=block_height,
            sender=sender,
            contract=contract,
            function=function,
            args=tuple(args),
            success=success,
            error=error,
            entry_hash=f"sha256:{digest}",
        )


class CallJournal:
    """Append-only, in-memory journal of ledger activity."""

    def __init__(self) -> None:
        self._entries: list[JournalEntry] = []
        self._entry_ids: set[str] = set()

    def append(self, entry: JournalEntry) -> None:
        """Append an entry.

        Raises ValueError if entry_id is a duplicate.
        """
        if entry.entry_id in self._entry_ids:
            raise ValueError(f"Duplicate journal entry ID: {entry.entry_id}")
        self._entries.append(entry)
        self._entry_ids.add(entry.entry_id)

    def entries(
        self,
        kind: Optional[EntryKind] = None,
        contract: Optional[str] = None,
    ) -> list[JournalEntry]:
        """Return entries, optionally filtered by kind and contract."""
        result = list(self._entries)
        if kind is not None:
            result = [e for e in result if e.kind == kind]
        if contract is not None:
            result = [e for e in result if e.contract == contract]
        return result

    def failures(self) -> list[JournalEntry]:
        """Return public calls that were rejected."""
        return [
            e for e in self._entries
            if e.kind == EntryKind.PUBLIC_CALL and not e.success
        ]

    def entry_hashes(self) -> list[str]:
        return [e.entry_hash for e in self._entries]

    def clear(self) -> None:
        self._entries.clear()
        self._entry_ids.clear()

    @property
    def count(self) -> int:
        return len(self._entries)

    @property
    def last_entry(self) -> Optional[JournalEntry]:
        return self._entries[-1] if self._entries else None

"""Audit trail of ledger activity."""

from workledger.journal.call_journal import CallJournal, EntryKind, JournalEntry

__all__ = ["CallJournal", "EntryKind", "JournalEntry"]

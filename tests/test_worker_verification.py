"""Tests for the worker-verification contract — proves the
unregistered -> registered -> verified lifecycle and its guards."""

import pytest

from workledger.contracts.worker_verification import document_key, worker_key
from workledger.ledger import MockLedger, mock_principal
from workledger.models.records import Document, Worker
from workledger.models.results import WorkerVerificationError

CONTRACT = "worker-verification"
ADMIN = mock_principal("SP1ADMIN...")
WORKER = mock_principal("SP2WORKER...")
OTHER = mock_principal("SP3OTHER...")


@pytest.fixture
def ledger() -> MockLedger:
    chain = MockLedger()
    chain.deploy(CONTRACT, ADMIN)
    return chain


def _register(ledger: MockLedger, worker_id: str = "worker123", name: str = "John Doe",
              sender: str = WORKER):
    return ledger.call_public(CONTRACT, "register-worker", sender, [worker_id, name])


def _add_document(ledger: MockLedger, sender: str = WORKER, worker_id: str = "worker123"):
    return ledger.call_public(
        CONTRACT, "add-document", sender, [worker_id, "passport", "0x1234567890abcdef"],
    )


def _verified(ledger: MockLedger, worker_id: str = "worker123"):
    return ledger.call_read_only(CONTRACT, "is-worker-verified", [worker_id]).result


class TestRegisterWorker:
    def test_worker_registers(self, ledger: MockLedger) -> None:
        result = _register(ledger)
        assert result.success
        stored = ledger.get_map_entry("workers", {"worker-id": "worker123"})
        assert stored == Worker(
            principal=WORKER, name="John Doe", verified=False, registration_date=1,
        )
        assert stored.as_entry()["registration-date"] == ledger.block_height

    def test_reregistration_allowed_while_unverified(self, ledger: MockLedger) -> None:
        _register(ledger)
        ledger.advance_block(2)
        result = _register(ledger, name="Jane Doe", sender=OTHER)
        assert result.success
        stored = ledger.get_map_entry("workers", worker_key("worker123"))
        assert stored == Worker(
            principal=OTHER, name="Jane Doe", verified=False, registration_date=3,
        )

    def test_reregistration_rejected_once_verified(self, ledger: MockLedger) -> None:
        _register(ledger)
        assert _register(ledger).success
        ledger.call_public(CONTRACT, "verify-worker", ADMIN, ["worker123"])
        result = _register(ledger, name="Impostor", sender=OTHER)
        assert not result.success
        assert result.error == WorkerVerificationError.ALREADY_VERIFIED == 1
        stored = ledger.get_map_entry("workers", worker_key("worker123"))
        assert stored.name == "John Doe"
        assert stored.principal == WORKER


class TestAddDocument:
    def test_owner_adds_document(self, ledger: MockLedger) -> None:
        _register(ledger)
        result = _add_document(ledger)
        assert result.success
        stored = ledger.get_map_entry(
            "verified-documents", {"worker-id": "worker123", "document-type": "passport"},
        )
        assert stored.as_entry() == {
            "hash": "0x1234567890abcdef",
            "verified": False,
            "verification-date": 0,
        }

    def test_unknown_worker_rejected(self, ledger: MockLedger) -> None:
        result = _add_document(ledger, worker_id="nonexistent")
        assert not result.success
        assert result.error == 2

    def test_other_principal_rejected(self, ledger: MockLedger) -> None:
        _register(ledger)
        result = _add_document(ledger, sender=OTHER)
        assert not result.success
        assert result.error == 3
        assert ledger.get_map_entry(
            "verified-documents", document_key("worker123", "passport"),
        ) is None

    def test_admin_is_not_owner(self, ledger: MockLedger) -> None:
        _register(ledger)
        assert _add_document(ledger, sender=ADMIN).error == 3

    def test_readding_resets_verification(self, ledger: MockLedger) -> None:
        _register(ledger)
        _add_document(ledger)
        ledger.call_public(CONTRACT, "verify-document", ADMIN, ["worker123", "passport"])
        _add_document(ledger)
        stored = ledger.get_map_entry(
            "verified-documents", document_key("worker123", "passport"),
        )
        assert stored == Document(hash="0x1234567890abcdef")


class TestVerifyDocument:
    def test_admin_verifies_document(self, ledger: MockLedger) -> None:
        _register(ledger)
        _add_document(ledger)
        ledger.advance_block(4)
        result = ledger.call_public(
            CONTRACT, "verify-document", ADMIN, ["worker123", "passport"],
        )
        assert result.success
        stored = ledger.get_map_entry(
            "verified-documents", document_key("worker123", "passport"),
        )
        assert stored.verified is True
        assert stored.verification_date == 5
        assert stored.hash == "0x1234567890abcdef"

    def test_non_admin_rejected(self, ledger: MockLedger) -> None:
        _register(ledger)
        _add_document(ledger)
        result = ledger.call_public(
            CONTRACT, "verify-document", WORKER, ["worker123", "passport"],
        )
        assert not result.success
        assert result.error == 5
        stored = ledger.get_map_entry(
            "verified-documents", document_key("worker123", "passport"),
        )
        assert stored.verified is False

    def test_missing_document_checked_before_admin(self, ledger: MockLedger) -> None:
        result = ledger.call_public(
            CONTRACT, "verify-document", OTHER, ["worker123", "passport"],
        )
        assert result.error == WorkerVerificationError.DOCUMENT_NOT_FOUND == 4


class TestVerifyWorker:
    def test_admin_verifies_worker(self, ledger: MockLedger) -> None:
        _register(ledger)
        result = ledger.call_public(CONTRACT, "verify-worker", ADMIN, ["worker123"])
        assert result.success
        stored = ledger.get_map_entry("workers", worker_key("worker123"))
        assert stored == Worker(
            principal=WORKER, name="John Doe", verified=True, registration_date=1,
        )

    def test_unknown_worker_rejected(self, ledger: MockLedger) -> None:
        result = ledger.call_public(CONTRACT, "verify-worker", ADMIN, ["ghost"])
        assert result.error == 2

    def test_non_admin_rejected(self, ledger: MockLedger) -> None:
        _register(ledger)
        result = ledger.call_public(CONTRACT, "verify-worker", WORKER, ["worker123"])
        assert result.error == 5
        assert _verified(ledger) is False


class TestIsWorkerVerified:
    def test_reports_status(self, ledger: MockLedger) -> None:
        _register(ledger)
        assert _verified(ledger) is False
        ledger.call_public(CONTRACT, "verify-worker", ADMIN, ["worker123"])
        assert _verified(ledger) is True

    def test_unknown_worker_reads_false(self, ledger: MockLedger) -> None:
        result = ledger.call_read_only(CONTRACT, "is-worker-verified", ["ghost"])
        assert result.success
        assert result.result is False


class TestTransferAdmin:
    def test_admin_transfers(self, ledger: MockLedger) -> None:
        result = ledger.call_public(CONTRACT, "transfer-admin", ADMIN, [OTHER])
        assert result.success
        assert ledger.get_variable("worker-verification.admin") == OTHER

    def test_non_admin_rejected(self, ledger: MockLedger) -> None:
        result = ledger.call_public(CONTRACT, "transfer-admin", WORKER, [WORKER])
        assert not result.success
        assert result.error == 5
        assert ledger.get_variable("worker-verification.admin") == ADMIN

        _register(ledger)
        assert ledger.call_public(CONTRACT, "verify-worker", ADMIN, ["worker123"]).success

    def test_new_admin_value_is_not_validated(self, ledger: MockLedger) -> None:
        assert ledger.call_public(CONTRACT, "transfer-admin", ADMIN, [""]).success
        assert ledger.get_variable("worker-verification.admin") == ""

"""Worker-verification contract — worker identities and their documents.

Per-worker lifecycle: unregistered -> registered (unverified) -> verified.

Registration stays open until the worker is verified: re-registering an
unverified worker overwrites the record (including its principal), and
only a verified record rejects registration with ALREADY_VERIFIED.
Documents can be added only by the worker's registered principal and
verified only by the contract admin.
"""

from __future__ import annotations

from dataclasses import replace

from workledger.contracts.base import CallContext, ContractDefinition
from workledger.models.records import Document, Worker
from workledger.models.results import CallResult, WorkerVerificationError
from workledger.store.maps import CompositeKey

CONTRACT_NAME = "worker-verification"
WORKERS_MAP = "workers"
DOCUMENTS_MAP = "verified-documents"

contract = ContractDefinition(CONTRACT_NAME)


def worker_key(worker_id: str) -> CompositeKey:
    return CompositeKey({"worker-id": worker_id})


def document_key(worker_id: str, document_type: str) -> CompositeKey:
    return CompositeKey({"worker-id": worker_id, "document-type": document_type})


@contract.public("register-worker")
def register_worker(ctx: CallContext, worker_id: str, name: str) -> CallResult:
    existing = ctx.maps.get(WORKERS_MAP, worker_key(worker_id))
    if existing is not None and existing.verified:
        return CallResult.fail(WorkerVerificationError.ALREADY_VERIFIED)

    ctx.maps.put(
        WORKERS_MAP,
        worker_key(worker_id),
        Worker(
            principal=ctx.sender,
            name=name,
            verified=False,
            registration_date=ctx.block_height,
        ),
    )
    return CallResult.ok()


@contract.public("add-document")
def add_document(
    ctx: CallContext,
    worker_id: str,
    document_type: str,
    document_hash: str,
) -> CallResult:
    worker = ctx.maps.get(WORKERS_MAP, worker_key(worker_id))
    if worker is None:
        return CallResult.fail(WorkerVerificationError.WORKER_NOT_FOUND)
    if worker.principal != ctx.sender:
        return CallResult.fail(WorkerVerificationError.NOT_WORKER_OWNER)

    ctx.maps.put(
        DOCUMENTS_MAP,
        document_key(worker_id, document_type),
        Document(hash=document_hash),
    )
    return CallResult.ok()


@contract.public("verify-document")
def verify_document(ctx: CallContext, worker_id: str, document_type: str) -> CallResult:
    key = document_key(worker_id, document_type)
    document = ctx.maps.get(DOCUMENTS_MAP, key)
    if document is None:
        return CallResult.fail(WorkerVerificationError.DOCUMENT_NOT_FOUND)
    if not ctx.sender_is_admin():
        return CallResult.fail(WorkerVerificationError.NOT_ADMIN)

    ctx.maps.put(
        DOCUMENTS_MAP,
        key,
        replace(document, verified=True, verification_date=ctx.block_height),
    )
    return CallResult.ok()


@contract.public("verify-worker")
def verify_worker(ctx: CallContext, worker_id: str) -> CallResult:
    key = worker_key(worker_id)
    worker = ctx.maps.get(WORKERS_MAP, key)
    if worker is None:
        return CallResult.fail(WorkerVerificationError.WORKER_NOT_FOUND)
    if not ctx.sender_is_admin():
        return CallResult.fail(WorkerVerificationError.NOT_ADMIN)

    ctx.maps.put(WORKERS_MAP, key, replace(worker, verified=True))
    return CallResult.ok()


@contract.public("transfer-admin")
def transfer_admin(ctx: CallContext, new_admin: str) -> CallResult:
    if not ctx.sender_is_admin():
        return CallResult.fail(WorkerVerificationError.NOT_ADMIN)
    ctx.set_admin(new_admin)
    return CallResult.ok()


@contract.read_only("is-worker-verified")
def is_worker_verified(ctx: CallContext, worker_id: str) -> bool:
    """Unknown workers read as unverified."""
    worker = ctx.maps.get(WORKERS_MAP, worker_key(worker_id))
    return worker.verified if worker is not None else False

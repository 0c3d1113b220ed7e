"""Skill-certification contract — a skill catalogue and per-worker
certifications issued by the contract admin.

Every public function except transfer-admin checks the admin first,
then existence, then field validation. Certification levels are bounded
by the ledger policy (1..5 by default). Re-certifying a worker for the
same skill overwrites the previous certification.
"""

from __future__ import annotations

from typing import Optional

from workledger.contracts.base import CallContext, ContractDefinition
from workledger.models.records import Certification, Skill
from workledger.models.results import CallResult, SkillCertificationError
from workledger.store.maps import CompositeKey

CONTRACT_NAME = "skill-certification"
SKILLS_MAP = "skills"
WORKER_SKILLS_MAP = "worker-skills"

contract = ContractDefinition(CONTRACT_NAME)


def skill_key(skill_id: str) -> CompositeKey:
    return CompositeKey({"skill-id": skill_id})


def certification_key(worker_id: str, skill_id: str) -> CompositeKey:
    return CompositeKey({"worker-id": worker_id, "skill-id": skill_id})


@contract.public("create-skill")
def create_skill(ctx: CallContext, skill_id: str, name: str, category: str) -> CallResult:
    if not ctx.sender_is_admin():
        return CallResult.fail(SkillCertificationError.NOT_ADMIN)
    if ctx.maps.has(SKILLS_MAP, skill_key(skill_id)):
        return CallResult.fail(SkillCertificationError.SKILL_EXISTS)

    ctx.maps.put(
        SKILLS_MAP,
        skill_key(skill_id),
        Skill(name=name, category=category, created_at=ctx.block_height),
    )
    return CallResult.ok()


@contract.public("certify-skill")
def certify_skill(
    ctx: CallContext,
    worker_id: str,
    skill_id: str,
    level: int,
    expiration_date: Optional[int] = None,
    proof_hash: Optional[str] = None,
) -> CallResult:
    if not ctx.sender_is_admin():
        return CallResult.fail(SkillCertificationError.NOT_ADMIN)
    if not ctx.maps.has(SKILLS_MAP, skill_key(skill_id)):
        return CallResult.fail(SkillCertificationError.SKILL_NOT_FOUND)
    min_level, max_level = ctx.policy.certification_level_bounds()
    if level < min_level or level > max_level:
        return CallResult.fail(SkillCertificationError.INVALID_LEVEL)

    ctx.maps.put(
        WORKER_SKILLS_MAP,
        certification_key(worker_id, skill_id),
        Certification(
            certified_by=ctx.sender,
            certification_date=ctx.block_height,
            level=level,
            expiration_date=expiration_date,
            proof_hash=proof_hash,
        ),
    )
    return CallResult.ok()


@contract.public("transfer-admin")
def transfer_admin(ctx: CallContext, new_admin: str) -> CallResult:
    if not ctx.sender_is_admin():
        return CallResult.fail(SkillCertificationError.NOT_ADMIN_FOR_TRANSFER)
    ctx.set_admin(new_admin)
    return CallResult.ok()


@contract.read_only("is-skill-valid")
def is_skill_valid(ctx: CallContext, worker_id: str, skill_id: str) -> bool:
    """A certification expires at its expiration height, not after it."""
    certification = ctx.maps.get(WORKER_SKILLS_MAP, certification_key(worker_id, skill_id))
    if certification is None:
        return False
    return certification.is_valid_at(ctx.block_height)


@contract.read_only("get-skill-details")
def get_skill_details(ctx: CallContext, skill_id: str) -> Optional[Skill]:
    return ctx.maps.get(SKILLS_MAP, skill_key(skill_id))

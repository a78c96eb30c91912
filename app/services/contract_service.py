"""
CONTRACT SERVICE
================

Read-only lookups scoped to the calling profile:
- Single contract (client only)
- Active contracts of a profile
- Unpaid jobs on in-progress contracts

All functions take the SQLAlchemy session explicitly.
"""

from sqlalchemy import or_
from app.models import Contract, Job, ContractStatus
from app.services.authorization_service import can_view_contract


class ContractError(Exception):
    """Base exception for contract lookups"""
    pass


class ContractNotFoundError(ContractError):
    """Raised when a contract is absent or not visible to the caller"""
    pass


def _party_filter(profile_id):
    return or_(Contract.client_id == profile_id, Contract.contractor_id == profile_id)


# ============================================================
# SINGLE CONTRACT
# ============================================================

def get_contract(session, contract_id, profile_id):
    """
    Return a contract owned by the caller.

    A contract belonging to another client is reported as not found,
    the same as a missing one.
    """
    contract = session.get(Contract, contract_id)

    allowed, _ = can_view_contract(profile_id, contract)
    if not allowed:
        raise ContractNotFoundError(f"Contract {contract_id} not found")

    return contract


# ============================================================
# LISTINGS
# ============================================================

def list_contracts(session, profile_id):
    """Non-terminated contracts where the caller is client or contractor"""
    return session.query(Contract).filter(
        _party_filter(profile_id),
        Contract.status != ContractStatus.TERMINATED.value
    ).order_by(Contract.id).all()


def list_unpaid_jobs(session, profile_id):
    """Unpaid jobs on the caller's in-progress contracts"""
    return session.query(Job).join(Contract).filter(
        Job.paid.is_(None),
        Contract.status == ContractStatus.IN_PROGRESS.value,
        _party_filter(profile_id)
    ).order_by(Job.id).all()

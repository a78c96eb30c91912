"""
PAYMENT SERVICE - ATOMIC BALANCE OPERATIONS
============================================

CRITICAL BUSINESS RULES:
1. A job is paid at most once (paid: NULL -> True, never reset)
2. Payment debits client, credits contractor and marks the job paid
   in ONE transaction (all or nothing)
3. A payment never drives the client balance negative
4. Only clients deposit, and only into their own balance
5. A deposit may not exceed 25% of the client's unpaid job total

All functions take the SQLAlchemy session explicitly.
"""

import logging
import math

from sqlalchemy import func, update
from app.models import Profile, Contract, Job, utcnow
from app.services.authorization_service import (
    can_pay_job, can_deposit, require_authorization
)

logger = logging.getLogger(__name__)

DEPOSIT_LIMIT_RATIO = 0.25


# ============================================================
# CUSTOM EXCEPTIONS
# ============================================================

class PaymentError(Exception):
    """Base exception for payment and deposit operations"""
    pass


class JobNotFoundError(PaymentError):
    """Raised when the job does not exist"""
    pass


class JobAlreadyPaidError(PaymentError):
    """Raised when the job was already paid"""
    pass


class ProfileNotFoundError(PaymentError):
    """Raised when the target profile does not exist"""
    pass


class InsufficientBalanceError(PaymentError):
    """Raised when the client balance does not cover the job price"""
    pass


class InvalidOperationError(PaymentError):
    """Raised when a business rule forbids the operation"""
    pass


class InvalidAmountError(InvalidOperationError):
    """Raised when amount is not a positive number"""
    pass


class DepositLimitExceededError(InvalidOperationError):
    """Raised when a deposit exceeds the allowed limit"""
    pass


# ============================================================
# ROW LOCKING HELPERS
# ============================================================

def _get_job_for_update(session, job_id):
    """Load a job, locking its row where the backend supports it"""
    return session.query(Job).filter(Job.id == job_id) \
        .with_for_update().populate_existing().one_or_none()


def _get_profile_for_update(session, profile_id):
    return session.query(Profile).filter(Profile.id == profile_id) \
        .with_for_update().populate_existing().one()


def _mark_job_paid(session, job):
    """
    Flip paid NULL -> True.

    The WHERE clause makes this authoritative: if another transaction
    already paid the job, no row matches and nothing changes.
    """
    result = session.execute(
        update(Job)
        .where(Job.id == job.id, Job.paid.is_(None))
        .values(paid=True, payment_date=utcnow())
        .execution_options(synchronize_session=False)
    )
    if result.rowcount != 1:
        raise JobAlreadyPaidError(f"Job {job.id} already paid")


def _transfer(session, client, contractor, amount):
    """Move amount from client to contractor inside the current transaction"""
    debited = session.execute(
        update(Profile)
        .where(Profile.id == client.id, Profile.balance >= amount)
        .values(balance=Profile.balance - amount)
        .execution_options(synchronize_session=False)
    )
    if debited.rowcount != 1:
        raise InsufficientBalanceError("Insufficient balance")

    session.execute(
        update(Profile)
        .where(Profile.id == contractor.id)
        .values(balance=Profile.balance + amount)
        .execution_options(synchronize_session=False)
    )


# ============================================================
# PAY JOB (ATOMIC)
# ============================================================

def pay_job(session, job_id, profile_id):
    """
    Pay for a job on behalf of its client.

    Checks, in order:
    1. Job exists                      -> JobNotFoundError
    2. Caller is the contract's client -> AuthorizationError
    3. Job is not already paid         -> JobAlreadyPaidError
    4. Client balance covers the price -> InsufficientBalanceError

    ATOMIC OPERATION:
    - Mark job paid (conditional on still being unpaid)
    - Debit client (conditional on balance >= price)
    - Credit contractor

    Returns: the paid Job
    """
    try:
        job = _get_job_for_update(session, job_id)
        if job is None:
            raise JobNotFoundError(f"Job {job_id} not found")

        require_authorization(can_pay_job, profile_id, job)

        if job.is_paid():
            raise JobAlreadyPaidError(f"Job {job_id} already paid")

        contract = job.contract
        client = _get_profile_for_update(session, contract.client_id)
        contractor = _get_profile_for_update(session, contract.contractor_id)
        price = job.price

        if client.balance < price:
            raise InsufficientBalanceError(
                f"Insufficient balance. Required: {price:.2f}, Available: {client.balance:.2f}"
            )

        _mark_job_paid(session, job)
        _transfer(session, client, contractor, price)

        session.commit()

    except Exception:
        session.rollback()
        raise

    logger.info("Job %s paid: %.2f from profile %s to profile %s",
                job_id, price, contract.client_id, contract.contractor_id)
    return job


# ============================================================
# DEPOSIT LIMIT
# ============================================================

def get_deposit_limit(session, client_id):
    """
    Maximum single deposit for a client.

    25% of the price of all unpaid jobs under the client's contracts,
    whatever the contract status. No unpaid work means a limit of 0.
    """
    total_unpaid = session.query(func.sum(Job.price)).select_from(Job).join(Contract).filter(
        Contract.client_id == client_id,
        Job.paid.is_(None)
    ).scalar()

    return (total_unpaid or 0.0) * DEPOSIT_LIMIT_RATIO


def _validate_amount(amount):
    if isinstance(amount, bool):
        raise InvalidAmountError("Deposit amount must be a number")
    try:
        amount = float(amount)
    except (TypeError, ValueError):
        raise InvalidAmountError("Deposit amount must be a number")

    if not math.isfinite(amount) or amount <= 0:
        raise InvalidAmountError("Deposit amount must be greater than 0")

    return amount


# ============================================================
# DEPOSIT (ATOMIC)
# ============================================================

def deposit_balance(session, target_user_id, profile_id, amount):
    """
    Credit a client's own balance.

    Checks, in order:
    1. Caller deposits into own balance -> AuthorizationError
    2. Target profile exists            -> ProfileNotFoundError
    3. Target is a client               -> InvalidOperationError
    4. Amount is a positive number      -> InvalidAmountError
    5. Amount <= deposit limit          -> DepositLimitExceededError

    Returns: the updated Profile
    """
    try:
        require_authorization(can_deposit, profile_id, target_user_id)

        client = session.get(Profile, target_user_id)
        if client is None:
            raise ProfileNotFoundError("User not found")

        if not client.is_client():
            raise InvalidOperationError("Only clients can make deposits")

        amount = _validate_amount(amount)

        deposit_limit = get_deposit_limit(session, client.id)
        logger.debug("Deposit limit for profile %s: %.2f", client.id, deposit_limit)

        if amount > deposit_limit:
            raise DepositLimitExceededError("Deposit amount exceeds 25% of total jobs to pay")

        session.execute(
            update(Profile)
            .where(Profile.id == client.id)
            .values(balance=Profile.balance + amount)
            .execution_options(synchronize_session=False)
        )
        session.commit()

    except Exception:
        session.rollback()
        raise

    logger.info("Deposit of %.2f into profile %s", amount, client.id)
    return client

"""
CENTRALIZED AUTHORIZATION SERVICE
==================================

All permission checks live here.
Routes and other services call these functions.

Every check returns (allowed, reason) so callers can either
branch on it or hand it to require_authorization().
"""


class AuthorizationError(Exception):
    """Raised when an authenticated profile is not allowed to act"""
    pass


# ============================================================
# CONTRACT VISIBILITY
# ============================================================

def can_view_contract(profile_id, contract):
    """
    Check if profile can read a single contract.

    Requirements:
    - Profile must be the contract's client
    """
    if contract is None:
        return False, "Contract not found"

    if contract.client_id != profile_id:
        return False, "You are not the client of this contract"

    return True, None


# ============================================================
# PAYMENT AUTHORIZATION
# ============================================================

def can_pay_job(profile_id, job):
    """
    Check if profile can pay for a job.

    Requirements:
    - Profile must be the client of the job's contract
    """
    if job is None:
        return False, "Job not found"

    if job.contract.client_id != profile_id:
        return False, "Forbidden: You are not the client associated with this job"

    return True, None


# ============================================================
# DEPOSIT AUTHORIZATION
# ============================================================

def can_deposit(profile_id, target_user_id):
    """
    Check if profile can deposit into a balance.

    Requirements:
    - Profiles may only deposit into their own balance
    """
    if profile_id != target_user_id:
        return False, "Forbidden: You are not authorized to perform this action"

    return True, None


# ============================================================
# HELPER FUNCTION: REQUIRE AUTHORIZATION
# ============================================================

def require_authorization(check_func, *args, error_class=AuthorizationError):
    """
    Wrapper to raise exception if authorization fails.

    Usage:
        require_authorization(can_pay_job, profile_id, job)
    """
    allowed, reason = check_func(*args)
    if not allowed:
        raise error_class(reason)
    return True

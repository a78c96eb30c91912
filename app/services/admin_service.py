"""
ADMIN SERVICE
=============

Read-only reports over paid jobs within a time window:
- Best profession (highest total earned)
- Best clients (highest single paid jobs)
"""

from datetime import date, datetime, time, timezone

from sqlalchemy import func
from sqlalchemy.orm import aliased
from app.models import Profile, Contract, Job


class AdminQueryError(Exception):
    """Base exception for admin reports"""
    pass


class InvalidQueryError(AdminQueryError):
    """Raised when report parameters are missing or malformed"""
    pass


# ============================================================
# PARAMETER PARSING
# ============================================================

def _parse_datetime(raw, name, end_of_day=False):
    if not raw:
        raise InvalidQueryError(f"'{name}' query parameter is required")

    raw = raw.strip()
    try:
        # Date-only values cover the whole day when used as the range end
        day = date.fromisoformat(raw)
    except ValueError:
        day = None

    if day is not None:
        return datetime.combine(day, time.max if end_of_day else time.min)

    try:
        value = datetime.fromisoformat(raw)
    except ValueError:
        raise InvalidQueryError(f"'{name}' must be an ISO-8601 date or datetime")

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_time_range(start, end):
    """Parse and validate the [start, end] reporting window"""
    start_at = _parse_datetime(start, 'start')
    end_at = _parse_datetime(end, 'end', end_of_day=True)

    if start_at > end_at:
        raise InvalidQueryError("'start' must not be after 'end'")

    return start_at, end_at


def parse_limit(raw, default):
    if raw is None or raw == '':
        return default
    try:
        limit = int(raw)
    except (TypeError, ValueError):
        raise InvalidQueryError("'limit' must be a positive integer")

    if limit < 1:
        raise InvalidQueryError("'limit' must be a positive integer")
    return limit


# ============================================================
# BEST PROFESSION
# ============================================================

def get_best_profession(session, start, end):
    """
    Profession that earned the most within [start, end].

    Returns a list with at most one {profession, totalEarned} entry.
    Equal totals are broken by profession name.
    """
    contractor = aliased(Profile)
    total_earned = func.sum(Job.price).label('total_earned')

    rows = session.query(contractor.profession, total_earned) \
        .select_from(Job) \
        .join(Contract, Job.contract_id == Contract.id) \
        .join(contractor, Contract.contractor_id == contractor.id) \
        .filter(
            Job.paid.is_(True),
            Job.payment_date.between(start, end)
        ) \
        .group_by(contractor.profession) \
        .order_by(total_earned.desc(), contractor.profession.asc()) \
        .limit(1) \
        .all()

    return [
        {'profession': row.profession, 'totalEarned': row.total_earned}
        for row in rows
    ]


# ============================================================
# BEST CLIENTS
# ============================================================

def get_best_clients(session, start, end, limit=2):
    """
    Clients behind the highest-priced jobs paid within [start, end].

    Ranked per job, not per client total, so a client with several
    large jobs can appear more than once.
    """
    client = aliased(Profile)

    rows = session.query(Job.price, client) \
        .select_from(Job) \
        .join(Contract, Job.contract_id == Contract.id) \
        .join(client, Contract.client_id == client.id) \
        .filter(
            Job.paid.is_(True),
            Job.payment_date.between(start, end)
        ) \
        .order_by(Job.price.desc(), Job.id.asc()) \
        .limit(limit) \
        .all()

    return [
        {'id': profile.id, 'fullName': profile.full_name, 'paid': price}
        for price, profile in rows
    ]

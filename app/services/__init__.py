"""
Services Package
================

Business logic layer for the marketplace API.

All balance and authorization operations are handled here.
Routes should call these services, not manipulate models directly.
Every service function receives the SQLAlchemy session explicitly.
"""

from app.services.payment_service import (
    pay_job,
    deposit_balance,
    get_deposit_limit,
    PaymentError,
    JobNotFoundError,
    JobAlreadyPaidError,
    ProfileNotFoundError,
    InsufficientBalanceError,
    InvalidOperationError,
    InvalidAmountError,
    DepositLimitExceededError
)

from app.services.authorization_service import (
    can_view_contract,
    can_pay_job,
    can_deposit,
    require_authorization,
    AuthorizationError
)

from app.services.contract_service import (
    get_contract,
    list_contracts,
    list_unpaid_jobs,
    ContractError,
    ContractNotFoundError
)

from app.services.admin_service import (
    parse_time_range,
    parse_limit,
    get_best_profession,
    get_best_clients,
    AdminQueryError,
    InvalidQueryError
)

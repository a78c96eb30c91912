"""
Centralized error handlers.

Maps service exceptions to JSON responses so routes only call services.
No stack traces or internal details are exposed to clients.
"""

import logging

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from app.extensions import db
from app.services.admin_service import InvalidQueryError
from app.services.authorization_service import AuthorizationError
from app.services.contract_service import ContractNotFoundError
from app.services.payment_service import (
    PaymentError, JobNotFoundError, JobAlreadyPaidError, ProfileNotFoundError,
    InsufficientBalanceError, InvalidOperationError
)

logger = logging.getLogger(__name__)

# Most specific first: lookups walk this list in order
ERROR_STATUS = [
    (AuthorizationError, 403),
    (ContractNotFoundError, 404),
    (JobNotFoundError, 404),
    (JobAlreadyPaidError, 404),
    (ProfileNotFoundError, 404),
    (InsufficientBalanceError, 400),
    (InvalidOperationError, 400),
    (InvalidQueryError, 400),
    (PaymentError, 400),
]


def error_response(status_code, message):
    response = jsonify({'error': message})
    response.status_code = status_code
    return response


def status_for(exc):
    for error_class, status_code in ERROR_STATUS:
        if isinstance(exc, error_class):
            return status_code
    return 500


def register_error_handlers(app):
    """Register domain, HTTP and database error handlers on the app."""

    def handle_domain_error(exc):
        status_code = status_for(exc)
        logger.warning("%s %s rejected (%s): %s",
                       request.method, request.path, type(exc).__name__, exc)
        return error_response(status_code, str(exc))

    for error_class, _ in ERROR_STATUS:
        app.register_error_handler(error_class, handle_domain_error)

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return error_response(exc.code, exc.description)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(exc):
        db.session.rollback()
        logger.exception("Database error: %s", type(exc).__name__)
        return error_response(500, 'Internal server error')

# src/accounts_backend/errors.py
import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

GENERIC_LOGIN_FAILURE = "Incorrect username, email or password"


class AccountError(Exception):
    """Base class for every typed failure raised by the account service."""
    status = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(AccountError, ValueError):
    status = 400


class ConflictError(AccountError):
    status = 409


class AuthenticationError(AccountError):
    status = 401

    def __init__(self, message: str = GENERIC_LOGIN_FAILURE):
        super().__init__(message)


class NotFoundError(AuthenticationError):
    # Same message and status as a password mismatch so callers can't tell them apart.
    pass


class InternalError(AccountError):
    status = 500


def json_error(message: str, status: int):
    return {"error": {"message": message, "status": status}}, status

def handle_account_error(e: AccountError):
    if isinstance(e, InternalError):
        logger.error(f"Internal account error: {e.message}")
    payload, status_code = json_error(e.message, e.status)
    return jsonify(payload), status_code

def handle_http_exception(e: HTTPException):
    message = getattr(e, "description", None) or getattr(e, "name", "HTTP Error")
    status = getattr(e, "code", None) or 500
    payload, status_code = json_error(message, status)
    return jsonify(payload), status_code

def handle_generic_exception(e: Exception):
    logger.exception("Unhandled exception")
    payload, status_code = json_error("Internal server error", 500)
    return jsonify(payload), status_code

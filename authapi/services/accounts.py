"""Registration and credential checks against the user store."""

import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from authapi.core.exceptions import AuthError, ConflictError, InputValidationError
from authapi.core.security import generate_salt, hash_password, verify_password
from authapi.core.store import UserStore
from authapi.models.user import UserRecord
from authapi.schemas.auth import RegisterRequest, first_error_message

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "User exists!"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"


async def register_user(payload: Any, store: UserStore) -> UserRecord:
    """
    Validate payload, hash the password and insert a new record.

    Raises InputValidationError with the first violation, or ConflictError if
    the email is taken (checked before hashing and again atomically on insert).
    """
    try:
        body = RegisterRequest.model_validate(payload)
    except ValidationError as e:
        raise InputValidationError(first_error_message(e)) from e

    # Stored exactly as submitted; EmailStr normalizes the domain part.
    email = payload["email"]
    if store.exists(email):
        logger.info("Registration rejected: email already registered")
        raise ConflictError(USER_EXISTS_MESSAGE)

    salt = await run_in_threadpool(generate_salt)
    password_hash = await run_in_threadpool(hash_password, body.password, salt)
    record = UserRecord(email=email, role=body.role, salt=salt, password_hash=password_hash)

    if not store.add_if_absent(record):
        logger.info("Registration rejected: email registered concurrently")
        raise ConflictError(USER_EXISTS_MESSAGE)

    logger.info("Registered user with role=%s", record.role)
    return record


async def authenticate(payload: Any, store: UserStore) -> UserRecord:
    """
    Check credentials; the login `username` is matched against stored emails.

    Raises AuthError with the same message for an unknown email, a wrong
    password or missing credentials (including a body that is not an object).
    """
    if not isinstance(payload, dict):
        payload = {}
    username = payload.get("username")
    password = payload.get("password")
    if not isinstance(username, str) or not isinstance(password, str):
        logger.info("Login failed: missing credentials")
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)

    user = store.get(username)
    if user is None:
        logger.info("Login failed: invalid credentials")
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)
    if not await run_in_threadpool(verify_password, password, user.password_hash):
        logger.info("Login failed: invalid credentials")
        raise AuthError(INVALID_CREDENTIALS_MESSAGE)
    return user

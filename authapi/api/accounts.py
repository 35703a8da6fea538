"""Registration and login endpoints."""

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, status

from authapi.core.exceptions import InputValidationError
from authapi.core.store import UserStore, get_user_store
from authapi.schemas.auth import MessageResponse
from authapi.services.accounts import authenticate, register_user

router = APIRouter()


async def _read_json_body(request: Request) -> Any:
    """Parse the raw request body; validation happens in the service layer."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InputValidationError(f"Invalid JSON: {e!s}") from e


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def register(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> MessageResponse:
    """Register a user from {username, email, type, password}."""
    payload = await _read_json_body(request)
    await register_user(payload, store)
    return MessageResponse(message="User registered successfully!")


@router.post("/login", response_model=MessageResponse)
async def login(
    request: Request,
    store: Annotated[UserStore, Depends(get_user_store)],
) -> MessageResponse:
    """
    Check {username, password}, where username is the registered email.
    No session or token is issued.
    """
    # Unparseable bodies count as missing credentials, as for an empty object.
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        payload = {}
    await authenticate(payload, store)
    return MessageResponse(message="Login successful")

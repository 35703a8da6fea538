"""Pydantic request/response schemas."""

from authapi.schemas.auth import MessageResponse, RegisterRequest, first_error_message

__all__ = ["MessageResponse", "RegisterRequest", "first_error_message"]

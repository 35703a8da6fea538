"""Request/response schemas for registration and login."""

import re

from pydantic import AliasChoices, BaseModel, EmailStr, Field, ValidationError, field_validator

from authapi.models.user import Role

USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 24
PASSWORD_MIN_LEN = 5
PASSWORD_MAX_LEN = 24

# Lookaheads are not supported by pydantic's pattern engine; checked in a validator.
# "." stops at newlines and \W is ASCII-only; \Z rejects a trailing newline.
PASSWORD_COMPLEXITY = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\W).*\Z", re.ASCII)


class RegisterRequest(BaseModel):
    """Registration input. Field order is the order violations are reported in."""

    username: str = Field(..., min_length=USERNAME_MIN_LEN, max_length=USERNAME_MAX_LEN)
    email: EmailStr
    role: Role = Field(..., validation_alias=AliasChoices("type", "role"))
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)

    @field_validator("email", mode="before")
    @classmethod
    def reject_padded_email(cls, v: object) -> object:
        if isinstance(v, str) and v != v.strip():
            raise ValueError("email must not contain leading or trailing whitespace")
        return v

    @field_validator("password")
    @classmethod
    def validate_password_complexity(cls, v: str) -> str:
        if not PASSWORD_COMPLEXITY.match(v):
            raise ValueError(
                "password must contain a lowercase letter, an uppercase letter and a special character"
            )
        return v


class MessageResponse(BaseModel):
    """Response body for every endpoint."""

    message: str


def first_error_message(exc: ValidationError) -> str:
    """Render the first validation error as '<field>: <reason>'."""
    error = exc.errors()[0]
    # Validators raising ValueError carry the bare exception; use its text, not "Value error, ..."
    ctx_error = error.get("ctx", {}).get("error")
    reason = str(ctx_error) if ctx_error is not None else error["msg"]
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {reason}" if field else reason

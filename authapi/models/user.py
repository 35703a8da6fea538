"""Stored credential record for a registered user."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Role = Literal["user", "admin"]


class UserRecord(BaseModel):
    """
    Credential record keyed by email. Immutable once created.

    The username given at registration is validated but not kept here.
    """

    model_config = ConfigDict(frozen=True)

    email: str
    role: Role
    salt: str
    password_hash: str

"""In-memory record models."""

from authapi.models.user import UserRecord

__all__ = ["UserRecord"]

"""Core app configuration, security helpers and the credential store."""

from authapi.core.config import get_settings, settings
from authapi.core.store import get_user_store

__all__ = ["get_settings", "settings", "get_user_store"]

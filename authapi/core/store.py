"""Credential store: mapping from email to UserRecord, injectable per request."""

import threading
from abc import ABC, abstractmethod

from authapi.models.user import UserRecord


class UserStore(ABC):
    """Store abstraction; durable backends implement the same three operations."""

    @abstractmethod
    def get(self, email: str) -> UserRecord | None:
        """Return the record for email, or None."""

    @abstractmethod
    def exists(self, email: str) -> bool:
        """True if a record for email is present."""

    @abstractmethod
    def add_if_absent(self, record: UserRecord) -> bool:
        """
        Insert record unless its email is already present, as one atomic step.

        Returns True if inserted, False if an existing record was kept.
        """


class InMemoryUserStore(UserStore):
    """Process-local store. Contents are lost on restart."""

    def __init__(self) -> None:
        self._records: dict[str, UserRecord] = {}
        self._lock = threading.Lock()

    def get(self, email: str) -> UserRecord | None:
        return self._records.get(email)

    def exists(self, email: str) -> bool:
        return email in self._records

    def add_if_absent(self, record: UserRecord) -> bool:
        with self._lock:
            if record.email in self._records:
                return False
            self._records[record.email] = record
            return True

    def __len__(self) -> int:
        return len(self._records)


_default_store = InMemoryUserStore()


def get_user_store() -> UserStore:
    """Dependency that returns the process-wide store (override in tests)."""
    return _default_store

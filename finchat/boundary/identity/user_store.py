"""
User store abstraction and in-memory implementation.

The store appends and looks up; it does not enforce username uniqueness.
Callers check for an existing user before appending.

Dependencies: finchat.models.user
System role: Identity store consumed by registration, login and the access gate
"""

from typing import Protocol

from finchat.models.user import UserRecord


class UserStore(Protocol):
    """Interface for user persistence backends."""

    def append(self, record: UserRecord) -> None:
        ...

    def find_by_username(self, username: str | None) -> UserRecord | None:
        ...


class InMemoryUserStore:
    """Ordered list of users living for the lifetime of the process."""

    def __init__(self, records: list[UserRecord] | None = None) -> None:
        self._records: list[UserRecord] = list(records or [])

    def append(self, record: UserRecord) -> None:
        """Add a record at the end of the list."""
        self._records.append(record)

    def find_by_username(self, username: str | None) -> UserRecord | None:
        """Return the first record whose username matches exactly."""
        if username is None:
            return None
        for record in self._records:
            if record.username == username:
                return record
        return None

    def all(self) -> list[UserRecord]:
        """Snapshot of every record in insertion order."""
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()

    def __len__(self) -> int:
        return len(self._records)

"""
In-memory chat log.

Keeps every answered question for the lifetime of the process so the
access check can hand a user their previous exchanges.

Dependencies: finchat.models.chat
System role: Chat history store
"""

from finchat.models.chat import ChatLogEntry


class ChatLog:
    """Append-only list of chat log entries."""

    def __init__(self) -> None:
        self._entries: list[ChatLogEntry] = []

    def append(self, entry: ChatLogEntry) -> None:
        self._entries.append(entry)

    def for_user(self, username: str) -> list[ChatLogEntry]:
        """Entries for one user, oldest first."""
        return [entry for entry in self._entries if entry.username == username]

    def clear(self) -> None:
        self._entries.clear()

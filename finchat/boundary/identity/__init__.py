"""Identity store."""

from finchat.boundary.identity.user_store import InMemoryUserStore, UserStore

__all__ = ["InMemoryUserStore", "UserStore"]

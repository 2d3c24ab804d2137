"""
User domain model.

Dependencies: pydantic
System role: Identity store record
"""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class UserRecord(BaseModel):
    """Registered user. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    username: str = Field(description="Case-sensitive unique username")
    password_hash: str = Field(description="bcrypt hash of the password")
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="before")
    @classmethod
    def stamp_timestamps(cls, data: Any) -> Any:
        """Default both timestamps to a single instant."""
        if isinstance(data, dict):
            created_at = data.get("created_at") or datetime.now(timezone.utc)
            data = {**data, "created_at": created_at, "updated_at": data.get("updated_at") or created_at}
        return data

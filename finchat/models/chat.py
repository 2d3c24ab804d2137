"""
Chat domain models and schemas.

Request/response schemas for chat operations, plus the chat log entry and
the retrieval fragment passed between pipeline stages.

Dependencies: pydantic
System role: Chat API contracts
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class Fragment(BaseModel):
    """Chunk text returned by similarity search."""

    chunk_id: str = Field(description="Vector id of the originating chunk (chunk-<i>)")
    text: str = Field(description="Chunk text")
    score: float | None = Field(default=None, description="Similarity score")


class ChatRequest(BaseModel):
    """Request schema for chat questions."""

    username: str | None = Field(
        default=None,
        description="User asking; defaults to the username bound in the token",
    )
    question: str = Field(default="", description="Free-text finance question")


class ChatOutcome(BaseModel):
    """Answer plus the fragments it was built from."""

    model_config = ConfigDict(populate_by_name=True)

    chat: str = Field(description="Synthesized or templated answer")
    sources: list[str] = Field(description="Fragment texts used for the answer")
    original_chunks: int = Field(alias="originalChunks", description="Fragments returned by search")
    validated_chunks: int = Field(alias="validatedChunks", description="Fragments kept after filtering")
    ai_processed: bool = Field(alias="aiProcessed", description="Whether the LLM wrote the answer")


class ChatLogEntry(BaseModel):
    """Answered question kept in the in-memory chat log."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    question: str
    answer: str
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        alias="createdAt",
    )


class CanAccessResponse(BaseModel):
    """Access check acknowledgement with the user's chat log."""

    message: str
    chat: list[ChatLogEntry]

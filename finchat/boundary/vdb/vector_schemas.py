"""
Vector database schemas.

Pydantic models for vector operations.
Used for type-safe vector store interactions.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


def chunk_vector_id(position: int) -> str:
    """Vector id for the chunk at a position in the scraped corpus."""
    return f"chunk-{position}"


class VectorRecord(BaseModel):
    """Single vector upserted into the index."""

    id: str = Field(description="Positional chunk identifier (chunk-<i>)")
    values: list[float] = Field(description="Embedding vector")
    metadata: dict[str, str] = Field(description="Chunk metadata; 'text' holds the chunk")

"""
Vector store configuration settings.

Manages the Pinecone index used for chunk storage and similarity search,
and the embedding model that feeds it.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Pinecone index configuration."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_STORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="Pinecone API key")
    index_name: str = Field(default="finance-index", description="Pinecone index name")
    namespace: str = Field(default="", description="Index namespace ('' is the default namespace)")

    top_k: int = Field(default=5, description="Number of top results to retrieve", ge=1, le=100)
    clear_before_upsert: bool = Field(
        default=False,
        description="Delete every vector in the namespace before each upsert batch",
    )


class EmbeddingSettings(BaseSettings):
    """OpenAI embedding model configuration."""

    model_config = SettingsConfigDict(
        env_prefix="EMBEDDING_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(default="", description="OpenAI API key for embeddings")
    model: str = Field(default="text-embedding-3-small", description="OpenAI embedding model ID")
    dimensions: int = Field(
        default=1024,
        description="Embedding vector dimension (must match the Pinecone index)",
    )

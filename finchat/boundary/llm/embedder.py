"""
OpenAI embedding generator.

Generates fixed-dimension embeddings with OpenAI text-embedding-3 models.
The dimension is pinned so vectors always fit the Pinecone index.

Dependencies: langchain_openai, finchat.core.exceptions
System role: Embedding collaborator for the retrieval pipeline
"""

import logging

from langchain_openai import OpenAIEmbeddings

from finchat.core.exceptions import EmbeddingError

logger = logging.getLogger(__name__)


class OpenAIEmbedder:
    """OpenAI embeddings client."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "text-embedding-3-small",
        dimensions: int = 1024,
        embeddings: OpenAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize embeddings client.

        Args:
            api_key: OpenAI API key (falls back to OPENAI_API_KEY)
            model: Embedding model ID
            dimensions: Output dimensionality
            embeddings: Pre-built LangChain embeddings (tests)
        """
        self._api_key = api_key or None
        self._model = model
        self._dimensions = dimensions
        self._embeddings = embeddings
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, dimensions={dimensions}"
        )

    def _client(self) -> OpenAIEmbeddings:
        # Lazy: construction errors surface as EmbeddingError
        if self._embeddings is None:
            self._embeddings = OpenAIEmbeddings(
                model=self._model,
                dimensions=self._dimensions,
                api_key=self._api_key,
            )
        return self._embeddings

    async def embed_chunks(self, chunks: list[str]) -> list[list[float]]:
        """
        Embed chunks, one vector per chunk in chunk order.

        Raises:
            EmbeddingError: When any embedding request fails
        """
        if not chunks:
            return []
        try:
            vectors = await self._client().aembed_documents(chunks)
        except Exception as e:
            raise EmbeddingError(
                message="Failed to generate chunk embeddings",
                operation="embed_chunks",
                details={"error": str(e), "chunk_count": len(chunks)},
            ) from e

        if len(vectors) != len(chunks):
            raise EmbeddingError(
                message="Embedding count does not match chunk count",
                operation="embed_chunks",
                details={"chunk_count": len(chunks), "vector_count": len(vectors)},
            )
        return vectors

    async def embed_query(self, text: str) -> list[float]:
        """
        Embed a single question.

        Raises:
            EmbeddingError: When the embedding request fails
        """
        try:
            return await self._client().aembed_query(text)
        except Exception as e:
            raise EmbeddingError(
                message="Failed to generate query embedding",
                operation="embed_query",
                details={"error": str(e)},
            ) from e

"""
Pinecone vector store wrapper.

Provides upsert, similarity query and namespace clearing over a single
Pinecone index. The Pinecone SDK is synchronous, so calls run in the
threadpool to keep the event loop free.

Dependencies: pinecone, fastapi.concurrency, finchat.core.exceptions
System role: Vector store collaborator for the retrieval pipeline
"""

import logging
from typing import Any

from fastapi.concurrency import run_in_threadpool
from pinecone import Pinecone

from finchat.boundary.vdb.vector_schemas import VectorRecord
from finchat.core.exceptions import VectorStoreError
from finchat.models.chat import Fragment

logger = logging.getLogger(__name__)


class PineconeVectorStore:
    """
    Pinecone index client.

    Chunks are stored with their text in metadata under ``text`` so that
    queries can return fragments without a second lookup.
    """

    def __init__(
        self,
        api_key: str | None = None,
        index_name: str = "finance-index",
        namespace: str = "",
        index: Any | None = None,
    ) -> None:
        """
        Initialize the index handle.

        Args:
            api_key: Pinecone API key
            index_name: Target index
            namespace: Index namespace
            index: Pre-built index handle (tests)
        """
        self.index_name = index_name
        self.namespace = namespace
        self._api_key = api_key
        self._index = index

    def _get_index(self) -> Any:
        # Lazy: construction errors surface as VectorStoreError
        if self._index is None:
            self._index = Pinecone(api_key=self._api_key).Index(self.index_name)
        return self._index

    async def upsert(self, records: list[VectorRecord]) -> None:
        """
        Upsert vectors by id; existing ids are overwritten.

        Raises:
            VectorStoreError: If the upsert fails
        """
        if not records:
            return

        vectors = [record.model_dump() for record in records]
        try:
            await run_in_threadpool(
                self._get_index().upsert,
                vectors=vectors,
                namespace=self.namespace,
            )
        except Exception as e:
            raise VectorStoreError(
                message="Failed to upsert vectors to Pinecone",
                operation="upsert",
                details={"error": str(e), "vector_count": len(vectors)},
            ) from e

        logger.info(
            f"{__name__}:upsert - Upserted {len(vectors)} vectors",
            extra={"index": self.index_name, "namespace": self.namespace},
        )

    async def query(self, embedding: list[float], top_k: int) -> list[Fragment]:
        """
        Return the top_k most similar chunks, best first.

        Raises:
            VectorStoreError: If the query fails
        """
        try:
            response = await run_in_threadpool(
                self._get_index().query,
                vector=embedding,
                top_k=top_k,
                include_metadata=True,
                namespace=self.namespace,
            )
        except Exception as e:
            raise VectorStoreError(
                message="Failed to query vectors from Pinecone",
                operation="query",
                details={"error": str(e), "top_k": top_k},
            ) from e

        fragments = []
        for match in response.matches or []:
            metadata = match.metadata or {}
            fragments.append(
                Fragment(
                    chunk_id=match.id,
                    text=metadata.get("text", ""),
                    score=match.score,
                )
            )
        return fragments

    async def clear(self) -> None:
        """
        Delete every vector in the namespace.

        Raises:
            VectorStoreError: If the delete fails
        """
        try:
            await run_in_threadpool(
                self._get_index().delete,
                delete_all=True,
                namespace=self.namespace,
            )
        except Exception as e:
            raise VectorStoreError(
                message="Failed to clear Pinecone namespace",
                operation="delete",
                details={"error": str(e), "namespace": self.namespace},
            ) from e
        logger.info(f"{__name__}:clear - Cleared namespace '{self.namespace}'")

"""Vector database adapters."""

from finchat.boundary.vdb.pinecone_store import PineconeVectorStore
from finchat.boundary.vdb.vector_schemas import VectorRecord

__all__ = ["PineconeVectorStore", "VectorRecord"]

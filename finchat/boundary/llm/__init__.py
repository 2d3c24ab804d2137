"""OpenAI collaborators: embeddings and chat completions."""

from finchat.boundary.llm.embedder import OpenAIEmbedder
from finchat.boundary.llm.post_processor import FragmentPostProcessor

__all__ = ["FragmentPostProcessor", "OpenAIEmbedder"]

"""
Chat service for finance Q&A over freshly scraped pages.

Orchestrates the full retrieval flow for one question: user check, page
scraping, chunking, embedding, index upsert, similarity search, optional
LLM filtering and answer synthesis, and chat log persistence.
Every step runs in order; nothing is cached between requests.

Dependencies: finchat.core.chunker, finchat.boundary.*
System role: Retrieval orchestration layer
"""

import logging

from finchat.boundary.chat_log import ChatLog
from finchat.boundary.identity import UserStore
from finchat.boundary.llm import FragmentPostProcessor, OpenAIEmbedder
from finchat.boundary.vdb import PineconeVectorStore, VectorRecord
from finchat.boundary.vdb.vector_schemas import chunk_vector_id
from finchat.boundary.web import PageScraper
from finchat.core.chunker import chunk_text
from finchat.core.exceptions import LLMError, UnknownUserError
from finchat.models.chat import ChatLogEntry, ChatOutcome

logger = logging.getLogger(__name__)

NO_INFORMATION_ANSWER = (
    "I could not find relevant financial information to answer your question."
)
FALLBACK_HEADER = "Based on the available financial information:"


def build_fallback_answer(
    fragments: list[str],
    max_fragments: int = 3,
    max_chars: int = 200,
) -> str:
    """
    Templated answer quoting the first fragments, used when the LLM is unavailable.

    Args:
        fragments: Fragment texts in rank order
        max_fragments: How many fragments to quote
        max_chars: Truncation length per fragment

    Returns:
        str: Deterministic answer text
    """
    if not fragments:
        return NO_INFORMATION_ANSWER

    lines = [FALLBACK_HEADER, ""]
    for position, fragment in enumerate(fragments[:max_fragments], start=1):
        text = fragment.strip()
        if len(text) > max_chars:
            text = text[:max_chars].rstrip() + "..."
        lines.append(f"{position}. {text}")
    return "\n".join(lines)


class ChatService:
    """
    Retrieval orchestrator.

    Failures while scraping, embedding or talking to the vector store
    propagate; LLM failures fall back to unfiltered fragments and a
    templated answer.
    """

    def __init__(
        self,
        user_store: UserStore,
        chat_log: ChatLog,
        scraper: PageScraper,
        embedder: OpenAIEmbedder,
        vector_store: PineconeVectorStore,
        post_processor: FragmentPostProcessor | None = None,
        source_urls: list[str] | None = None,
        chunk_size: int = 1024,
        top_k: int = 5,
        clear_before_upsert: bool = False,
        fallback_fragments: int = 3,
        fallback_fragment_chars: int = 200,
    ) -> None:
        """
        Initialize chat service.

        Args:
            user_store: Identity store for the user check
            chat_log: Store for answered questions
            scraper: Source page fetcher
            embedder: Embedding client
            vector_store: Vector index client
            post_processor: LLM filter/synthesizer, None to skip the LLM stage
            source_urls: Pages scraped on every request, in order
            chunk_size: Characters per chunk
            top_k: Fragments requested from similarity search
            clear_before_upsert: Empty the index namespace before upserting
            fallback_fragments: Fragments quoted by the templated answer
            fallback_fragment_chars: Truncation length for quoted fragments
        """
        self.user_store = user_store
        self.chat_log = chat_log
        self.scraper = scraper
        self.embedder = embedder
        self.vector_store = vector_store
        self.post_processor = post_processor
        self.source_urls = list(source_urls or [])
        self.chunk_size = chunk_size
        self.top_k = top_k
        self.clear_before_upsert = clear_before_upsert
        self.fallback_fragments = fallback_fragments
        self.fallback_fragment_chars = fallback_fragment_chars

    def can_access(self, username: str | None) -> list[ChatLogEntry]:
        """
        Confirm the user exists and return their chat log.

        Raises:
            UnknownUserError: If the user is not registered
        """
        self._require_user(username)
        return self.chat_log.for_user(username)

    async def answer(self, username: str | None, question: str) -> ChatOutcome:
        """
        Answer a question from freshly scraped source pages.

        Flow:
        1. Validate the user exists (no external calls otherwise)
        2. Scrape every source page, joined with newlines
        3. Chunk the text
        4. Embed the chunks
        5. Upsert chunk vectors keyed chunk-<i>
        6. Embed the question
        7. Similarity search for top_k fragments
        8. Optionally filter fragments with the LLM
        9. Synthesize an answer, or build the templated fallback
        10. Record the exchange and return

        Args:
            username: User asking
            question: Free-text question

        Returns:
            ChatOutcome: Answer, sources and fragment counts

        Raises:
            UnknownUserError: If the user is not registered
            DependencyError: If scraping, embedding or the vector store fails
        """
        self._require_user(username)
        logger.info(f"{__name__}:answer - START username={username}")

        corpus = await self._scrape_sources()
        chunks = chunk_text(corpus, self.chunk_size)
        logger.info(f"{__name__}:answer - Scraped {len(corpus)} characters into {len(chunks)} chunks")

        embeddings = await self.embedder.embed_chunks(chunks)

        if self.clear_before_upsert:
            await self.vector_store.clear()
        await self.vector_store.upsert([
            VectorRecord(id=chunk_vector_id(position), values=embedding, metadata={"text": chunk})
            for position, (chunk, embedding) in enumerate(zip(chunks, embeddings))
        ])

        question_embedding = await self.embedder.embed_query(question)
        results = await self.vector_store.query(question_embedding, self.top_k)
        fragments = [result.text for result in results]
        logger.info(f"{__name__}:answer - Search returned {len(fragments)} fragments")

        sources = await self._filter_fragments(fragments, question)
        answer, ai_processed = await self._compose_answer(question, sources)

        self.chat_log.append(ChatLogEntry(username=username, question=question, answer=answer))

        return ChatOutcome(
            chat=answer,
            sources=sources,
            original_chunks=len(fragments),
            validated_chunks=len(sources),
            ai_processed=ai_processed,
        )

    def _require_user(self, username: str | None) -> None:
        if self.user_store.find_by_username(username) is None:
            raise UnknownUserError(username)

    async def _scrape_sources(self) -> str:
        parts = []
        for url in self.source_urls:
            text = await self.scraper.fetch_text(url)
            parts.append(text + "\n")
        return "".join(parts)

    async def _filter_fragments(self, fragments: list[str], question: str) -> list[str]:
        if self.post_processor is None:
            return fragments
        try:
            return await self.post_processor.filter_relevant(fragments, question)
        except LLMError as e:
            logger.warning(f"{__name__}:_filter_fragments - Falling back to unfiltered fragments: {e}")
            return fragments

    async def _compose_answer(self, question: str, fragments: list[str]) -> tuple[str, bool]:
        if self.post_processor is not None:
            try:
                return await self.post_processor.synthesize(question, fragments), True
            except LLMError as e:
                logger.warning(f"{__name__}:_compose_answer - Falling back to templated answer: {e}")

        fallback = build_fallback_answer(
            fragments,
            max_fragments=self.fallback_fragments,
            max_chars=self.fallback_fragment_chars,
        )
        return fallback, False

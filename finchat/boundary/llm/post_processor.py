"""
LLM fragment post-processor.

Filters retrieved fragments for relevance and synthesizes a grounded
answer with an OpenAI chat model. Failures surface as LLMError; the chat
service decides the fallback.

Dependencies: langchain_openai, langchain_core, finchat.core.exceptions
System role: Optional LLM stage of the retrieval pipeline
"""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_openai import ChatOpenAI

from finchat.boundary.llm.prompts import ANSWER_PROMPT, FILTER_PROMPT, IRRELEVANT_MARKER
from finchat.core.exceptions import LLMError

logger = logging.getLogger(__name__)


class FragmentPostProcessor:
    """Relevance filter and answer writer backed by a chat model."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = "gpt-3.5-turbo",
        min_fragment_chars: int = 50,
        filter_temperature: float = 0.3,
        filter_max_tokens: int = 300,
        answer_temperature: float = 0.7,
        answer_max_tokens: int = 500,
        filter_model: BaseChatModel | None = None,
        answer_model: BaseChatModel | None = None,
    ) -> None:
        """
        Configure both chat models; they are created on first use.

        Args:
            api_key: OpenAI API key (falls back to OPENAI_API_KEY)
            model: Chat model ID
            min_fragment_chars: Filtered fragments this short or shorter are dropped
            filter_temperature: Sampling temperature for filtering
            filter_max_tokens: Completion limit per filtered fragment
            answer_temperature: Sampling temperature for synthesis
            answer_max_tokens: Completion limit for the answer
            filter_model: Pre-built filter model (tests)
            answer_model: Pre-built answer model (tests)
        """
        self._min_fragment_chars = min_fragment_chars
        self._api_key = api_key or None
        self._model = model
        self._filter_settings = (filter_temperature, filter_max_tokens)
        self._answer_settings = (answer_temperature, answer_max_tokens)
        self._filter_model = filter_model
        self._answer_model = answer_model
        self._filter_chain = None
        self._answer_chain = None

    def _chat_model(self, temperature: float, max_tokens: int) -> BaseChatModel:
        return ChatOpenAI(
            model=self._model,
            temperature=temperature,
            max_tokens=max_tokens,
            api_key=self._api_key,
        )

    def _get_filter_chain(self):
        # Lazy: construction errors surface as LLMError
        if self._filter_chain is None:
            model = self._filter_model
            if model is None:
                model = self._chat_model(*self._filter_settings)
            self._filter_chain = FILTER_PROMPT | model | StrOutputParser()
        return self._filter_chain

    def _get_answer_chain(self):
        if self._answer_chain is None:
            model = self._answer_model
            if model is None:
                model = self._chat_model(*self._answer_settings)
            self._answer_chain = ANSWER_PROMPT | model | StrOutputParser()
        return self._answer_chain

    async def filter_relevant(self, fragments: list[str], topic: str) -> list[str]:
        """
        Rewrite each fragment and keep the ones judged relevant.

        Args:
            fragments: Fragment texts in rank order
            topic: What the fragments should be relevant to (the question)

        Returns:
            list[str]: Rewritten relevant fragments, rank order preserved

        Raises:
            LLMError: When any completion fails
        """
        kept = []
        for fragment in fragments:
            try:
                result = await self._get_filter_chain().ainvoke({
                    "topic": topic,
                    "fragment": fragment,
                    "marker": IRRELEVANT_MARKER,
                })
            except Exception as e:
                raise LLMError(
                    message="Failed to filter fragments",
                    operation="filter_relevant",
                    details={"error": str(e), "fragment_count": len(fragments)},
                ) from e

            result = result.strip()
            if result != IRRELEVANT_MARKER and len(result) > self._min_fragment_chars:
                kept.append(result)

        logger.info(f"{__name__}:filter_relevant - Kept {len(kept)}/{len(fragments)} fragments")
        return kept

    async def synthesize(self, question: str, fragments: list[str]) -> str:
        """
        Write an answer grounded in the fragments.

        Raises:
            LLMError: When the completion fails or comes back empty
        """
        try:
            answer = await self._get_answer_chain().ainvoke({
                "context": "\n\n".join(fragments),
                "question": question,
            })
        except Exception as e:
            raise LLMError(
                message="Failed to generate answer",
                operation="synthesize",
                details={"error": str(e)},
            ) from e

        answer = answer.strip()
        if not answer:
            raise LLMError(message="Model returned an empty answer", operation="synthesize")
        return answer

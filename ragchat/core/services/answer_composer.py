"""Answer composition: prompt construction, generation and fallbacks.

The composer couples retrieval output to the LLM provider. It picks one of
two prompt shapes depending on whether any context qualified, and it never
lets a provider failure escape: every failure path ends in a ``Degraded`` or
``Unavailable`` outcome (blocking) or a single fallback chunk (streaming).

Fallback ladder, checked in order:

1. provider not configured
2. no generation-capable model discovered
3. model initialization failed
4. the generation call failed
"""

import logging
from collections.abc import AsyncIterator
from dataclasses import dataclass

from ..domain import (
    AnswerMode,
    ContextSummary,
    Degraded,
    FallbackReason,
    GenerationOutcome,
    Ok,
    SearchResult,
    Unavailable,
)
from ..domain.generation import DEGRADED_PREFIXES
from ..domain.utils import excerpt, normalize_text
from ..ports.llm_port import GenerativeModelPort, LLMPort
from .prompts import (
    AUGMENTED_CLOSING,
    CONTEXT_HEADER,
    CONVERSATIONAL_SYSTEM_PROMPT,
    NEWS_SYSTEM_PROMPT,
    QUESTION_TEMPLATE,
    SOURCE_BLOCK_TEMPLATE,
)

logger = logging.getLogger(__name__)


@dataclass
class ComposedPrompt:
    """A fully built prompt and the mode it was built for."""

    system: str
    body: str
    mode: AnswerMode

    @property
    def text(self) -> str:
        """The single prompt string sent to the model."""
        return f"{self.system}\n\n{self.body}"


def build_context_block(context: list[SearchResult]) -> str:
    """Render context hits as ``[Source i]: <source>`` blocks separated by blank lines."""
    return "\n\n".join(
        SOURCE_BLOCK_TEMPLATE.format(
            index=i,
            source=normalize_text(hit.document.source) or "Unknown",
            content=normalize_text(hit.document.content),
        )
        for i, hit in enumerate(context, start=1)
    )


def format_context(hits: list[SearchResult]) -> list[ContextSummary]:
    """Summarize hits for clients, best score first.

    ``index`` is the 1-based position in ``hits`` at call time; the returned
    list is then re-sorted by score, so index and rank differ when ``hits``
    was not already score-ordered.
    """
    summaries = [
        ContextSummary(
            index=i,
            source=hit.document.source or "Unknown",
            summary=hit.document.content or "",
            score=hit.score or 0.0,
        )
        for i, hit in enumerate(hits, start=1)
    ]
    return sorted(summaries, key=lambda item: item.score, reverse=True)


class AnswerComposer:
    """Builds prompts and turns LLM calls into tagged outcomes."""

    def __init__(self, llm: LLMPort) -> None:
        """Initialize the composer.

        Args:
            llm: Generation provider.
        """
        self.llm = llm

    def build_prompt(self, query: str, context: list[SearchResult]) -> ComposedPrompt:
        """Build the augmented or conversational prompt for ``query``.

        Args:
            query: The user's question.
            context: Qualifying hits; empty selects conversational mode.

        Returns:
            ComposedPrompt with system instruction and body.
        """
        question = QUESTION_TEMPLATE.format(question=normalize_text(query))

        if context:
            body = (
                f"{CONTEXT_HEADER}\n{build_context_block(context)}\n\n"
                f"{question}\n\n{AUGMENTED_CLOSING}"
            )
            return ComposedPrompt(NEWS_SYSTEM_PROMPT, body, AnswerMode.AUGMENTED)

        return ComposedPrompt(CONVERSATIONAL_SYSTEM_PROMPT, question, AnswerMode.CONVERSATIONAL)

    def fallback(
        self, reason: FallbackReason, context: list[SearchResult]
    ) -> Degraded | Unavailable:
        """Fallback outcome for ``reason``, surfacing the top hit when there is one."""
        if not context:
            return Unavailable(reason)

        top = context[0].document
        text = (
            f"{DEGRADED_PREFIXES[reason]}: {top.source or 'Unknown'}. "
            f"Here's a short excerpt: {excerpt(top.content)}"
        )
        return Degraded(text, reason)

    async def _select_model(self) -> tuple[GenerativeModelPort | None, FallbackReason | None]:
        """Walk the first three rungs of the fallback ladder."""
        if not self.llm.configured:
            logger.warning("LLM not configured, using fallback response")
            return None, FallbackReason.NOT_CONFIGURED

        available = await self.llm.list_generation_models()
        if not available:
            logger.error("No models available for generateContent with this API key")
            return None, FallbackReason.NO_COMPATIBLE_MODEL

        name = self.llm.choose_model(available)
        try:
            model = self.llm.get_model(name)
        except Exception as e:
            logger.error("Failed to initialize model %s: %s", name, e)
            return None, FallbackReason.MODEL_INIT_FAILED

        logger.debug("Using model: %s", name)
        return model, None

    async def generate(self, query: str, context: list[SearchResult]) -> GenerationOutcome:
        """Generate a blocking answer.

        Args:
            query: The user's question.
            context: Qualifying hits (may be empty).

        Returns:
            Ok with the model's text, or a Degraded/Unavailable fallback.
        """
        model, reason = await self._select_model()
        if model is None:
            return self.fallback(reason, context)

        prompt = self.build_prompt(query, context)
        try:
            text = await model.generate(prompt.text)
        except Exception as e:
            logger.error("Error generating answer: %s", e)
            return self.fallback(FallbackReason.GENERATION_FAILED, context)

        return Ok(normalize_text(text))

    async def answer(self, query: str, context: list[SearchResult]) -> str:
        """Blocking answer flattened to a string."""
        outcome = await self.generate(query, context)
        return outcome.text

    async def stream(self, query: str, context: list[SearchResult]) -> AsyncIterator[str]:
        """Stream an answer as text increments.

        Uses the same prompt construction as ``generate``. Any failure,
        including one after some increments were delivered, produces exactly
        one fallback chunk and ends the stream.

        Yields:
            Non-empty text increments.
        """
        model, reason = await self._select_model()
        if model is None:
            yield self.fallback(reason, context).text
            return

        prompt = self.build_prompt(query, context)
        try:
            async for chunk in model.stream(prompt.text):
                if chunk:
                    yield chunk
        except Exception as e:
            logger.error("Error streaming answer: %s", e)
            yield self.fallback(FallbackReason.GENERATION_FAILED, context).text

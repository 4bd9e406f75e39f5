"""Unit tests for prompt construction, context formatting and the fallback ladder."""

import pytest

from ragchat.core.domain import AnswerMode, Degraded, FallbackReason, Ok, Unavailable
from ragchat.core.domain.exceptions import LLMGenerationError
from ragchat.core.domain.generation import UNAVAILABLE_MESSAGES
from ragchat.core.services.answer_composer import AnswerComposer, format_context
from ragchat.core.services.prompts import (
    CONVERSATIONAL_SYSTEM_PROMPT,
    NEWS_SYSTEM_PROMPT,
)

pytestmark = pytest.mark.unit


async def collect(stream):
    return [chunk async for chunk in stream]


class TestBuildPrompt:
    """Tests for augmented vs conversational prompt construction."""

    def test_empty_context_builds_conversational_prompt(self, fake_llm):
        prompt = AnswerComposer(fake_llm).build_prompt("hi there", [])

        assert prompt.mode == AnswerMode.CONVERSATIONAL
        assert prompt.system == CONVERSATIONAL_SYSTEM_PROMPT
        assert prompt.body == "User Question: hi there"
        assert "[Source" not in prompt.text

    def test_context_builds_augmented_prompt(self, fake_llm, make_hit):
        context = [
            make_hit(0.9, source="Reuters", content="Rates held."),
            make_hit(0.7, source="BBC", content="Markets rallied."),
        ]

        prompt = AnswerComposer(fake_llm).build_prompt("What happened?", context)

        assert prompt.mode == AnswerMode.AUGMENTED
        assert prompt.system == NEWS_SYSTEM_PROMPT
        assert prompt.body.startswith("Context from news articles:\n")
        assert "[Source 1]: Reuters\nRates held." in prompt.body
        assert "[Source 2]: BBC\nMarkets rallied." in prompt.body
        assert "Rates held.\n\n[Source 2]" in prompt.body
        assert "User Question: What happened?" in prompt.body

    def test_every_context_item_is_labelled_with_its_source(self, fake_llm, make_hit):
        context = [make_hit(0.8, source=f"Outlet {i}", content=f"Body {i}") for i in range(4)]

        prompt = AnswerComposer(fake_llm).build_prompt("q", context)

        for i in range(4):
            assert f"[Source {i + 1}]: Outlet {i}\nBody {i}" in prompt.text

    def test_prompt_text_joins_system_and_body(self, fake_llm):
        prompt = AnswerComposer(fake_llm).build_prompt("hello", [])

        assert prompt.text == f"{CONVERSATIONAL_SYSTEM_PROMPT}\n\nUser Question: hello"


class TestFormatContext:
    """Tests for client-facing context summaries."""

    def test_sorted_descending_by_score(self, make_hit):
        formatted = format_context([make_hit(0.3), make_hit(0.9), make_hit(0.6)])

        assert [item.score for item in formatted] == [0.9, 0.6, 0.3]

    def test_index_reflects_input_position(self, make_hit):
        formatted = format_context([make_hit(0.3), make_hit(0.9), make_hit(0.6)])

        assert [item.index for item in formatted] == [2, 3, 1]

    def test_summary_fields(self, make_hit):
        [item] = format_context([make_hit(0.75, source="AP", content="Full body")])

        assert item.to_dict() == {"index": 1, "source": "AP", "summary": "Full body", "score": 0.75}

    def test_equal_scores_keep_input_order(self, make_hit):
        formatted = format_context([make_hit(0.5, source="first"), make_hit(0.5, source="second")])

        assert [item.source for item in formatted] == ["first", "second"]

    def test_empty(self):
        assert format_context([]) == []


class TestGenerate:
    """Tests for blocking generation and each rung of the fallback ladder."""

    async def test_success_returns_ok(self, fake_llm, fake_model, make_hit):
        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9)])

        assert outcome == Ok("Generated answer")
        assert not outcome.is_fallback
        assert "[Source 1]: Example Source" in fake_model.prompts[0]

    async def test_not_configured(self, fake_llm, make_hit):
        fake_llm._configured = False

        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9)])

        assert isinstance(outcome, Degraded)
        assert outcome.reason == FallbackReason.NOT_CONFIGURED
        assert outcome.text.startswith("(LLM not configured)")

    async def test_no_compatible_model(self, fake_llm, make_hit):
        fake_llm.models = []

        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9)])

        assert outcome.reason == FallbackReason.NO_COMPATIBLE_MODEL

    async def test_model_init_failed(self, fake_llm, make_hit):
        fake_llm.init_error = RuntimeError("bad model")

        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9)])

        assert outcome.reason == FallbackReason.MODEL_INIT_FAILED

    async def test_generation_failed(self, fake_llm, fake_model, make_hit):
        fake_model.generate_error = LLMGenerationError("quota exceeded")

        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9)])

        assert outcome.reason == FallbackReason.GENERATION_FAILED

    async def test_ladder_checks_configuration_first(self, fake_llm, make_hit):
        fake_llm._configured = False
        fake_llm.models = []
        fake_llm.init_error = RuntimeError("bad model")

        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9)])

        assert outcome.reason == FallbackReason.NOT_CONFIGURED

    async def test_fallback_surfaces_source_and_excerpt(self, fake_llm, fake_model, make_hit):
        fake_model.generate_error = LLMGenerationError("upstream down")

        text = await AnswerComposer(fake_llm).answer(
            "q", [make_hit(0.9, source="Example Source", content="Example text")]
        )

        assert "Example Source" in text
        assert "Example text" in text
        assert not text.endswith("...")

    async def test_fallback_excerpt_is_bounded(self, fake_llm, make_hit):
        fake_llm._configured = False
        long_content = "x" * 500

        outcome = await AnswerComposer(fake_llm).generate("q", [make_hit(0.9, content=long_content)])

        assert ("x" * 300 + "...") in outcome.text
        assert ("x" * 301) not in outcome.text

    async def test_fallback_uses_top_hit(self, fake_llm, make_hit):
        fake_llm._configured = False

        outcome = await AnswerComposer(fake_llm).generate(
            "q", [make_hit(0.9, source="Top"), make_hit(0.8, source="Second")]
        )

        assert "Top" in outcome.text
        assert "Second" not in outcome.text

    @pytest.mark.parametrize("reason", list(FallbackReason))
    def test_unavailable_without_context(self, fake_llm, reason):
        outcome = AnswerComposer(fake_llm).fallback(reason, [])

        assert outcome == Unavailable(reason)
        assert outcome.text == UNAVAILABLE_MESSAGES[reason]

    async def test_not_configured_message_hints_at_api_key(self, fake_llm):
        fake_llm._configured = False

        text = await AnswerComposer(fake_llm).answer("hello", [])

        assert "GEMINI_API_KEY" in text


class TestStream:
    """Tests for incremental delivery."""

    async def test_yields_model_chunks(self, fake_llm):
        chunks = await collect(AnswerComposer(fake_llm).stream("q", []))

        assert chunks == ["Hello", ", ", "world"]

    async def test_skips_empty_chunks(self, fake_llm, fake_model):
        fake_model.chunks = ["a", "", "b"]

        chunks = await collect(AnswerComposer(fake_llm).stream("q", []))

        assert chunks == ["a", "b"]

    async def test_uses_same_prompt_as_blocking(self, fake_llm, fake_model, make_hit):
        composer = AnswerComposer(fake_llm)
        context = [make_hit(0.9)]

        await composer.generate("q", context)
        await collect(composer.stream("q", context))

        assert fake_model.prompts[0] == fake_model.prompts[1]

    async def test_mid_stream_failure_ends_with_one_fallback_chunk(self, fake_llm, fake_model, make_hit):
        fake_model.fail_after = 1

        chunks = await collect(AnswerComposer(fake_llm).stream("q", [make_hit(0.9)]))

        assert chunks[0] == "Hello"
        assert len(chunks) == 2
        assert "Example Source" in chunks[1]
        assert chunks[1].startswith("(LLM error)")

    async def test_unconfigured_stream_emits_single_fallback(self, fake_llm):
        fake_llm._configured = False

        chunks = await collect(AnswerComposer(fake_llm).stream("q", []))

        assert chunks == [UNAVAILABLE_MESSAGES[FallbackReason.NOT_CONFIGURED]]

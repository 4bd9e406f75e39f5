"""
Pytest configuration and shared fixtures.
"""

from collections.abc import AsyncIterator

import pytest

from ragchat.adapters.outbound.session import InMemorySessionStore
from ragchat.adapters.outbound.vector_store import InMemoryBackend, JsonVectorStore
from ragchat.core.domain import Document, SearchResult
from ragchat.core.domain.exceptions import LLMGenerationError, ModelInitializationError
from ragchat.core.ports.llm_port import GenerativeModelPort, LLMPort


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (in-process API, no network)")


class FakeModel(GenerativeModelPort):
    """Scriptable generation model.

    ``fail_after`` makes ``stream`` raise once that many chunks were yielded.
    """

    def __init__(self, name="fake-model", text="Generated answer", chunks=None):
        self.name = name
        self.text = text
        self.chunks = chunks if chunks is not None else ["Hello", ", ", "world"]
        self.generate_error = None
        self.fail_after = None
        self.prompts = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.generate_error:
            raise self.generate_error
        return self.text

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        self.prompts.append(prompt)
        for i, chunk in enumerate(self.chunks):
            if self.fail_after is not None and i >= self.fail_after:
                raise LLMGenerationError("stream interrupted")
            yield chunk
        if self.fail_after is not None and self.fail_after >= len(self.chunks):
            raise LLMGenerationError("stream interrupted")


class FakeLLM(LLMPort):
    """Scriptable LLM provider walking every rung of the fallback ladder."""

    def __init__(self, configured=True, models=None, model=None):
        self._configured = configured
        self.models = models if models is not None else ["fake-model"]
        self.model = model or FakeModel()
        self.init_error = None

    @property
    def configured(self) -> bool:
        return self._configured

    async def list_generation_models(self) -> list[str]:
        return list(self.models)

    def get_model(self, name: str) -> GenerativeModelPort:
        if self.init_error:
            raise ModelInitializationError(f"Failed to initialize model {name}", cause=self.init_error)
        return self.model


@pytest.fixture
def make_hit():
    """Factory for SearchResults with a fixed score."""

    def _make(score, source="Example Source", content="Example text", doc_id=None):
        return SearchResult(
            document=Document(content=content, source=source, doc_id=doc_id), score=score
        )

    return _make


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def fake_llm(fake_model):
    return FakeLLM(model=fake_model)


@pytest.fixture
def memory_backend():
    return InMemoryBackend()


@pytest.fixture
def vector_store(memory_backend):
    """Initialized, empty store on an in-memory backend."""
    store = JsonVectorStore(memory_backend)
    store.initialize()
    return store


@pytest.fixture
def session_store():
    return InMemorySessionStore()


@pytest.fixture
def sample_documents():
    """Three documents with orthogonal-ish 3D embeddings."""
    return [
        Document(
            content="Parliament passed the climate bill.",
            source="Reuters",
            title="Climate bill",
            doc_id="a",
            embedding=[1.0, 0.0, 0.0],
        ),
        Document(
            content="The central bank held rates steady.",
            source="BBC",
            title="Rates",
            doc_id="b",
            embedding=[0.0, 1.0, 0.0],
        ),
        Document(
            content="A new chip beats benchmarks.",
            source="The Verge",
            title="Chips",
            doc_id="c",
            embedding=[0.7, 0.7, 0.0],
        ),
    ]

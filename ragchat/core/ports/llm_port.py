"""LLM Port Interface."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator


class GenerativeModelPort(ABC):
    """A selected, initialized generation model."""

    name: str

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Generate a full response."""
        ...

    @abstractmethod
    def stream(self, prompt: str) -> AsyncIterator[str]:
        """Yield response text increments as they arrive."""
        ...


class LLMPort(ABC):
    """Abstract interface for LLM providers."""

    @property
    @abstractmethod
    def configured(self) -> bool:
        """Whether credentials for the provider are present."""
        ...

    @abstractmethod
    async def list_generation_models(self) -> list[str]:
        """Names of models that support content generation."""
        ...

    @abstractmethod
    def get_model(self, name: str) -> GenerativeModelPort:
        """Initialize a model by name. Raises ModelInitializationError."""
        ...

    def choose_model(self, available: list[str]) -> str:
        """Pick the model to use from the discovered list."""
        return available[0]

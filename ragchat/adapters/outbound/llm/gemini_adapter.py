"""Google Gemini adapter for the LLM port using the google-genai SDK."""

import asyncio
import logging
import re
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING

from ....core.domain.exceptions import (
    LLMGenerationError,
    LLMNotConfiguredError,
    ModelInitializationError,
)
from ....core.domain.utils import normalize_text
from ....core.ports.llm_port import GenerativeModelPort, LLMPort

if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)

GENERATE_ACTION = "generateContent"

_RATE_LIMIT_PATTERN = re.compile(r"\b(quota|rate[ _-]?limit|resource_exhausted|429)\b")


def _is_rate_limit(error: Exception) -> bool:
    if getattr(error, "code", None) == 429:
        return True
    return _RATE_LIMIT_PATTERN.search(str(error).lower()) is not None


class GeminiModel(GenerativeModelPort):
    """One Gemini model bound to a client."""

    def __init__(
        self,
        client: "genai.Client",
        name: str,
        temperature: float = 0.7,
        max_tokens: int = 2048,
        max_retries: int = 3,
    ) -> None:
        self.client = client
        self.name = name
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.max_retries = max_retries

    async def generate(self, prompt: str) -> str:
        """Generate a response, retrying rate-limit errors with exponential backoff.

        Args:
            prompt: Full prompt text.

        Returns:
            Generated text.

        Raises:
            LLMGenerationError: If the call fails or retries are exhausted.
        """
        from google.genai.types import GenerateContentConfig

        config = GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_tokens,
        )

        for attempt in range(self.max_retries):
            try:
                response = await self.client.aio.models.generate_content(
                    model=self.name,
                    contents=normalize_text(prompt),
                    config=config,
                )
            except Exception as e:
                if _is_rate_limit(e) and attempt < self.max_retries - 1:
                    wait_time = 2**attempt
                    logger.warning("Rate limit hit, retrying in %ss...", wait_time)
                    await asyncio.sleep(wait_time)
                    continue
                raise LLMGenerationError(
                    f"Gemini generation failed for model {self.name}",
                    cause=e,
                    context={"model": self.name, "attempt": attempt + 1},
                ) from e

            # Safety filters return no candidates
            if not response.candidates:
                return "I apologize, but I cannot provide a response to that query."
            return normalize_text(response.text)

        raise LLMGenerationError(
            "Failed to generate response after retries",
            context={"model": self.name, "retries": self.max_retries},
        )

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        """Stream response text.

        Errors propagate to the caller, which decides how to finish the stream.

        Yields:
            Non-empty text chunks.
        """
        from google.genai.types import GenerateContentConfig

        stream = await self.client.aio.models.generate_content_stream(
            model=self.name,
            contents=normalize_text(prompt),
            config=GenerateContentConfig(temperature=self.temperature),
        )
        async for chunk in stream:
            if chunk.text:
                yield normalize_text(chunk.text)


class GeminiLLMAdapter(LLMPort):
    """LLM provider backed by the Gemini API.

    Model discovery lists the models visible to the API key and keeps those
    that support ``generateContent``. The preferred model is used when it is
    among them; otherwise the first discovered one.
    """

    def __init__(self, api_key: str, preferred_model: str = "gemini-2.0-flash") -> None:
        """Initialize the adapter.

        Args:
            api_key: Google Gemini API key; empty disables generation.
            preferred_model: Model used when discovery finds it.
        """
        self.api_key = api_key
        self.preferred_model = preferred_model
        self._client: "genai.Client | None" = None
        self._models: list[str] = []

    @property
    def configured(self) -> bool:
        return bool(self.api_key)

    def _get_client(self) -> "genai.Client":
        """Lazy load the Gemini client."""
        if self._client is None:
            if not self.api_key:
                raise LLMNotConfiguredError(
                    "Gemini API key not set. Set GEMINI_API_KEY in your .env file."
                )

            from google import genai

            self._client = genai.Client(api_key=self.api_key)
            logger.info("Gemini client initialized")

        return self._client

    async def list_generation_models(self) -> list[str]:
        """Discover generation-capable models, caching a non-empty result."""
        if self._models:
            return self._models
        if not self.configured:
            return []

        try:
            client = self._get_client()
            names = []
            async for model in await client.aio.models.list():
                actions = model.supported_actions or []
                if GENERATE_ACTION in actions and model.name:
                    names.append(model.name.split("/")[-1])
        except Exception as e:
            logger.warning("Could not list Gemini models: %s", e)
            return []

        logger.info("Models supporting %s: %s", GENERATE_ACTION, ", ".join(names) or "<none>")
        self._models = names
        return names

    def choose_model(self, available: list[str]) -> str:
        if self.preferred_model in available:
            return self.preferred_model
        return available[0]

    def get_model(self, name: str) -> GeminiModel:
        try:
            client = self._get_client()
        except Exception as e:
            raise ModelInitializationError(
                f"Could not initialize model {name}",
                cause=e,
                context={"model": name},
            ) from e
        return GeminiModel(client, name)

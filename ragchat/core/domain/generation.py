"""Tagged generation outcomes.

The answer composer never raises on provider failure. It returns one of
``Ok``, ``Degraded`` or ``Unavailable`` so callers can tell why a fallback
happened, and only transport layers flatten the outcome to a string via
``outcome.text``.
"""

from dataclasses import dataclass
from enum import Enum


class FallbackReason(str, Enum):
    """Why generation did not produce a model answer, in ladder order."""

    NOT_CONFIGURED = "not_configured"
    NO_COMPATIBLE_MODEL = "no_compatible_model"
    MODEL_INIT_FAILED = "model_init_failed"
    GENERATION_FAILED = "generation_failed"


# Messages used when there is no retrieved context to surface.
UNAVAILABLE_MESSAGES: dict[FallbackReason, str] = {
    FallbackReason.NOT_CONFIGURED: (
        "I don't have the language model configured to generate a full answer. "
        "To enable full responses, set the environment variable GEMINI_API_KEY "
        "with your Google Gemini API key."
    ),
    FallbackReason.NO_COMPATIBLE_MODEL: (
        "Language model unavailable. No compatible Gemini model found for your API key. "
        "Please check your GEMINI_API_KEY."
    ),
    FallbackReason.MODEL_INIT_FAILED: (
        "Failed to initialize language model. Please try again later."
    ),
    FallbackReason.GENERATION_FAILED: (
        "I couldn't generate a full answer due to an upstream language model error. "
        "Please try again later or configure a valid GEMINI_API_KEY."
    ),
}

# Prefixes used when a retrieved excerpt accompanies the fallback.
DEGRADED_PREFIXES: dict[FallbackReason, str] = {
    FallbackReason.NOT_CONFIGURED: "(LLM not configured) I found a relevant source",
    FallbackReason.NO_COMPATIBLE_MODEL: (
        "(LLM unavailable) No compatible model found for your API key. Found source"
    ),
    FallbackReason.MODEL_INIT_FAILED: "(LLM error) Could not initialize model. Found source",
    FallbackReason.GENERATION_FAILED: (
        "(LLM error) I couldn't generate a full answer due to an upstream API issue. "
        "I did find a relevant source"
    ),
}


@dataclass(frozen=True)
class Ok:
    """The model produced an answer."""

    text: str

    @property
    def is_fallback(self) -> bool:
        return False


@dataclass(frozen=True)
class Degraded:
    """Generation failed but a retrieved excerpt was surfaced instead."""

    text: str
    reason: FallbackReason

    @property
    def is_fallback(self) -> bool:
        return True


@dataclass(frozen=True)
class Unavailable:
    """Generation failed and there was no context to fall back on."""

    reason: FallbackReason

    @property
    def text(self) -> str:
        return UNAVAILABLE_MESSAGES[self.reason]

    @property
    def is_fallback(self) -> bool:
        return True


GenerationOutcome = Ok | Degraded | Unavailable

"""LLM provider adapters."""

from .gemini_adapter import GeminiLLMAdapter, GeminiModel

__all__ = ["GeminiLLMAdapter", "GeminiModel"]

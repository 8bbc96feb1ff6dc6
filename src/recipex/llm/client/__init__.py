"""LLM client implementations."""

from recipex.llm.client.groq import GroqClient
from recipex.llm.client.protocol import LLMClientProtocol


__all__ = [
    "GroqClient",
    "LLMClientProtocol",
]

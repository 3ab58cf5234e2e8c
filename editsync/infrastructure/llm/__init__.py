"""LLM infrastructure.

Provides the OpenAI-based completion client.
"""

from editsync.infrastructure.llm.openai_client import OpenAICompletionClient

__all__ = [
    "OpenAICompletionClient",
]

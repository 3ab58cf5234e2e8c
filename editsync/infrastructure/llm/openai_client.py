"""OpenAI completion client.

Sends a composed editing prompt to the chat completions API and returns the
first message as-is.
"""

from openai import AsyncOpenAI

from editsync.core.config.settings import settings


class OpenAICompletionClient:
    """OpenAI chat completion client for editing operations."""

    def __init__(self, client: AsyncOpenAI | None = None) -> None:
        """Initialize the OpenAI client.

        Args:
            client: Preconfigured AsyncOpenAI client. Built from settings if None.
        """
        self.client = client or AsyncOpenAI(api_key=settings.openai_api_key)
        self.model = settings.openai_model
        self.temperature = settings.openai_temperature
        self.max_tokens = settings.openai_max_tokens

    async def complete(self, prompt: str) -> str | None:
        """Send a single user prompt and return the first message content.

        Args:
            prompt: Fully composed prompt

        Returns:
            Content of the first choice, or None when the service returned nothing
        """
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        if not response.choices:
            return None
        return response.choices[0].message.content

"""OpenAI completion client tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from editsync.infrastructure.llm.openai_client import OpenAICompletionClient


def _make_response(*contents: str | None) -> SimpleNamespace:
    """Build a chat completion response with one choice per content."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=c)) for c in contents]
    )


def _make_client(response: SimpleNamespace) -> MagicMock:
    """Build an AsyncOpenAI stand-in returning the response."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=response)
    return client


class TestOpenAICompletionClient:
    """OpenAICompletionClient tests."""

    async def test_sends_single_user_message(self) -> None:
        """The prompt is sent as one user message with the configured model."""
        # Given
        openai = _make_client(_make_response("fixed text"))
        client = OpenAICompletionClient(client=openai)

        # When
        await client.complete("Correct grammar, spelling, and clarity. Text: hi")

        # Then
        kwargs = openai.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == [
            {
                "role": "user",
                "content": "Correct grammar, spelling, and clarity. Text: hi",
            }
        ]
        assert kwargs["model"] == client.model

    async def test_returns_first_choice_content(self) -> None:
        """Only the first choice is used."""
        client = OpenAICompletionClient(client=_make_client(_make_response("first", "second")))

        assert await client.complete("prompt") == "first"

    async def test_returns_none_without_choices(self) -> None:
        """An empty choice list yields None."""
        client = OpenAICompletionClient(client=_make_client(_make_response()))

        assert await client.complete("prompt") is None

    async def test_returns_none_content_as_is(self) -> None:
        """A null message content is passed through."""
        client = OpenAICompletionClient(client=_make_client(_make_response(None)))

        assert await client.complete("prompt") is None

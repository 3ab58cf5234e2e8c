"""Editing operation service.

Validates an editing request, picks the prompt template for its operation and
forwards the composed prompt to the completion service.
"""

import logging
from collections.abc import Mapping
from typing import Protocol

from editsync.domain.editing.models import (
    DEFAULT_PROMPT_TEMPLATES,
    INVALID_OPERATION_MESSAGE,
    MISSING_DATA_MESSAGE,
    NO_RESULT_MESSAGE,
    UPSTREAM_FAILURE_MESSAGE,
    OperationRequest,
    OperationResult,
)

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Missing field or operation outside the allow-list."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CompletionClient(Protocol):
    """Text-generation backend used by the editing service."""

    async def complete(self, prompt: str) -> str | None: ...


class EditingService:
    """Editing operation dispatcher.

    Holds no state between calls. The operation allow-list is the key set of
    the injected template table.
    """

    def __init__(
        self,
        completion_client: CompletionClient,
        prompt_templates: Mapping[str, str] = DEFAULT_PROMPT_TEMPLATES,
    ) -> None:
        """Initialize the service.

        Args:
            completion_client: Client that turns a prompt into text
            prompt_templates: Operation name to prompt template mapping
        """
        self.completion_client = completion_client
        self.prompt_templates = prompt_templates

    @property
    def operations(self) -> list[str]:
        """Allowed operation names, in table order."""
        return list(self.prompt_templates)

    def validate(
        self,
        operation: str | None,
        text: str | None,
        find_text: str | None = None,
        replace_text: str | None = None,
        entity_map: str | None = None,
    ) -> OperationRequest:
        """Build a request from raw form values.

        Raises:
            InvalidInputError: Field missing or operation not allowed
        """
        if not operation or not text:
            raise InvalidInputError(MISSING_DATA_MESSAGE)
        if operation not in self.prompt_templates:
            raise InvalidInputError(INVALID_OPERATION_MESSAGE)

        return OperationRequest(
            operation=operation,
            text=text,
            find_text=find_text,
            replace_text=replace_text,
            entity_map=entity_map,
        )

    def build_prompt(self, operation: str, text: str) -> str:
        """Interpolate the user text into the operation's template.

        Raises:
            InvalidInputError: Operation not allowed
        """
        template = self.prompt_templates.get(operation)
        if template is None:
            raise InvalidInputError(INVALID_OPERATION_MESSAGE)
        # Only the {text} slot is substituted; other braces stay literal
        return template.replace("{text}", text)

    async def process(
        self,
        operation: str | None,
        text: str | None,
        find_text: str | None = None,
        replace_text: str | None = None,
        entity_map: str | None = None,
    ) -> OperationResult:
        """Run an editing operation.

        Args:
            operation: Operation name as sent by the editor
            text: User text
            find_text: Auxiliary find string (not used in the prompt)
            replace_text: Auxiliary replacement string (not used in the prompt)
            entity_map: Auxiliary entity map (not used in the prompt)

        Returns:
            The completion text, or a literal fallback message

        Raises:
            InvalidInputError: Field missing or operation not allowed
        """
        request = self.validate(operation, text, find_text, replace_text, entity_map)
        prompt = self.build_prompt(request.operation, request.text)

        logger.info(
            "Editing operation requested",
            extra={"operation": request.operation, "text_length": len(request.text)},
        )

        try:
            content = await self.completion_client.complete(prompt)
        except Exception:
            # Every upstream failure is reported the same way
            logger.exception(
                "Completion request failed",
                extra={"operation": request.operation},
            )
            return OperationResult(result=UPSTREAM_FAILURE_MESSAGE)

        if not content:
            logger.warning(
                "Completion returned no content",
                extra={"operation": request.operation},
            )
            return OperationResult(result=NO_RESULT_MESSAGE)

        return OperationResult(result=content)

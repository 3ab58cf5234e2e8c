"""Editing domain models.

Defines the fixed set of editing operations and the prompt template used for
each of them.
"""

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel, Field

MISSING_DATA_MESSAGE = "Missing data"
INVALID_OPERATION_MESSAGE = "Invalid operation"
NO_RESULT_MESSAGE = "No result from AI."
UPSTREAM_FAILURE_MESSAGE = "Error processing request"


class Operation(str, Enum):
    """Editing operation offered in the editor."""

    GRAMMAR_CHECKER = "Grammar Checker"
    PLAGIARISM_CHECK = "Plagiarism Check"
    CONTEXTUAL_REPLACEMENT = "Contextual Replacement"
    SMART_LINK_UPDATES = "Smart Link Updates"
    NAMED_ENTITY_REPLACEMENT = "Named Entity Replacement"
    DEEP_CONTENT_MANAGEMENT = "Deep Content Management"
    AI_CHATBOT = "AI Chatbot"


# Each template has exactly one {text} slot
DEFAULT_PROMPT_TEMPLATES: Mapping[str, str] = {
    Operation.GRAMMAR_CHECKER.value: (
        "Correct grammar, spelling, and clarity. Text: {text}"
    ),
    Operation.PLAGIARISM_CHECK.value: (
        "Check if the following text appears plagiarized, and return a "
        "similarity estimate and suggestions. Text: {text}"
    ),
    Operation.CONTEXTUAL_REPLACEMENT.value: (
        "Perform contextual replacement only. Example: Replace “Gemini 2.5 Pro” "
        "with “Claude Sonnet”, not Claude 2.5 Pro. Text: {text}"
    ),
    Operation.SMART_LINK_UPDATES.value: (
        'Update links in text. Example: "Google" linking to https://google.com '
        '→ "Bing" linking to https://bing.com. Text: {text}'
    ),
    Operation.NAMED_ENTITY_REPLACEMENT.value: (
        "Replace company names, people, and emails with new provided ones. "
        "Text: {text}"
    ),
    Operation.DEEP_CONTENT_MANAGEMENT.value: (
        "Scan and edit Rich Text, tables, nested components, links, metadata, "
        "and custom fields. Text: {text}"
    ),
    Operation.AI_CHATBOT.value: (
        "Answer conversationally, but stay within writing/editing/content "
        "management context. Text: {text}"
    ),
}


class OperationRequest:
    """Editing request domain model.

    Carries the operation name, the user text and the auxiliary fields sent by
    the editor. The auxiliary fields are kept for the client's benefit only;
    no prompt consumes them.
    """

    def __init__(
        self,
        operation: str,
        text: str,
        find_text: str | None = None,
        replace_text: str | None = None,
        entity_map: str | None = None,
    ) -> None:
        self.operation = operation
        self.text = text
        self.find_text = find_text
        self.replace_text = replace_text
        self.entity_map = entity_map

    def __repr__(self) -> str:
        """Return a short representation."""
        preview = self.text[:50] + "..." if len(self.text) > 50 else self.text
        return f"<OperationRequest operation='{self.operation}' text='{preview}'>"


class OperationResult(BaseModel):
    """Result returned to the editor."""

    result: str = Field(description="Completion text or a literal status message")

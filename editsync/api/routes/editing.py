"""Editing operation API router.

The editor posts its form here; the text is run through the selected
operation and the completion text comes back unmodified.
"""

from collections.abc import Mapping
from typing import Annotated

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import JSONResponse

from editsync.core.models.api import OperationListResponse
from editsync.domain.editing.models import DEFAULT_PROMPT_TEMPLATES, OperationResult
from editsync.infrastructure.llm.openai_client import OpenAICompletionClient
from editsync.services.editing_service import EditingService, InvalidInputError

router = APIRouter(prefix="/ai", tags=["editing"])


# =============================================================================
# Dependencies
# =============================================================================


def get_prompt_templates() -> Mapping[str, str]:
    """Operation name to prompt template table."""
    return DEFAULT_PROMPT_TEMPLATES


def get_editing_service(
    prompt_templates: Annotated[Mapping[str, str], Depends(get_prompt_templates)],
) -> EditingService:
    """Create an EditingService backed by OpenAI."""
    return EditingService(
        completion_client=OpenAICompletionClient(),
        prompt_templates=prompt_templates,
    )


# =============================================================================
# Endpoints
# =============================================================================


@router.post(
    "",
    response_model=OperationResult,
    summary="Run editing operation",
    description="Applies one of the fixed editing operations to the submitted text",
    responses={
        status.HTTP_400_BAD_REQUEST: {
            "model": OperationResult,
            "description": "Missing data or invalid operation",
        }
    },
)
async def run_operation(
    service: Annotated[EditingService, Depends(get_editing_service)],
    operation: Annotated[str | None, Form(description="Operation name")] = None,
    text: Annotated[str | None, Form(description="Text to process")] = None,
    find: Annotated[str | None, Form(description="Text to find")] = None,
    replace: Annotated[str | None, Form(description="Replacement text")] = None,
    entities: Annotated[str | None, Form(description="Entity map")] = None,
) -> OperationResult | JSONResponse:
    """Run an editing operation.

    Upstream failures come back as a 200 with a generic message.
    """
    try:
        return await service.process(
            operation=operation,
            text=text,
            find_text=find,
            replace_text=replace,
            entity_map=entities,
        )
    except InvalidInputError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"result": e.message},
        )


@router.get(
    "/operations",
    response_model=OperationListResponse,
    summary="List editing operations",
)
async def list_operations(
    prompt_templates: Annotated[Mapping[str, str], Depends(get_prompt_templates)],
) -> OperationListResponse:
    """Return the operation names the editor may send."""
    return OperationListResponse(operations=list(prompt_templates))

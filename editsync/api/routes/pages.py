"""Page content API router."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from editsync.domain.content.models import Page
from editsync.infrastructure.external.contentstack_client import ContentstackClientError
from editsync.services.content_service import ContentService, PageNotFoundError

router = APIRouter(prefix="/pages", tags=["pages"])


def get_content_service() -> ContentService:
    """Create a ContentService."""
    return ContentService()


@router.get(
    "",
    response_model=Page,
    summary="Get page content",
    description="Returns the CMS entry published at a URL path",
)
async def get_page(
    service: Annotated[ContentService, Depends(get_content_service)],
    url: Annotated[str, Query(description="Page URL path", examples=["/", "/editor"])] = "/",
) -> Page:
    """Return page content for the marketing and editor pages."""
    try:
        return await service.get_page(url)
    except PageNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ContentstackClientError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

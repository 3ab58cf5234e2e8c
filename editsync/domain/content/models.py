"""Page content domain models.

Read-only views of the page entries managed in Contentstack.
"""

from enum import Enum
from typing import Any

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, field_validator


class BlockLayout(str, Enum):
    """Image placement inside a content block."""

    IMAGE_LEFT = "image_left"
    IMAGE_RIGHT = "image_right"


class Image(BaseModel):
    """Asset reference."""

    model_config = ConfigDict(extra="ignore")

    url: str = Field(description="Asset URL")
    title: str | None = Field(default=None, description="Asset title, used as alt text")


class Block(BaseModel):
    """Layout block of a page."""

    model_config = ConfigDict(extra="ignore")

    uid: str = Field(
        validation_alias=AliasChoices(AliasPath("_metadata", "uid"), "uid"),
        description="Block UID",
    )
    title: str | None = Field(default=None, description="Block heading")
    copy_html: str | None = Field(
        default=None,
        validation_alias=AliasChoices("copy", "copy_html"),
        serialization_alias="copy",
        description="Block body as HTML",
    )
    image: Image | None = Field(default=None, description="Block image")
    layout: BlockLayout = Field(default=BlockLayout.IMAGE_LEFT, description="Image placement")

    @property
    def is_image_left(self) -> bool:
        """Whether the image is rendered before the copy."""
        return self.layout == BlockLayout.IMAGE_LEFT


class Page(BaseModel):
    """Page entry."""

    model_config = ConfigDict(extra="ignore")

    uid: str = Field(description="Entry UID")
    title: str = Field(description="Page title")
    url: str = Field(description="Page URL path")
    description: str | None = Field(default=None, description="Page description")
    image: Image | None = Field(default=None, description="Hero image")
    rich_text: str | None = Field(default=None, description="Rich text body as HTML")
    blocks: list[Block] = Field(default_factory=list, description="Ordered layout blocks")

    @field_validator("blocks", mode="before")
    @classmethod
    def _unwrap_blocks(cls, value: Any) -> Any:
        """Modular blocks arrive as ``[{"block": {...}}]``."""
        if value is None:
            return []
        if isinstance(value, list):
            return [
                item["block"] if isinstance(item, dict) and "block" in item else item
                for item in value
            ]
        return value

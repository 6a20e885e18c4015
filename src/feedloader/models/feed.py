"""Feed domain models."""

from uuid import UUID

from pydantic import AnyUrl, BaseModel, Field


class FeedItem(BaseModel):
    """A single feed entry.

    Two items are equal when all four fields are equal.
    """

    id: UUID = Field(..., description="Unique item identifier")
    description: str | None = Field(default=None, description="Optional description text")
    location: str | None = Field(default=None, description="Optional location text")
    image_url: AnyUrl = Field(..., description="URL of the item's image")

    model_config = {"frozen": True}

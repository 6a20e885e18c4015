"""Mapping of the remote feed JSON payload into FeedItem objects."""

import re
from uuid import UUID

from pydantic import AnyUrl, BaseModel, ValidationError, field_validator

from feedloader.exceptions import InvalidDataError
from feedloader.models.feed import FeedItem

CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


class RemoteFeedItem(BaseModel):
    """One element of the ``items`` array as it appears on the wire."""

    id: UUID
    description: str | None = None
    location: str | None = None
    image: AnyUrl

    @field_validator("id", mode="before")
    @classmethod
    def require_canonical_id(cls, value):
        """Accept only the dashed 8-4-4-4-12 string form."""
        if not isinstance(value, str) or not CANONICAL_UUID.fullmatch(value):
            raise ValueError("id must be a canonical UUID string")
        return value

    def to_model(self) -> FeedItem:
        return FeedItem(
            id=self.id,
            description=self.description,
            location=self.location,
            image_url=self.image,
        )


class RemoteFeedPayload(BaseModel):
    """Top-level response body: ``{"items": [...]}``."""

    items: list[RemoteFeedItem]


def map_feed_items(data: bytes) -> list[FeedItem]:
    """Decode a feed response body into FeedItem objects.

    Validation is all-or-nothing: one malformed item rejects the whole
    payload. Item order follows the ``items`` array.

    Args:
        data: Raw response body.

    Returns:
        Decoded items, possibly empty.

    Raises:
        InvalidDataError: When the body is not valid JSON or does not match
            the expected schema.
    """
    try:
        payload = RemoteFeedPayload.model_validate_json(data)
    except ValidationError as e:
        raise InvalidDataError(f"Payload rejected: {e.error_count()} validation error(s)") from e

    return [item.to_model() for item in payload.items]

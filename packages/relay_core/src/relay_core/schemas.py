"""Pydantic schemas for the InstallerOS relay.

Everything here is request-scoped: built from an inbound payload or an
upstream response, emitted, then discarded. Nothing is persisted.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Constants
# =============================================================================

CONTACT_SOURCE = "Vapi Voice Agent"
CONTACT_TAGS: tuple[str, ...] = ("vapi-call", "ai-captured")
ENQUIRY_SOURCE = "VAPI Voice Agent"

DEFAULT_FIRST_NAME = "Vapi"
DEFAULT_LAST_NAME = "Caller"
DEFAULT_URGENCY = "normal"

# Transcript fallback for the conversation summary is truncated to this length
SUMMARY_TRANSCRIPT_CHARS: int = 500

# Monday.com items_page size (single page per board)
BOARD_PAGE_LIMIT: int = 500

# A Monday.com board item exactly as returned upstream (passed through untouched)
BoardItem = dict[str, Any]


# =============================================================================
# CRM Contact (Output of the Normalizer)
# =============================================================================


class CustomField(BaseModel):
    """A single GHL custom field entry.

    Serialized as ``{"key": ..., "field_value": ...}`` on the wire.
    """

    model_config = ConfigDict(populate_by_name=True)

    key: str
    value: str = Field(serialization_alias="field_value")


class ContactRecord(BaseModel):
    """Canonical contact-creation request for the GHL contacts API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    location_id: str
    phone: str = ""
    name: str = ""
    first_name: str = DEFAULT_FIRST_NAME
    last_name: str = DEFAULT_LAST_NAME
    source: str = CONTACT_SOURCE
    tags: list[str] = Field(default_factory=lambda: list(CONTACT_TAGS))
    custom_fields: list[CustomField] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        """Flat camelCase JSON body for ``POST /contacts/``."""
        return self.model_dump(by_alias=True)

    def custom_field(self, key: str) -> str | None:
        """Value of the custom field ``key``, or None if it was not emitted."""
        for field in self.custom_fields:
            if field.key == key:
                return field.value
        return None


# =============================================================================
# Endpoint Responses
# =============================================================================


class WebhookResponse(BaseModel):
    """Response body for ``POST /webhook/vapi-call``."""

    status: str  # "ok" | "logged" | "error"
    contact_id: str | None = Field(default=None, serialization_alias="contactId")
    message: str | None = None
    note: str | None = None


class ItemsPage(BaseModel):
    items: list[BoardItem] = Field(default_factory=list)


class Board(BaseModel):
    items_page: ItemsPage = Field(default_factory=ItemsPage)


class BoardsData(BaseModel):
    boards: list[Board] = Field(default_factory=lambda: [Board()])


class BoardsResponse(BaseModel):
    """Response body for ``GET /api/monday``.

    Mirrors the upstream ``data.boards[0].items_page.items`` nesting so the
    dashboard reads it exactly like a raw Monday.com response.
    """

    data: BoardsData
    count: int = Field(serialization_alias="_count")
    note: str | None = Field(default=None, serialization_alias="_note")

    @classmethod
    def from_items(cls, items: list[BoardItem], note: str | None = None):
        """Wrap a flat item list in the single-board response shape."""
        return cls(
            data=BoardsData(boards=[Board(items_page=ItemsPage(items=items))]),
            count=len(items),
            note=note,
        )

    def to_payload(self) -> dict[str, Any]:
        # exclude_none would also strip null column values inside items
        payload = self.model_dump(by_alias=True)
        if self.note is None:
            payload.pop("_note")
        return payload

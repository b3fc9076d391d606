"""Core payload normalization and board aggregation for the InstallerOS relay."""

from relay_core.aggregation import merge_board_items
from relay_core.extract import first_present, is_present, lookup, stringify
from relay_core.normalizer import CallEvent, normalize_call_event, split_name
from relay_core.schemas import (
    BOARD_PAGE_LIMIT,
    BoardItem,
    BoardsResponse,
    ContactRecord,
    CustomField,
    WebhookResponse,
)

__all__ = [
    "BOARD_PAGE_LIMIT",
    "BoardItem",
    "BoardsResponse",
    "CallEvent",
    "ContactRecord",
    "CustomField",
    "WebhookResponse",
    "first_present",
    "is_present",
    "lookup",
    "merge_board_items",
    "normalize_call_event",
    "split_name",
    "stringify",
]

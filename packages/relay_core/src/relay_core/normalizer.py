"""Vapi call event -> GHL contact normalization.

Vapi wraps server events in a ``message`` envelope for some event types and
posts the bare call object for others, so every field is resolved through an
ordered list of fallbacks:

- message:        payload.message, else payload
- call:           message.call, else message
- transcript:     message.transcript, else call.transcript, else ""
- summary:        message.summary, else message.analysis.summary, else ""
- phone:          call.customer.number, else call.phoneNumber, else ""
- structuredData: message.analysis.structuredData, else {}

The normalizer is a pure function and never raises on malformed input.
"""

from collections.abc import Mapping
from typing import Any

from relay_core.extract import first_of, first_present, is_present, lookup, stringify
from relay_core.schemas import (
    DEFAULT_FIRST_NAME,
    DEFAULT_LAST_NAME,
    DEFAULT_URGENCY,
    ENQUIRY_SOURCE,
    SUMMARY_TRANSCRIPT_CHARS,
    ContactRecord,
    CustomField,
)


class CallEvent:
    """Read-only view over a raw Vapi webhook payload."""

    def __init__(self, payload: Any):
        self.payload = payload
        self.message = first_of(lookup(payload, "message"), default=payload)
        self.call = first_of(lookup(self.message, "call"), default=self.message)

    @property
    def transcript(self) -> str:
        value = first_of(
            lookup(self.message, "transcript"),
            lookup(self.call, "transcript"),
            default="",
        )
        return stringify(value)

    @property
    def summary(self) -> str:
        value = first_present(
            self.message, "summary", "analysis.summary", default=""
        )
        return stringify(value)

    @property
    def phone(self) -> str:
        value = first_present(
            self.call, "customer.number", "phoneNumber", default=""
        )
        return stringify(value)

    @property
    def structured_data(self) -> Mapping[str, Any]:
        value = lookup(self.message, "analysis.structuredData")
        if isinstance(value, Mapping):
            return value
        return {}


def split_name(name: str) -> tuple[str, str]:
    """Split a full name into (first, last), falling back to placeholders."""
    parts = name.split()
    first_name = parts[0] if parts else DEFAULT_FIRST_NAME
    last_name = " ".join(parts[1:]) or DEFAULT_LAST_NAME
    return first_name, last_name


def build_field_map(event: CallEvent) -> list[tuple[str, Any]]:
    """Ordered (custom field key, raw value) pairs for a call event."""
    data = event.structured_data
    transcript = event.transcript
    return [
        (
            "service_requested",
            first_of(data.get("service_type"), data.get("service_requested")),
        ),
        ("service_type", data.get("job_category")),
        (
            "conversation_summary_contact",
            first_of(event.summary, transcript[:SUMMARY_TRANSCRIPT_CHARS]),
        ),
        ("enquiry_source", ENQUIRY_SOURCE),
        ("urgency_contact", first_of(data.get("urgency"), default=DEFAULT_URGENCY)),
        ("quoted_price", data.get("quoted_price")),
    ]


def build_custom_fields(field_map: list[tuple[str, Any]]) -> list[CustomField]:
    """Keep only present values, stringified, in field-map order.

    Note that a legitimate zero (e.g. a quoted price of 0) is treated as
    absent and dropped.
    """
    return [
        CustomField(key=key, value=stringify(value))
        for key, value in field_map
        if is_present(value)
    ]


def normalize_call_event(payload: Any, location_id: str) -> ContactRecord:
    """Convert a Vapi webhook payload into a GHL contact record.

    Args:
        payload: Decoded JSON body of the webhook, any shape.
        location_id: GHL sub-account (location) the contact belongs to.

    Returns:
        ContactRecord ready to be posted to the contacts API.
    """
    event = CallEvent(payload)
    customer_name = event.structured_data.get("customer_name")
    name = stringify(customer_name) if is_present(customer_name) else ""
    first_name, last_name = split_name(name)

    return ContactRecord(
        location_id=location_id,
        phone=event.phone,
        name=name,
        first_name=first_name,
        last_name=last_name,
        custom_fields=build_custom_fields(build_field_map(event)),
    )

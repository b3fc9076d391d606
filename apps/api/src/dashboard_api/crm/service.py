"""Contact forwarding: Vapi webhook -> GHL contact.

``build_contact_service`` picks the variant once, at app construction:

- ContactService: credentials present, normalizes and forwards each event.
- UnconfiguredContactService: no credentials, logs the raw payload only.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx
from relay_core.extract import lookup
from relay_core.normalizer import normalize_call_event

from dashboard_api.config import DEFAULT_HTTP_TIMEOUT_SECONDS, CRMConfig
from dashboard_api.crm.client import GHLClient

logger = logging.getLogger("relay-crm")

NOT_CONFIGURED_NOTE = "GHL not configured"
CONTACT_LIST_LIMIT = 100


@dataclass
class ForwardResult:
    """Result of forwarding one call event."""

    status: str  # "ok" | "logged" | "error"
    contact_id: str | None = None
    error: str | None = None
    note: str | None = None

    @property
    def success(self) -> bool:
        return self.status != "error"


class UpstreamError(Exception):
    """Raised when a GHL read call fails."""


class ContactService:
    """Normalizes call events and creates GHL contacts."""

    configured = True

    def __init__(self, config: CRMConfig, client: GHLClient):
        self.config = config
        self.client = client

    async def forward_call_event(self, payload: Any) -> ForwardResult:
        """Normalize ``payload`` and create the contact in GHL.

        Never raises; upstream failures come back as ``status="error"``.
        """
        try:
            record = normalize_call_event(payload, self.config.location_id)
            data = await self.client.create_contact(record)
        except httpx.HTTPError as e:
            logger.error(f"GHL API error: {e!s}")
            return ForwardResult(status="error", error=str(e) or type(e).__name__)
        except Exception as e:
            logger.error(f"Webhook error: {e!s}")
            return ForwardResult(status="error", error=str(e) or type(e).__name__)

        contact_id = lookup(data, "contact.id")
        logger.info(f"GHL contact created: {contact_id or 'unknown'}")
        return ForwardResult(
            status="ok",
            contact_id=str(contact_id) if contact_id is not None else None,
        )

    async def list_contacts(self) -> dict[str, Any]:
        """Contacts for the dashboard, passed through from GHL.

        Raises:
            UpstreamError: If GHL cannot be reached or returns non-JSON.
        """
        try:
            data = await self.client.list_contacts(limit=CONTACT_LIST_LIMIT)
        except Exception as e:
            logger.error(f"GHL contact list error: {e!s}")
            raise UpstreamError(str(e) or type(e).__name__) from e

        contacts = lookup(data, "contacts")
        return {"contacts": contacts or []}


class UnconfiguredContactService:
    """Degraded mode: no GHL credentials, nothing leaves the process."""

    configured = False

    async def forward_call_event(self, payload: Any) -> ForwardResult:
        logger.info("GHL not configured - logging call data only")
        logger.info(f"Vapi payload: {json.dumps(payload, indent=2, default=str)}")
        return ForwardResult(status="logged", note=NOT_CONFIGURED_NOTE)

    async def list_contacts(self) -> dict[str, Any]:
        return {"contacts": [], "note": NOT_CONFIGURED_NOTE}


def build_contact_service(
    config: CRMConfig,
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ContactService | UnconfiguredContactService:
    """Pick the service variant for ``config``."""
    if not config.is_configured():
        return UnconfiguredContactService()
    return ContactService(
        config, GHLClient(config, timeout=timeout, transport=transport)
    )

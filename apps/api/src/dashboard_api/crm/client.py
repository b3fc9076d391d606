"""GoHighLevel (LeadConnector) contacts API client.

One request per call, no retries. HTTP status codes are not interpreted:
whatever JSON the API returns is handed back to the caller.
"""

import logging
from typing import Any

import httpx
from relay_core.schemas import ContactRecord

from dashboard_api.config import DEFAULT_HTTP_TIMEOUT_SECONDS, CRMConfig

logger = logging.getLogger("relay-crm-client")


class GHLClient:
    """Thin async wrapper around the GHL contacts endpoints."""

    def __init__(
        self,
        config: CRMConfig,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            config: CRM credentials. Must be configured.
            timeout: Per-request timeout in seconds.
            transport: Optional httpx transport (used by tests).
        """
        self.config = config
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.api_key}",
            "Version": self.config.api_version,
        }

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            headers=self._headers(),
            timeout=self.timeout,
            transport=self._transport,
        )

    async def create_contact(self, record: ContactRecord) -> Any:
        """Create a contact.

        Returns:
            The decoded JSON response body, whatever the status code.

        Raises:
            httpx.HTTPError: On transport failures.
            ValueError: If the response body is not JSON.
        """
        async with self._client() as client:
            response = await client.post("/contacts/", json=record.to_payload())
            if response.is_error:
                logger.warning(f"GHL create contact returned {response.status_code}")
            return response.json()

    async def list_contacts(self, limit: int = 100) -> Any:
        """List contacts for the configured location."""
        async with self._client() as client:
            response = await client.get(
                "/contacts/",
                params={"locationId": self.config.location_id, "limit": limit},
            )
            return response.json()

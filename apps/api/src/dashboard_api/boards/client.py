"""Monday.com GraphQL client for board items."""

import logging

import httpx
from relay_core.extract import lookup
from relay_core.schemas import BoardItem

from dashboard_api.config import DEFAULT_HTTP_TIMEOUT_SECONDS, BoardConfig

logger = logging.getLogger("relay-boards-client")

ITEMS_QUERY = """
query ($ids: [ID!], $limit: Int!) {
  boards(ids: $ids) {
    items_page(limit: $limit) {
      items {
        id
        name
        created_at
        column_values { id text value }
      }
    }
  }
}
"""


class MondayClient:
    """Fetches the first items page of a Monday.com board."""

    def __init__(
        self,
        config: BoardConfig,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        # Monday.com takes the raw token, no "Bearer" prefix
        return {
            "Authorization": self.config.api_key,
            "API-Version": self.config.api_version,
        }

    async def fetch_board_items(self, board_id: str) -> list[BoardItem]:
        """Fetch a single page of items for ``board_id``.

        Returns:
            Items from ``data.boards[0].items_page.items``, or [] if absent.

        Raises:
            httpx.HTTPError: On transport failures.
            ValueError: If the response body is not JSON.
        """
        body = {
            "query": ITEMS_QUERY,
            "variables": {"ids": [board_id], "limit": self.config.page_limit},
        }
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            response = await client.post(
                self.config.api_url, json=body, headers=self._headers()
            )
            data = response.json()

        errors = lookup(data, "errors")
        if errors:
            logger.warning(f"Board {board_id} query errors: {errors}")

        boards = lookup(data, "data.boards")
        if not isinstance(boards, list) or not boards:
            return []
        items = lookup(boards[0], "items_page.items")
        return items if isinstance(items, list) else []

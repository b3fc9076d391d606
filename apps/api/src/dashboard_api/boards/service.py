"""Board aggregation across every configured Monday.com board.

Boards are fetched concurrently; a failing board is logged and contributes
no items. The merge always follows the configured board order, whichever
request finishes first.
"""

import asyncio
import logging

import httpx
from relay_core.aggregation import merge_board_items
from relay_core.schemas import BoardItem, BoardsResponse

from dashboard_api.boards.client import MondayClient
from dashboard_api.config import DEFAULT_HTTP_TIMEOUT_SECONDS, BoardConfig

logger = logging.getLogger("relay-boards")

NOT_CONFIGURED_NOTE = "Monday.com not configured"


class BoardAggregator:
    """Fetches and merges items from all configured boards."""

    configured = True

    def __init__(self, config: BoardConfig, client: MondayClient):
        self.config = config
        self.client = client

    async def _fetch_or_empty(self, board_id: str) -> list[BoardItem]:
        try:
            return await self.client.fetch_board_items(board_id)
        except Exception as e:
            logger.warning(f"Board {board_id} error: {e!s}")
            return []

    async def aggregate(self) -> BoardsResponse:
        """Fetch every board and merge the items, last write wins."""
        pages = await asyncio.gather(
            *(self._fetch_or_empty(board_id) for board_id in self.config.board_ids)
        )
        items = merge_board_items(pages)
        logger.info(
            f"Aggregated {len(items)} item(s) from {len(self.config.board_ids)} board(s)"
        )
        return BoardsResponse.from_items(items)


class UnconfiguredBoardAggregator:
    """Degraded mode: no key or no boards, always an empty feed."""

    configured = False

    async def aggregate(self) -> BoardsResponse:
        return BoardsResponse.from_items([], note=NOT_CONFIGURED_NOTE)


def build_board_aggregator(
    config: BoardConfig,
    timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BoardAggregator | UnconfiguredBoardAggregator:
    """Pick the aggregator variant for ``config``."""
    if not config.is_configured():
        return UnconfiguredBoardAggregator()
    return BoardAggregator(
        config, MondayClient(config, timeout=timeout, transport=transport)
    )

"""Monday.com board aggregation for the dashboard."""

from dashboard_api.boards.client import MondayClient
from dashboard_api.boards.service import (
    BoardAggregator,
    UnconfiguredBoardAggregator,
    build_board_aggregator,
)

__all__ = [
    "BoardAggregator",
    "MondayClient",
    "UnconfiguredBoardAggregator",
    "build_board_aggregator",
]

"""Board routes: merged Monday.com item feed for the dashboard."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger("relay-boards-routes")

router = APIRouter(prefix="/api", tags=["Boards"])


@router.get("/monday")
async def monday_items(request: Request):
    """Items from all configured boards, deduplicated by id.

    Shape mirrors the Monday.com API:
    ``{data: {boards: [{items_page: {items}}]}, _count}``.
    """
    try:
        result = await request.app.state.board_aggregator.aggregate()
    except Exception as e:
        logger.error(f"Board aggregation error: {e!s}")
        return JSONResponse(status_code=502, content={"error": str(e)})
    return result.to_payload()

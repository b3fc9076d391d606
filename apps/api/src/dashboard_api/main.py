"""FastAPI application for the InstallerOS dashboard relay.

Provides:
- Vapi call webhook -> GoHighLevel contact creation
- Live dashboard feeds (GHL contacts, merged Monday.com board items)
- Static dashboard UI with single-page-app fallback

Routes:
1. POST /webhook/vapi-call - Normalize a call event and create a GHL contact
2. GET /api/ghl/contacts - Contact list pass-through
3. GET /api/monday - Items from all configured boards, deduplicated by id
4. GET /health - Liveness and configuration status
5. GET /{path} - Dashboard UI (public/index.html)
"""

import logging
from datetime import datetime, timezone

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel

from dashboard_api.boards.routes import router as boards_router
from dashboard_api.boards.service import build_board_aggregator
from dashboard_api.config import RelayConfig, load_env_files
from dashboard_api.crm.routes import router as crm_router
from dashboard_api.crm.service import build_contact_service

logger = logging.getLogger("relay-api")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    crm_configured: bool
    boards_configured: bool


def create_app(
    config: RelayConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the relay application.

    Args:
        config: Relay configuration. Loads from environment if not provided.
        transport: Optional httpx transport shared by the upstream clients.

    Returns:
        Configured FastAPI app. Services are chosen here, once, so request
        handlers never consult the environment.
    """
    config = config or RelayConfig.from_env()

    app = FastAPI(
        title="InstallerOS Dashboard Relay",
        description="Vapi -> GoHighLevel contact relay and dashboard data feeds",
        version="0.1.0",
    )
    app.state.config = config
    app.state.contact_service = build_contact_service(
        config.crm, timeout=config.http_timeout_seconds, transport=transport
    )
    app.state.board_aggregator = build_board_aggregator(
        config.boards, timeout=config.http_timeout_seconds, transport=transport
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(crm_router)
    app.include_router(boards_router)

    @app.get("/health", response_model=HealthResponse)
    async def health_check(request: Request):
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            timestamp=datetime.now(timezone.utc).isoformat(),
            crm_configured=request.app.state.contact_service.configured,
            boards_configured=request.app.state.board_aggregator.configured,
        )

    public_dir = config.public_dir

    @app.get("/{path:path}", include_in_schema=False)
    async def dashboard(path: str):
        """Serve a file from public/, else the SPA entry point."""
        candidate = (public_dir / path).resolve()
        if (
            path
            and candidate.is_file()
            and candidate.is_relative_to(public_dir.resolve())
        ):
            return FileResponse(candidate)

        index = public_dir / "index.html"
        if index.is_file():
            return FileResponse(index)
        return JSONResponse(status_code=404, content={"detail": "Dashboard not found"})

    return app


def main() -> None:
    """Run the relay with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    load_env_files()
    config = RelayConfig.from_env()
    app = create_app(config)

    logger.info(f"InstallerOS Dashboard running on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=config.port)


if __name__ == "__main__":
    main()

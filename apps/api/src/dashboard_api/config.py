"""Relay configuration.

All values come from environment variables (optionally loaded from
``.env.local`` / ``.env``). Missing credentials are not an error: the
affected endpoint runs in a degraded "not configured" mode instead.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from relay_core.schemas import BOARD_PAGE_LIMIT

logger = logging.getLogger("relay-config")

DEFAULT_GHL_BASE_URL = "https://services.leadconnectorhq.com"
DEFAULT_GHL_API_VERSION = "2021-07-28"
DEFAULT_MONDAY_API_URL = "https://api.monday.com/v2"
DEFAULT_MONDAY_API_VERSION = "2024-10"
DEFAULT_PORT = 3000
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0


def load_env_files() -> None:
    """Load ``.env.local`` then ``.env`` from the working directory, if present."""
    load_dotenv(Path.cwd() / ".env.local")
    load_dotenv(Path.cwd() / ".env")


def parse_board_ids(raw: str) -> list[str]:
    """Split a comma-separated board id list, dropping blanks."""
    return [board_id.strip() for board_id in raw.split(",") if board_id.strip()]


@dataclass
class CRMConfig:
    """GoHighLevel credentials."""

    api_key: str
    location_id: str
    base_url: str = DEFAULT_GHL_BASE_URL
    api_version: str = DEFAULT_GHL_API_VERSION

    @classmethod
    def from_env(cls) -> "CRMConfig":
        """Load CRM config from environment variables."""
        api_key = os.getenv("GHL_API_KEY", "")
        location_id = os.getenv("GHL_LOCATION_ID", "")

        if not api_key or not location_id:
            logger.warning(
                "GHL_API_KEY / GHL_LOCATION_ID not set - webhook will only log payloads"
            )

        return cls(
            api_key=api_key,
            location_id=location_id,
            base_url=os.getenv("GHL_BASE_URL", DEFAULT_GHL_BASE_URL),
            api_version=os.getenv("GHL_API_VERSION", DEFAULT_GHL_API_VERSION),
        )

    def is_configured(self) -> bool:
        """Check if all required config is present."""
        return bool(self.api_key and self.location_id)


@dataclass
class BoardConfig:
    """Monday.com credentials and the boards to aggregate."""

    api_key: str
    board_ids: list[str] = field(default_factory=list)
    api_url: str = DEFAULT_MONDAY_API_URL
    api_version: str = DEFAULT_MONDAY_API_VERSION
    page_limit: int = BOARD_PAGE_LIMIT

    @classmethod
    def from_env(cls) -> "BoardConfig":
        """Load board config from environment variables."""
        api_key = os.getenv("MONDAY_API_KEY", "")
        board_ids = parse_board_ids(os.getenv("MONDAY_BOARD_IDS", ""))

        if not api_key or not board_ids:
            logger.warning(
                "MONDAY_API_KEY / MONDAY_BOARD_IDS not set - board feed will be empty"
            )

        return cls(
            api_key=api_key,
            board_ids=board_ids,
            api_url=os.getenv("MONDAY_API_URL", DEFAULT_MONDAY_API_URL),
            api_version=os.getenv("MONDAY_API_VERSION", DEFAULT_MONDAY_API_VERSION),
        )

    def is_configured(self) -> bool:
        """Check if a key and at least one board id are present."""
        return bool(self.api_key and self.board_ids)


@dataclass
class RelayConfig:
    """Top-level configuration handed to the app factory."""

    crm: CRMConfig
    boards: BoardConfig
    port: int = DEFAULT_PORT
    public_dir: Path = field(default_factory=lambda: Path.cwd() / "public")
    http_timeout_seconds: float = DEFAULT_HTTP_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """Load the full relay config from environment variables."""
        return cls(
            crm=CRMConfig.from_env(),
            boards=BoardConfig.from_env(),
            port=int(os.getenv("PORT", str(DEFAULT_PORT))),
            public_dir=Path(os.getenv("PUBLIC_DIR", str(Path.cwd() / "public"))),
            http_timeout_seconds=float(
                os.getenv("HTTP_TIMEOUT_SECONDS", str(DEFAULT_HTTP_TIMEOUT_SECONDS))
            ),
        )

"""Tests for relay configuration loading."""

from pathlib import Path

import pytest
from dashboard_api.config import BoardConfig, CRMConfig, RelayConfig, parse_board_ids

ENV_VARS = [
    "GHL_API_KEY",
    "GHL_LOCATION_ID",
    "GHL_BASE_URL",
    "GHL_API_VERSION",
    "MONDAY_API_KEY",
    "MONDAY_BOARD_IDS",
    "MONDAY_API_URL",
    "MONDAY_API_VERSION",
    "PORT",
    "PUBLIC_DIR",
    "HTTP_TIMEOUT_SECONDS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from an empty relay environment."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


class TestParseBoardIds:
    """Tests for board id list parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("", []),
            ("123", ["123"]),
            ("123,456", ["123", "456"]),
            (" 123 , 456 ,", ["123", "456"]),
            (",,", []),
        ],
    )
    def test_parse(self, raw, expected):
        assert parse_board_ids(raw) == expected


class TestCRMConfig:
    """Tests for CRMConfig."""

    def test_from_env_with_values(self, monkeypatch):
        monkeypatch.setenv("GHL_API_KEY", "ghl_key")
        monkeypatch.setenv("GHL_LOCATION_ID", "loc_1")

        config = CRMConfig.from_env()

        assert config.api_key == "ghl_key"
        assert config.location_id == "loc_1"
        assert config.base_url == "https://services.leadconnectorhq.com"
        assert config.api_version == "2021-07-28"
        assert config.is_configured() is True

    def test_from_env_with_defaults(self):
        config = CRMConfig.from_env()

        assert config.api_key == ""
        assert config.location_id == ""
        assert config.is_configured() is False

    def test_key_without_location_is_not_configured(self, monkeypatch):
        monkeypatch.setenv("GHL_API_KEY", "ghl_key")
        assert CRMConfig.from_env().is_configured() is False


class TestBoardConfig:
    """Tests for BoardConfig."""

    def test_from_env_with_values(self, monkeypatch):
        monkeypatch.setenv("MONDAY_API_KEY", "monday_key")
        monkeypatch.setenv("MONDAY_BOARD_IDS", "111, 222")

        config = BoardConfig.from_env()

        assert config.api_key == "monday_key"
        assert config.board_ids == ["111", "222"]
        assert config.api_url == "https://api.monday.com/v2"
        assert config.api_version == "2024-10"
        assert config.page_limit == 500
        assert config.is_configured() is True

    def test_key_without_boards_is_not_configured(self, monkeypatch):
        monkeypatch.setenv("MONDAY_API_KEY", "monday_key")
        assert BoardConfig.from_env().is_configured() is False

    def test_boards_without_key_is_not_configured(self, monkeypatch):
        monkeypatch.setenv("MONDAY_BOARD_IDS", "111")
        assert BoardConfig.from_env().is_configured() is False


class TestRelayConfig:
    """Tests for the aggregate RelayConfig."""

    def test_defaults(self):
        config = RelayConfig.from_env()

        assert config.port == 3000
        assert config.http_timeout_seconds == 30.0
        assert config.public_dir.name == "public"
        assert config.crm.is_configured() is False
        assert config.boards.is_configured() is False

    def test_public_dir_defaults_to_working_directory(self, monkeypatch, tmp_path):
        """The static directory is resolved from where the server is started."""
        monkeypatch.chdir(tmp_path)

        assert RelayConfig.from_env().public_dir == tmp_path / "public"

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("PUBLIC_DIR", str(tmp_path))
        monkeypatch.setenv("HTTP_TIMEOUT_SECONDS", "5")

        config = RelayConfig.from_env()

        assert config.port == 8080
        assert config.public_dir == Path(tmp_path)
        assert config.http_timeout_seconds == 5.0

"""CLI tests - typer CliRunner with mocked fetcher, no internet."""

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from steamlookup import __version__
from steamlookup.cli import app, ERROR_MESSAGE
from steamlookup.core.fetcher import FetchResult
from steamlookup.exceptions import FetchError


FIXTURES_DIR = Path(__file__).parent / "fixtures"
STEAM_ID = "76561197960287930"

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_store(tmp_path, monkeypatch):
    """Point the CLI at a throwaway database."""
    monkeypatch.setenv("STEAMLOOKUP_SQLITE_PATH", str(tmp_path / "ids.db"))
    monkeypatch.setenv("STEAMLOOKUP_LOG_LEVEL", "WARNING")
    return tmp_path / "ids.db"


@pytest.fixture
def mock_fetch():
    html = (FIXTURES_DIR / "public.html").read_text(encoding="utf-8")
    with patch(
        "steamlookup.core.orchestrator.fetch_profile_page", new_callable=AsyncMock
    ) as mock:
        mock.return_value = FetchResult(url="", html=html, response_status=200)
        yield mock


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestLookupCommand:
    """Test lookup rendering and the remember prompt."""

    def test_prompt_declined(self, mock_fetch):
        result = runner.invoke(app, ["lookup", STEAM_ID], input="n\n")

        assert result.exit_code == 0
        assert "Remember it?" in result.output
        assert "Rabscuttle" in result.output
        mock_fetch.assert_called_once()

        ids = runner.invoke(app, ["ids"])
        assert STEAM_ID not in ids.output

    def test_prompt_accepted(self, mock_fetch):
        result = runner.invoke(app, ["lookup", STEAM_ID], input="y\n")
        assert result.exit_code == 0

        ids = runner.invoke(app, ["ids"])
        assert STEAM_ID in ids.output

    def test_known_identifier_not_prompted(self, mock_fetch):
        runner.invoke(app, ["lookup", STEAM_ID, "--remember"])
        result = runner.invoke(app, ["lookup", STEAM_ID])

        assert result.exit_code == 0
        assert "Remember it?" not in result.output

    def test_no_remember_flag_skips_prompt(self, mock_fetch):
        result = runner.invoke(app, ["lookup", STEAM_ID, "--no-remember"])
        assert result.exit_code == 0
        assert "Remember it?" not in result.output

    def test_captions_rendered(self, mock_fetch):
        result = runner.invoke(app, ["lookup", STEAM_ID, "--no-remember"])
        for caption in ("Name", "Friends", "Level", "Games", "Groups", "Badges"):
            assert caption in result.output

    def test_json_output(self, mock_fetch):
        result = runner.invoke(app, ["lookup", STEAM_ID, "--no-remember", "--json"])
        assert result.exit_code == 0
        assert '"variant": "fully_visible"' in result.output

    def test_save_output(self, mock_fetch, tmp_path):
        out = tmp_path / "snap.json"
        result = runner.invoke(app, ["lookup", STEAM_ID, "--no-remember", "-o", str(out)])
        assert result.exit_code == 0
        assert out.exists()

    def test_fetch_failure_exit_code(self, mock_fetch):
        mock_fetch.side_effect = FetchError("down")
        result = runner.invoke(app, ["lookup", STEAM_ID, "--no-remember"])

        assert result.exit_code == 1
        assert ERROR_MESSAGE.splitlines()[0] in result.output
        assert "Rabscuttle" not in result.output

    def test_open_launches_browser(self, mock_fetch):
        with patch("steamlookup.cli.typer.launch") as launch:
            result = runner.invoke(app, ["lookup", STEAM_ID, "--no-remember", "--open"])
        assert result.exit_code == 0
        launch.assert_called_once_with(f"https://steamcommunity.com/profiles/{STEAM_ID}")

    def test_open_skipped_on_failure(self, mock_fetch):
        mock_fetch.side_effect = FetchError("down")
        with patch("steamlookup.cli.typer.launch") as launch:
            runner.invoke(app, ["lookup", STEAM_ID, "--no-remember", "--open"])
        launch.assert_not_called()

    def test_blank_identifier_rejected(self, mock_fetch):
        result = runner.invoke(app, ["lookup", "  "])
        assert result.exit_code == 2
        mock_fetch.assert_not_called()


class TestIdsAndClear:
    """Test identifier listing and clearing."""

    def test_ids_empty(self):
        result = runner.invoke(app, ["ids"])
        assert result.exit_code == 0
        assert "No remembered identifiers" in result.output

    def test_ids_prefix(self, mock_fetch):
        runner.invoke(app, ["lookup", STEAM_ID, "--remember"])
        runner.invoke(app, ["lookup", "gaben", "--remember"])

        result = runner.invoke(app, ["ids", "--prefix", "7656"])
        assert STEAM_ID in result.output
        assert "gaben" not in result.output

    def test_clear_confirmed(self, mock_fetch):
        runner.invoke(app, ["lookup", STEAM_ID, "--remember"])
        result = runner.invoke(app, ["clear"], input="y\n")

        assert result.exit_code == 0
        assert "Cleared" in result.output
        assert STEAM_ID not in runner.invoke(app, ["ids"]).output

    def test_clear_cancelled(self, mock_fetch):
        runner.invoke(app, ["lookup", STEAM_ID, "--remember"])
        result = runner.invoke(app, ["clear"], input="n\n")

        assert "Cancelled" in result.output
        assert STEAM_ID in runner.invoke(app, ["ids"]).output

    def test_clear_yes_flag(self, mock_fetch):
        runner.invoke(app, ["lookup", STEAM_ID, "--remember"])
        result = runner.invoke(app, ["clear", "--yes"])
        assert result.exit_code == 0
        assert STEAM_ID not in runner.invoke(app, ["ids"]).output

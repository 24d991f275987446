"""Tests for settings, platform helpers and structured logging."""

import json
import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from cmdrunner.config import Settings
from cmdrunner.utils.logging import (
    StructuredFormatter,
    configure_structured_logging,
    get_invocation_id,
    set_invocation_id,
)
from cmdrunner.utils.platform import OSType, detect_os, fzf_install_hint, open_command


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, isolated_settings: Settings) -> None:
        """Test default values."""
        assert isolated_settings.catalog == "general"
        assert isolated_settings.include_history is True
        assert isolated_settings.shell == "bash"
        assert isolated_settings.menu_title == "Command Runner Menu"

    def test_env_override(self, isolated_settings: Settings) -> None:
        """Test that CMDRUNNER_ variables configure the settings."""
        env = {"CMDRUNNER_CATALOG": "aws", "CMDRUNNER_INCLUDE_HISTORY": "false"}
        with patch.dict(os.environ, env):
            app_settings = Settings(_env_file=None)
        assert app_settings.catalog == "aws"
        assert app_settings.include_history is False
        assert app_settings.menu_title == "AWS Command Runner Menu"

    def test_unknown_catalog_rejected(self, isolated_settings: Settings) -> None:
        """Test that only known catalogs validate."""
        with patch.dict(os.environ, {"CMDRUNNER_CATALOG": "gcp"}):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestPlatform:
    """Tests for OS detection and platform strings."""

    @pytest.mark.parametrize(
        "system,expected",
        [
            ("Linux", OSType.LINUX),
            ("Darwin", OSType.MACOS),
            ("Windows", OSType.WINDOWS),
            ("FreeBSD", OSType.OTHER),
        ],
    )
    def test_detect_os(self, system: str, expected: OSType) -> None:
        """Test mapping platform.system() values."""
        assert detect_os(system) is expected

    def test_open_command(self) -> None:
        """Test the open-file command per system."""
        assert open_command(OSType.MACOS) == "open"
        assert open_command(OSType.LINUX) == "xdg-open"
        assert open_command(OSType.OTHER).startswith("echo")

    def test_install_hint(self) -> None:
        """Test that the hint names the package managers for Linux."""
        hint = fzf_install_hint(OSType.LINUX)
        assert "sudo apt install fzf" in hint
        assert hint.endswith("https://github.com/junegunn/fzf for instructions.")


class TestStructuredLogging:
    """Tests for the JSON formatter and logging setup."""

    def test_formatter_includes_invocation_id(self) -> None:
        """Test that the current invocation id is attached to records."""
        set_invocation_id("abc123")
        record = logging.LogRecord("cmdrunner.test", logging.INFO, __file__, 1, "hello %s", ("x",), None)
        data = json.loads(StructuredFormatter().format(record))
        assert data["message"] == "hello x"
        assert data["level"] == "INFO"
        assert data["invocation_id"] == "abc123"

    def test_generated_invocation_id(self) -> None:
        """Test that a random id is generated when none is given."""
        invocation_id = set_invocation_id()
        assert len(invocation_id) == 12
        assert get_invocation_id() == invocation_id

    def test_reconfigure_replaces_handler(self, tmp_path) -> None:
        """Test that repeated configuration keeps a single handler."""
        first = configure_structured_logging("info", str(tmp_path / "a.log"))
        second = configure_structured_logging(logging.DEBUG, str(tmp_path / "b.log"))
        try:
            assert first not in logging.root.handlers
            assert second in logging.root.handlers
            assert logging.root.level == logging.DEBUG

            logging.getLogger("cmdrunner.test").debug("written")
            second.flush()
            line = json.loads((tmp_path / "b.log").read_text().splitlines()[-1])
            assert line["message"] == "written"
        finally:
            logging.root.removeHandler(second)
            second.close()

"""Unit tests for the process entrypoint."""

import os
from unittest.mock import patch

import pytest

import main


class TestRun:
    """Test suite for main.run()."""

    def test_exits_when_database_configuration_missing(self) -> None:
        """Test that the process refuses to start without database settings.

        **Why this test is important:**
          - A pod with missing secrets must crash visibly, not serve errors
          - The listener must never be bound in that case
        """
        with (
            patch.dict(os.environ, {}, clear=True),
            patch("main.uvicorn.run") as uvicorn_run,
            pytest.raises(SystemExit) as exc_info,
        ):
            main.run()

        assert exc_info.value.code == 1
        uvicorn_run.assert_not_called()

    def test_serves_app_on_configured_address(self) -> None:
        env = {"DB_URL": "mongodb://localhost:27017", "API_HOST": "127.0.0.1", "API_PORT": "8080"}
        with patch.dict(os.environ, env, clear=True), patch("main.uvicorn.run") as uvicorn_run:
            main.run()

        uvicorn_run.assert_called_once_with(main.app, host="127.0.0.1", port=8080, log_config=None)

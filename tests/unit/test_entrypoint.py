"""
Unit tests for the `python -m users_api` entry point.
"""
import os
from unittest.mock import patch

from users_api.__main__ import main
from users_api.core.config import get_settings, reset_settings


def test_main_uses_settings_from_dotenv(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("HOST=0.0.0.0\nPORT=4321\nLOG_LEVEL=warning\nAPP_NAME=From Dotenv\n")

    with patch.dict(os.environ, {}, clear=False):
        for key in ("HOST", "PORT", "LOG_LEVEL", "APP_NAME"):
            os.environ.pop(key, None)
        with patch("users_api.core.config._ENV_PATH", env_file), patch(
            "users_api.__main__.uvicorn.run"
        ) as run:
            reset_settings()
            main()
            app_name = get_settings().app_name
    reset_settings()

    run.assert_called_once_with(
        "users_api.main:app",
        host="0.0.0.0",
        port=4321,
        log_level="warning",
    )
    assert app_name == "From Dotenv"


def test_environment_wins_over_dotenv(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PORT=4321\n")

    with patch.dict(os.environ, {"PORT": "5000"}, clear=False):
        with patch("users_api.core.config._ENV_PATH", env_file):
            reset_settings()
            port = get_settings().port
    reset_settings()

    assert port == 5000

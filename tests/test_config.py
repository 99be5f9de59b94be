# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from todoist_mcp import main as main_module
from todoist_mcp.config import DEFAULT_API_BASE_URL, MissingCredentialError, load_settings, parse_args


def test_token_from_environment(tmp_path: Path) -> None:
    settings = load_settings(str(tmp_path), environ={"TODOIST_API_TOKEN": "abc"})

    assert settings.api_token == "abc"
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.transport == "stdio"
    assert settings.port == 8000


def test_token_from_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TODOIST_API_TOKEN=from-file\nMCP_TRANSPORT=sse\n")

    settings = load_settings(str(tmp_path), environ={"PORT": "9000"})

    assert settings.api_token == "from-file"
    assert settings.transport == "sse"
    assert settings.port == 9000


def test_environment_wins_over_dotenv_file(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("TODOIST_API_TOKEN=from-file\nLOG_LEVEL=DEBUG\n")

    settings = load_settings(str(tmp_path), environ={"TODOIST_API_TOKEN": "from-env"})

    assert settings.api_token == "from-env"
    # the file is only read when the token is missing
    assert settings.log_level == "INFO"


def test_missing_token_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingCredentialError) as excinfo:
        load_settings(str(tmp_path), environ={})
    assert str(excinfo.value) == "TODOIST_API_TOKEN environment variable is required"


def test_parse_args_dotenv_dir() -> None:
    assert parse_args(["--dotenv-dir", "/tmp/x"]).dotenv_dir == "/tmp/x"
    assert parse_args([]).dotenv_dir == "~/.config/todoist-mcp"


def test_main_exits_without_token(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TODOIST_API_TOKEN", raising=False)
    monkeypatch.setattr(main_module, "run", lambda settings: pytest.fail("server must not start"))

    with pytest.raises(SystemExit) as excinfo:
        main_module.main(["--dotenv-dir", str(tmp_path)])
    assert excinfo.value.code == 1

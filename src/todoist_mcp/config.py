import argparse
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence

from dotenv import dotenv_values

# --- Configuration --- (Argument Parsing and .env Handling)

DEFAULT_DOTENV_DIR = "~/.config/todoist-mcp"
DEFAULT_API_BASE_URL = "https://api.todoist.com/rest/v2"

TOKEN_ENV_VAR = "TODOIST_API_TOKEN"


class MissingCredentialError(Exception):
    """Raised when the Todoist API token cannot be found."""

    def __init__(self, env_var: str = TOKEN_ENV_VAR):
        self.env_var = env_var
        super().__init__(f"{env_var} environment variable is required")


@dataclass(frozen=True)
class Settings:
    api_token: str
    api_base_url: str = DEFAULT_API_BASE_URL
    transport: str = "stdio"
    port: int = 8000
    log_level: str = "INFO"


def setup_logging(level: str = "INFO") -> None:
    """Send all log output to stderr; stdout carries the MCP protocol."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Todoist MCP server, optionally specifying the directory for the .env file.")
    parser.add_argument(
        "--dotenv-dir",
        type=str,
        help=f"Path to the directory containing the .env file. Defaults to '{DEFAULT_DOTENV_DIR}'.",
        default=DEFAULT_DOTENV_DIR
    )
    return parser.parse_args(argv)


def _read_dotenv_file(dotenv_dir: str) -> dict:
    """Read variables from <dotenv_dir>/.env, or return {} if there is no such file."""
    dotenv_path = Path(dotenv_dir).expanduser() / ".env"

    if not dotenv_path.is_file():
        logging.info(f"No .env file found at {dotenv_path}")
        return {}

    values = {k: v for k, v in dotenv_values(dotenv_path).items() if v is not None}
    if values:
        logging.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logging.warning(f"No variables read from {dotenv_path}. Check file permissions and format.")
    return values


def load_settings(dotenv_dir: str = DEFAULT_DOTENV_DIR, environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build the server settings from the environment.

    If TODOIST_API_TOKEN is not already set (e.g. by a hosting platform or the
    MCP client config), the .env file in ``dotenv_dir`` is consulted. Values
    already present in the environment win over the file.

    Args:
        dotenv_dir: Directory that may contain a .env file
        environ: Environment mapping to read from (defaults to os.environ)

    Returns:
        Populated Settings

    Raises:
        MissingCredentialError: If no API token is available
    """
    env = dict(os.environ if environ is None else environ)

    if not env.get(TOKEN_ENV_VAR):
        logging.info(f"{TOKEN_ENV_VAR} not set, attempting to load from .env file...")
        env = {**_read_dotenv_file(dotenv_dir), **{k: v for k, v in env.items() if v}}

    token = env.get(TOKEN_ENV_VAR)
    if not token:
        raise MissingCredentialError()

    try:
        port = int(env.get("PORT", 8000))
    except ValueError:
        logging.warning(f"Ignoring invalid PORT value: {env.get('PORT')!r}")
        port = 8000

    return Settings(
        api_token=token,
        api_base_url=env.get("TODOIST_API_BASE_URL") or DEFAULT_API_BASE_URL,
        transport=env.get("MCP_TRANSPORT", "stdio"),
        port=port,
        log_level=env.get("LOG_LEVEL", "INFO"),
    )

import os

from dotenv import load_dotenv

from clippings_app.utils.paths import get_env_file

# Load .env file from project root (1 level up from clippings_app)
load_dotenv(get_env_file())

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8123
DEFAULT_LOG_LEVEL = "INFO"

def get_server_host() -> str:
    return os.getenv("CLIPPINGS_HOST", DEFAULT_HOST)

def get_server_port() -> int:
    """Port for the web server. Raises ValueError on a non-numeric value."""
    value = os.getenv("CLIPPINGS_PORT")
    if not value:
        return DEFAULT_PORT
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"CLIPPINGS_PORT must be an integer, got {value!r}") from None

def get_log_level() -> str:
    return os.getenv("CLIPPINGS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

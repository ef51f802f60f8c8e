"""Runtime configuration loaded from the environment and an optional .env file."""
import os
from pathlib import Path
from threading import Lock

STORAGE_KEY = "tea-gathering-attendees"

EVENT_NAME = "Tea Gathering"
EVENT_DATE_LINE = "19th July, 2025 | 5:00 PM"
EVENT_VENUE = "Auditorium, SUB"
CONTACT_EMAIL = "tea-gathering@stamford.edu"
TICKET_PREFIX = "TG-2025"

_ENV_KEYS = {"TEA_GATHERING_DATA_DIR", "TEA_GATHERING_LOG_LEVEL"}
_ENV_LOADED = False
_ENV_LOCK = Lock()


def load_env(env_path: Path = Path(".env")) -> None:
    """Load known settings from a .env file once, without overriding the environment."""
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        if env_path.exists():
            for raw_line in env_path.read_text(encoding="utf-8").splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"\'')

                if key in _ENV_KEYS and key not in os.environ:
                    os.environ[key] = value

        _ENV_LOADED = True


def get_data_dir() -> Path:
    """Directory holding the local attendee slot."""
    load_env()
    return Path(os.getenv("TEA_GATHERING_DATA_DIR", "data"))


def get_storage_path() -> Path:
    """Path of the JSON file backing the attendee store."""
    return get_data_dir() / f"{STORAGE_KEY}.json"


def get_log_level() -> str:
    """Logging level name, defaults to INFO."""
    load_env()
    return os.getenv("TEA_GATHERING_LOG_LEVEL", "INFO").upper()

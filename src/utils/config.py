"""Environment-backed configuration."""
import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock
from typing import Optional


DEFAULT_SENDGRID_API_URL = "https://api.sendgrid.com/v3/mail/send"
DEFAULT_ADMIN_EMAIL = "info@anyenv-inc.com"
DEFAULT_FROM_EMAIL = "noreply@anyenv-inc.com"
DEFAULT_REGISTRATIONS_FILE = "data/registrations.json"
DEFAULT_TIMEOUT = 5.0

_ENV_LOADED = False
_ENV_LOCK = Lock()


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    sendgrid_api_key: Optional[str]
    sendgrid_api_url: str
    sendgrid_timeout: float
    admin_email: str
    from_email: str
    registrations_file: str


def load_env_file(env_path: str = ".env") -> None:
    """
    Load KEY=VALUE pairs from a .env file into os.environ.

    Behavior:
        - Runs once per process
        - Skips blank lines and comments
        - Never overrides variables already present in the environment
    """
    global _ENV_LOADED

    if _ENV_LOADED:
        return

    with _ENV_LOCK:
        if _ENV_LOADED:
            return

        path = Path(env_path)
        if path.exists():
            for raw_line in path.read_text(encoding="utf-8").splitlines():
                line = raw_line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue

                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip().strip('"\'')

                if key and key not in os.environ:
                    os.environ[key] = value

        _ENV_LOADED = True


def _read_timeout() -> float:
    """
    SENDGRID_TIMEOUT in seconds, passed to requests as ``timeout=``.

    requests applies it to the connect and to each socket read, not to the
    whole call, so a provider trickling bytes can take longer in total.
    """
    raw = os.getenv("SENDGRID_TIMEOUT", "")
    try:
        timeout = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else DEFAULT_TIMEOUT


def get_settings() -> Settings:
    """
    Resolve settings from the environment at call time.

    Returns:
        Settings: current configuration; the API key is None when unset
    """
    load_env_file()

    return Settings(
        sendgrid_api_key=os.getenv("SENDGRID_API_KEY") or None,
        sendgrid_api_url=os.getenv("SENDGRID_API_URL", DEFAULT_SENDGRID_API_URL),
        sendgrid_timeout=_read_timeout(),
        admin_email=os.getenv("SEMINAR_ADMIN_EMAIL", DEFAULT_ADMIN_EMAIL),
        from_email=os.getenv("SEMINAR_FROM_EMAIL", DEFAULT_FROM_EMAIL),
        registrations_file=os.getenv("REGISTRATIONS_FILE", DEFAULT_REGISTRATIONS_FILE),
    )

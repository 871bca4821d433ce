"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_DB_PATH = "university.db"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True)
class Settings:
    """Settings for running the registry service.

    ``log_dir`` and ``log_level`` of None let ``setup_logging`` apply its
    own defaults.
    """

    db_path: str = DEFAULT_DB_PATH
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_dir: str | None = None
    log_level: str | None = None


def load_settings(**overrides: object) -> Settings:
    """Build Settings from UNIVERSITY_* environment variables.

    Args:
        **overrides: Field values that win over the environment. None values
            are ignored.

    Returns:
        The resolved settings.

    Raises:
        ValueError: If UNIVERSITY_PORT is not an integer, or an override
            names an unknown field.
    """
    env = os.environ
    values: dict[str, object] = {
        "db_path": env.get("UNIVERSITY_DB_PATH", DEFAULT_DB_PATH),
        "host": env.get("UNIVERSITY_HOST", DEFAULT_HOST),
        "port": int(env.get("UNIVERSITY_PORT", DEFAULT_PORT)),
        "log_dir": env.get("UNIVERSITY_LOG_DIR"),
        "log_level": env.get("UNIVERSITY_LOG_LEVEL"),
    }
    for key, value in overrides.items():
        if key not in values:
            raise ValueError(f"Unknown setting: {key}")
        if value is not None:
            values[key] = value
    return Settings(**values)  # type: ignore[arg-type]

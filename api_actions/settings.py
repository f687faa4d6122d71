"""Environment-driven configuration for action creators."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _read_separator(env_name: str, default: str) -> str:
    raw = os.getenv(env_name, "")
    if not raw.strip():
        return default
    if any(char.isspace() for char in raw):
        raise ValueError(f"{env_name} must not contain whitespace.")
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    """Container for the path separator used when building actions."""

    path_separator: str = "/"

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so projects can keep overrides in a local .env
        file. Unset or blank variables keep the defaults.
        """
        load_dotenv()

        return cls(
            path_separator=_read_separator("API_ACTION_PATH_SEPARATOR", "/"),
        )

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from ._utils.constants import (
    DEFAULT_TIMEOUT,
    ENV_BASE_URL,
    ENV_MAX_WORKERS,
    ENV_TIMEOUT,
)


class Config(BaseModel):
    base_url: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    max_workers: Optional[int] = None

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """Build a configuration from ``RESTWIRE_*`` environment variables.

        Args:
            dotenv_path: Optional ``.env`` file loaded before reading the
                environment. Its values override the process environment.
        """
        if dotenv_path is not None:
            load_dotenv(dotenv_path=dotenv_path, override=True)

        values: dict[str, str] = {}
        for field, env_var in (
            ("base_url", ENV_BASE_URL),
            ("timeout", ENV_TIMEOUT),
            ("max_workers", ENV_MAX_WORKERS),
        ):
            value = os.getenv(env_var)
            if value:
                values[field] = value

        return cls.model_validate(values)

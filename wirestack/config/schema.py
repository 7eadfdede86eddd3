"""Loader settings using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SCRIPT_NAME = "config.ws"


class LoaderSettings(BaseSettings):
    """Settings for locating and evaluating pipeline scripts.

    Read from ``WIRESTACK_*`` environment variables, e.g.
    ``WIRESTACK_SCRIPT_PATH=/srv/app/config.ws``.
    """

    model_config = SettingsConfigDict(env_prefix="WIRESTACK_", extra="ignore")

    script_path: Path = Field(default=Path(DEFAULT_SCRIPT_NAME))
    # Record run_after() hooks as post-request hooks called with (request).
    post_hooks: bool = False

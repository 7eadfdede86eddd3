"""Configuration module for wirestack."""

from wirestack.config.schema import DEFAULT_SCRIPT_NAME, LoaderSettings

__all__ = ["DEFAULT_SCRIPT_NAME", "LoaderSettings"]

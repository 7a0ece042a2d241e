"""Common utility functions for integrations."""

import os


def getenv(key: str, default: str | None = None) -> str:
    """
    Get a configuration value from the environment.

    Raises KeyError if the variable is not set and no default is given.
    """
    if value := os.getenv(key):
        return value

    if default is not None:
        return default

    raise KeyError(f"Environment variable {key} not set")

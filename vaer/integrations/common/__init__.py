"""Common utilities for integrations."""

from .exceptions import IntegrationAPIError
from .utils import getenv

__all__ = [
    "IntegrationAPIError",
    "getenv",
]

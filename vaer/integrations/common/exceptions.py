"""Common exception classes for integrations."""


class IntegrationAPIError(Exception):
    """Base exception for all weather provider API errors."""

    pass

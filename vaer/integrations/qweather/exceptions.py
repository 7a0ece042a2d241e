from ..common.exceptions import IntegrationAPIError


class QWeatherAPIError(IntegrationAPIError):
    """QWeather returned something other than 200 in the response body."""

    def __init__(self, message: str, *, code: int) -> None:
        super().__init__(message)
        self.code = code


class NoData(QWeatherAPIError):
    """The request succeeded, but there is no data for the location."""

    pass


class InvalidRequest(QWeatherAPIError):
    """Bad parameters or an unknown location."""

    pass


class InvalidCredentials(QWeatherAPIError):
    """The signature, key or public id was rejected."""

    pass


class QuotaExceeded(QWeatherAPIError):
    """Out of credits, or too many requests."""

    pass

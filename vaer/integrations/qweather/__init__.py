"""QWeather (https://dev.qweather.com) weather strategy."""

from .client import QWeatherClient
from .exceptions import (
    InvalidCredentials,
    InvalidRequest,
    NoData,
    QuotaExceeded,
    QWeatherAPIError,
)
from .signing import sign_params

__all__ = [
    "InvalidCredentials",
    "InvalidRequest",
    "NoData",
    "QWeatherAPIError",
    "QWeatherClient",
    "QuotaExceeded",
    "sign_params",
]

import asyncio
from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, Self

import httpx
import structlog

from ...utils import timed
from ...weather.base import WeatherStrategy
from ...weather.types import (
    Air,
    DailyItem,
    FuturePrecip,
    LivingIndex,
    Location,
    Moon,
    Sun,
    Weather,
    WeatherItem,
    WeatherWarning,
)
from ..common import getenv
from . import handlers
from .exceptions import (
    InvalidCredentials,
    InvalidRequest,
    NoData,
    QuotaExceeded,
    QWeatherAPIError,
)
from .signing import sign_params
from .types import (
    LANGUAGES,
    STATUS_MESSAGES,
    UNKNOWN_STATUS_MESSAGE,
    Endpoint,
    RequestData,
    ResponseEnvelope,
)

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://devapi.qweather.com/v7/"

EXCEPTIONS: Mapping[int, type[QWeatherAPIError]] = {
    204: NoData,
    400: InvalidRequest,
    401: InvalidCredentials,
    402: QuotaExceeded,
    403: InvalidCredentials,
    404: InvalidRequest,
    429: QuotaExceeded,
}


class QWeatherClient(WeatherStrategy):
    """
    A weather strategy backed by the QWeather v7 API.

    Credentials are read from QWEATHER_PUBLIC_ID and QWEATHER_PRIVATE_KEY
    unless given explicitly. The optional `notify` callable is called with a
    human readable message whenever the API reports an error.
    """

    def __init__(
        self,
        *,
        private_key: str | None = None,
        public_id: str | None = None,
        lang: str = "zh",
        base_url: str | None = None,
        notify: Callable[[str], None] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.private_key = private_key or getenv("QWEATHER_PRIVATE_KEY")
        self.public_id = public_id or getenv("QWEATHER_PUBLIC_ID")
        self.base_url = base_url or getenv("QWEATHER_BASE_URL", DEFAULT_BASE_URL)
        self.notify = notify
        self.client = client
        self._lang = lang

    async def close(self) -> None:
        if self.client:
            await self.client.aclose()
            self.client = None

    ############
    # Language #
    ############

    @property
    def language(self) -> str:
        return self._lang

    @language.setter
    def language(self, locale: str) -> None:
        # Unsupported locales are a configuration error
        self._lang = LANGUAGES[locale]

    ###############
    # Air & astro #
    ###############

    async def get_air(self, location: Location) -> Air:
        res = await self.request("air/now", {"location": str(location)})
        return handlers.parse_air(res["now"])

    async def get_sun_time(self, location: Location, date: str | None = None) -> Sun:
        res = await self.request(
            "astronomy/sun",
            {"location": str(location), "date": date or today()},
        )
        return handlers.parse_sun(res)

    async def get_moon_time(
        self, location: Location, date: str | None = None
    ) -> Moon:
        res = await self.request(
            "astronomy/moon",
            {"location": str(location), "date": date or today()},
        )
        return handlers.parse_moon(res)

    ######################
    # Warnings & indices #
    ######################

    async def get_disaster_warning(self, location: Location) -> list[WeatherWarning]:
        res = await self.request("warning/now", {"location": str(location)})
        return handlers.parse_warnings(res.get("warning"))

    async def get_living_indices(
        self, location: Location, type: int = 0
    ) -> list[LivingIndex]:
        """
        Get today's living indices. Type 0 returns every index available
        for the location.
        """
        res = await self.request(
            "indices/1d", {"location": str(location), "type": type}
        )
        return handlers.parse_indices(res["daily"])

    ############
    # Forecast #
    ############

    async def get_precipitation_in_the_next_two_hours(
        self, location: Location
    ) -> FuturePrecip:
        res = await self.request("minutely/5m", {"location": str(location)})
        return handlers.parse_precipitation(res)

    async def get_weather_by_hours(self, location: Location) -> list[WeatherItem]:
        res = await self.request("weather/24h", {"location": str(location)})
        return handlers.parse_hourly(res["hourly"])

    async def get_weather_by_days(self, location: Location) -> list[DailyItem]:
        res = await self.request("weather/7d", {"location": str(location)})
        envelope = ResponseEnvelope.model_validate(res)
        tz = envelope.update_time.tzinfo if envelope.update_time else None
        return handlers.parse_daily(res["daily"], tz)

    async def get_now_weather(self, location: Location) -> WeatherItem:
        res = await self.request("weather/now", {"location": str(location)})
        return handlers.parse_now(res["now"])

    async def get_weather(self, location: Location) -> Weather | None:
        """
        Fetch everything for a location concurrently.

        If any of the requests fail the rest are cancelled and nothing is
        returned, partial results are discarded.
        """

        try:
            async with asyncio.TaskGroup() as tg:
                air = tg.create_task(self.get_air(location))
                sun = tg.create_task(self.get_sun_time(location))
                moon = tg.create_task(self.get_moon_time(location))
                warnings = tg.create_task(self.get_disaster_warning(location))
                living_indices = tg.create_task(self.get_living_indices(location))
                precip = tg.create_task(
                    self.get_precipitation_in_the_next_two_hours(location)
                )
                hourly = tg.create_task(self.get_weather_by_hours(location))
                daily = tg.create_task(self.get_weather_by_days(location))
                now = tg.create_task(self.get_now_weather(location))
        except ExceptionGroup as e:
            logger.warning(
                "Failed to fetch weather",
                location=str(location),
                errors=[repr(error) for error in e.exceptions],
            )
            return None

        return Weather(
            location=location,
            air=air.result(),
            sun=sun.result(),
            moon=moon.result(),
            warnings=warnings.result(),
            living_indices=living_indices.result(),
            precip=precip.result(),
            hourly=hourly.result(),
            daily=daily.result(),
            now=now.result(),
        )

    ###################
    # Context manager #
    ###################

    async def __aenter__(self) -> Self:
        if not self.client:
            self.client = httpx.AsyncClient()
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    ####################
    # Internal helpers #
    ####################

    async def request(
        self,
        endpoint: Endpoint,
        data: RequestData | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        """
        Issue a signed GET request and return the decoded response body.
        """
        if not self.client:
            self.client = httpx.AsyncClient()

        params = sign_params(
            {"lang": self._lang, **(data or {})},
            public_id=self.public_id,
            private_key=self.private_key,
        )

        with timed("QWeather request", endpoint=endpoint):
            response = await self.client.get(
                self.base_url.rstrip("/") + "/" + endpoint,
                params=params,
                headers=headers,
            )

        return self._check_response(response)

    def _check_response(self, response: httpx.Response) -> dict[str, Any]:
        response.raise_for_status()

        data = response.json()
        envelope = ResponseEnvelope.model_validate(data)

        if envelope.code != 200:
            message = STATUS_MESSAGES.get(envelope.code, UNKNOWN_STATUS_MESSAGE)
            logger.warning(
                "Unexpected response from QWeather API",
                code=envelope.code,
                message=message,
            )
            if self.notify:
                self.notify(message)

            exception = EXCEPTIONS.get(envelope.code, QWeatherAPIError)
            raise exception(message, code=envelope.code)

        return data


def today() -> str:
    return date.today().strftime("%Y%m%d")

from abc import ABC, abstractmethod

from .types import (
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

# Locales the application can be displayed in
LOCALES = ("zh-CN", "zh-TW", "en-US", "en-GB")


class WeatherStrategy(ABC):
    """
    The contract every weather provider implements.

    Strategies are interchangeable: the application only talks to this
    interface and never to a provider's API directly.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """The provider specific language code used for requests."""
        ...

    @language.setter
    @abstractmethod
    def language(self, locale: str) -> None:
        """Switch the language used for requests to the given locale."""
        ...

    @abstractmethod
    async def get_air(self, location: Location) -> Air: ...

    @abstractmethod
    async def get_sun_time(self, location: Location, date: str | None = None) -> Sun:
        ...

    @abstractmethod
    async def get_moon_time(
        self, location: Location, date: str | None = None
    ) -> Moon: ...

    @abstractmethod
    async def get_disaster_warning(
        self, location: Location
    ) -> list[WeatherWarning]: ...

    @abstractmethod
    async def get_living_indices(
        self, location: Location, type: int = 0
    ) -> list[LivingIndex]: ...

    @abstractmethod
    async def get_precipitation_in_the_next_two_hours(
        self, location: Location
    ) -> FuturePrecip: ...

    @abstractmethod
    async def get_weather_by_hours(self, location: Location) -> list[WeatherItem]:
        ...

    @abstractmethod
    async def get_weather_by_days(self, location: Location) -> list[DailyItem]: ...

    @abstractmethod
    async def get_now_weather(self, location: Location) -> WeatherItem: ...

    @abstractmethod
    async def get_weather(self, location: Location) -> Weather | None:
        """
        Fetch everything for a location. Returns None if anything failed.
        """
        ...

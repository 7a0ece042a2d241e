"""
Provider independent weather data model.

All weather strategies normalize their responses into these models, so the
rest of the application never has to deal with provider specific payloads.
"""

from datetime import date, datetime
from typing import Self

from pydantic import BaseModel, ConfigDict, model_validator


class Record(BaseModel):
    model_config = ConfigDict(frozen=True)


############
# Location #
############


class Location(Record):
    """
    A place to fetch weather for, either a coordinate or a provider id.
    """

    longitude: float | None = None
    latitude: float | None = None
    id: str | None = None

    @model_validator(mode="after")
    def check_coordinate_or_id(self) -> Self:
        has_coordinate = self.longitude is not None and self.latitude is not None
        if not has_coordinate and not self.id:
            raise ValueError("Location needs either a coordinate or an id")
        return self

    @classmethod
    def parse(cls, value: str) -> Self:
        """
        Parse "<lon>,<lat>" or a bare location id.
        """
        if "," in value:
            longitude, latitude = value.split(",", 1)
            return cls(longitude=float(longitude), latitude=float(latitude))
        return cls(id=value.strip())

    def __str__(self) -> str:
        if self.id:
            return self.id
        return f"{self.longitude:.2f},{self.latitude:.2f}"


###############
# Air quality #
###############


class AirComponents(Record):
    pm10: float
    pm2p5: float
    no2: float
    so2: float
    co: float
    o3: float


class Air(Record):
    date_time: datetime
    aqi: int
    level: int
    category: str
    components: AirComponents


#############
# Astronomy #
#############


class Sun(Record):
    # None during polar day or night
    sun_rise: datetime | None
    sun_set: datetime | None


class MoonPhase(Record):
    date_time: datetime
    value: float
    name: str
    illumination: float
    icon: str


class Moon(Record):
    moon_rise: datetime | None
    moon_set: datetime | None
    moon_phase: list[MoonPhase]


class DailyMoonPhase(Record):
    name: str
    icon: str


class DailyMoon(Record):
    moon_rise: datetime | None
    moon_set: datetime | None
    moon_phase: DailyMoonPhase


############
# Warnings #
############


class WeatherWarning(Record):
    date_time: datetime
    start: datetime | None
    end: datetime | None
    description: str
    title: str
    status: str
    level: str
    type: str
    type_name: str
    sender: str


class LivingIndex(Record):
    type: int
    name: str
    level: int
    category: str
    description: str


#################
# Precipitation #
#################


class Precip(Record):
    date_time: datetime
    precip: float
    type: str


class FuturePrecip(Record):
    summary: str
    # Empty when no precipitation is expected at all
    minutely: list[Precip]


############
# Forecast #
############


class Wind(Record):
    wind360: float
    wind_dir: str
    wind_scale: str
    wind_speed: float


class WeatherItem(Record):
    """A single observation or hourly forecast."""

    date_time: datetime
    temperature: float
    feels_like: float | None = None
    humidity: float
    precip: float
    pressure: float
    description: str
    icon: str
    wind: Wind
    clouds: float | None = None
    dew_point: float | None = None
    pop: float | None = None
    visibility: float | None = None


class DailyItem(Record):
    """A single day in a multi day forecast."""

    date_time: date
    sun: Sun
    moon: DailyMoon
    temp_min: float
    temp_max: float
    day_icon: str
    day_description: str
    day_wind: Wind
    night_icon: str
    night_description: str
    night_wind: Wind
    humidity: float
    precip: float
    pressure: float
    visibility: float
    clouds: float | None = None
    uv_index: float


class Weather(Record):
    """Everything a strategy knows about a location, fetched in one go."""

    location: Location
    air: Air
    sun: Sun
    moon: Moon
    warnings: list[WeatherWarning]
    living_indices: list[LivingIndex]
    precip: FuturePrecip
    hourly: list[WeatherItem]
    daily: list[DailyItem]
    now: WeatherItem

"""
Map raw QWeather responses to the weather data model.

Every function here is pure: it takes the decoded JSON of one endpoint (or
the relevant part of it) and returns the matching model. QWeather sends
almost all numbers as strings, so everything numeric is converted before it
ends up in a model.
"""

from datetime import date, datetime, tzinfo
from typing import Any

from ...weather.types import (
    Air,
    AirComponents,
    DailyItem,
    DailyMoon,
    DailyMoonPhase,
    FuturePrecip,
    LivingIndex,
    Moon,
    MoonPhase,
    Precip,
    Sun,
    WeatherItem,
    WeatherWarning,
    Wind,
)

DEFAULT_SENDER = "暂无发布单位"
INDEX_SUFFIX = "指数"
NO_PRECIPITATION = "0.0"


###########
# Helpers #
###########


def to_float(value: Any) -> float | None:
    """Optional numeric fields are sent as empty strings when missing."""
    if value is None or value == "":
        return None
    return float(value)


def to_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value)


def combine(day: str, time: str | None, tz: tzinfo | None) -> datetime | None:
    """
    Combine a date ("2024-01-01") and a time of day ("06:58") in the
    location's timezone. The time is empty when there is no sun or moon
    rise/set that day.
    """
    if not time:
        return None
    return datetime.fromisoformat(f"{day}T{time}").replace(tzinfo=tz)


def parse_wind(res: dict[str, Any], suffix: str = "") -> Wind:
    return Wind(
        wind360=float(res[f"wind360{suffix}"]),
        wind_dir=res[f"windDir{suffix}"],
        wind_scale=res[f"windScale{suffix}"],
        wind_speed=float(res[f"windSpeed{suffix}"]),
    )


#############
# Endpoints #
#############


def parse_air(res: dict[str, Any]) -> Air:
    return Air(
        date_time=datetime.fromisoformat(res["pubTime"]),
        aqi=int(res["aqi"]),
        level=int(res["level"]),
        category=res["category"],
        components=AirComponents(
            pm10=float(res["pm10"]),
            pm2p5=float(res["pm2p5"]),
            no2=float(res["no2"]),
            so2=float(res["so2"]),
            co=float(res["co"]),
            o3=float(res["o3"]),
        ),
    )


def parse_sun(res: dict[str, Any]) -> Sun:
    return Sun(
        sun_rise=to_datetime(res.get("sunrise")),
        sun_set=to_datetime(res.get("sunset")),
    )


def parse_moon(res: dict[str, Any]) -> Moon:
    return Moon(
        moon_rise=to_datetime(res.get("moonrise")),
        moon_set=to_datetime(res.get("moonset")),
        moon_phase=[
            MoonPhase(
                date_time=datetime.fromisoformat(phase["fxTime"]),
                value=float(phase["value"]),
                name=phase["name"],
                illumination=float(phase["illumination"]),
                icon=phase["icon"],
            )
            for phase in res["moonPhase"]
        ],
    )


def parse_warnings(res: list[dict[str, Any]] | None) -> list[WeatherWarning]:
    """
    Map active warnings. The list is left out of the response entirely when
    there are no warnings for the location.
    """

    if res is None:
        return []

    return [
        WeatherWarning(
            date_time=datetime.fromisoformat(warning["pubTime"]),
            start=to_datetime(warning.get("startTime")),
            end=to_datetime(warning.get("endTime")),
            description=warning["text"],
            title=warning["title"],
            status=warning["status"],
            level=warning["level"],
            type=warning["type"],
            type_name=warning["typeName"],
            sender=(
                DEFAULT_SENDER
                if warning.get("sender") is None
                else warning["sender"]
            ),
        )
        for warning in res
    ]


def parse_indices(res: list[dict[str, Any]]) -> list[LivingIndex]:
    return [
        LivingIndex(
            type=int(index["type"]),
            name=index["name"].replace(INDEX_SUFFIX, "", 1),
            level=int(index["level"]),
            category=index["category"],
            description=index["text"],
        )
        for index in res
    ]


def parse_precipitation(res: dict[str, Any]) -> FuturePrecip:
    minutely = res["minutely"]
    no_precipitation = all(e["precip"] == NO_PRECIPITATION for e in minutely)

    return FuturePrecip(
        summary=res["summary"],
        minutely=(
            []
            if no_precipitation
            else [
                Precip(
                    date_time=datetime.fromisoformat(e["fxTime"]),
                    precip=float(e["precip"]),
                    type=e["type"],
                )
                for e in minutely
            ]
        ),
    )


def parse_hourly(res: list[dict[str, Any]]) -> list[WeatherItem]:
    return [
        WeatherItem(
            date_time=datetime.fromisoformat(e["fxTime"]),
            temperature=float(e["temp"]),
            humidity=float(e["humidity"]),
            precip=float(e["precip"]),
            pressure=float(e["pressure"]),
            description=e["text"],
            icon=e["icon"],
            wind=parse_wind(e),
            clouds=to_float(e.get("cloud")),
            dew_point=to_float(e.get("dew")),
            pop=to_float(e.get("pop")),
        )
        for e in res
    ]


def parse_daily(
    res: list[dict[str, Any]], tz: tzinfo | None = None
) -> list[DailyItem]:
    """
    Map the daily forecast. Sun and moon times are only sent as a time of
    day, `tz` is the timezone of the location they are attached to.
    """

    items = []
    for e in res:
        day = e["fxDate"]
        items.append(
            DailyItem(
                date_time=date.fromisoformat(day),
                sun=Sun(
                    sun_rise=combine(day, e.get("sunrise"), tz),
                    sun_set=combine(day, e.get("sunset"), tz),
                ),
                moon=DailyMoon(
                    moon_rise=combine(day, e.get("moonrise"), tz),
                    moon_set=combine(day, e.get("moonset"), tz),
                    moon_phase=DailyMoonPhase(
                        name=e["moonPhase"], icon=e["moonPhaseIcon"]
                    ),
                ),
                temp_min=float(e["tempMin"]),
                temp_max=float(e["tempMax"]),
                day_icon=e["iconDay"],
                day_description=e["textDay"],
                day_wind=parse_wind(e, "Day"),
                night_icon=e["iconNight"],
                night_description=e["textNight"],
                night_wind=parse_wind(e, "Night"),
                humidity=float(e["humidity"]),
                precip=float(e["precip"]),
                pressure=float(e["pressure"]),
                visibility=float(e["vis"]),
                clouds=to_float(e.get("cloud")),
                uv_index=float(e["uvIndex"]),
            )
        )

    return items


def parse_now(res: dict[str, Any]) -> WeatherItem:
    return WeatherItem(
        date_time=datetime.fromisoformat(res["obsTime"]),
        temperature=float(res["temp"]),
        feels_like=float(res["feelsLike"]),
        humidity=float(res["humidity"]),
        precip=float(res["precip"]),
        pressure=float(res["pressure"]),
        description=res["text"],
        icon=res["icon"],
        wind=parse_wind(res),
        visibility=float(res["vis"]),
        clouds=to_float(res.get("cloud")),
        dew_point=to_float(res.get("dew")),
    )

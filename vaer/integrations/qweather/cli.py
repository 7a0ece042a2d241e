import click

from ...weather.base import LOCALES
from ...weather.types import Location, Weather, WeatherItem
from .client import QWeatherClient


def parse_location(ctx: click.Context, param: click.Parameter, value: str) -> Location:
    try:
        return Location.parse(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


def location_argument(func):
    return click.argument("location", callback=parse_location)(func)


def lang_option(func):
    return click.option(
        "--lang",
        type=click.Choice(LOCALES),
        default="zh-CN",
        show_default=True,
        help="Language to get descriptions in",
    )(func)


def get_client(lang: str) -> QWeatherClient:
    client = QWeatherClient(notify=lambda message: click.echo(message, err=True))
    client.language = lang
    return client


def echo_item(item: WeatherItem) -> None:
    click.echo(
        f"{item.date_time:%Y-%m-%d %H:%M}  {item.temperature:>5.1f}°C  "
        f"{item.description}  {item.wind.wind_dir} {item.wind.wind_scale}"
    )


@click.group(name="qweather", help="Fetch weather from QWeather")
def cli() -> None:
    pass


@cli.command(help="Show current weather conditions")
@location_argument
@lang_option
async def now(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        item = await client.get_now_weather(location)

    echo_item(item)
    if item.feels_like is not None:
        click.echo(f"Feels like {item.feels_like:.1f}°C")


@cli.command(help="Show the air quality")
@location_argument
@lang_option
async def air(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        result = await client.get_air(location)

    click.echo(f"AQI {result.aqi} ({result.category}), level {result.level}")
    for name, value in result.components.model_dump().items():
        click.echo(f"  {name:<6} {value}")


@cli.command(help="Show the 24 hour forecast")
@location_argument
@lang_option
async def hourly(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        items = await client.get_weather_by_hours(location)

    for item in items:
        echo_item(item)


@cli.command(help="Show the 7 day forecast")
@location_argument
@lang_option
async def daily(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        items = await client.get_weather_by_days(location)

    for item in items:
        click.echo(
            f"{item.date_time}  {item.temp_min:>5.1f} - {item.temp_max:<5.1f}°C  "
            f"{item.day_description} / {item.night_description}"
        )


@cli.command(help="Show active weather warnings")
@location_argument
@lang_option
async def warnings(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        result = await client.get_disaster_warning(location)

    if not result:
        click.echo("No active warnings")

    for warning in result:
        click.echo(f"[{warning.level}] {warning.title} ({warning.sender})")
        click.echo(f"  {warning.description}")


@cli.command(help="Show today's living indices")
@location_argument
@lang_option
@click.option("--type", "index_type", type=int, default=0, help="Index type, 0 for all")
async def indices(*, location: Location, lang: str, index_type: int) -> None:
    async with get_client(lang) as client:
        result = await client.get_living_indices(location, index_type)

    for index in result:
        click.echo(f"{index.name}: {index.category}")


@cli.command(help="Show precipitation for the next two hours")
@location_argument
@lang_option
async def precip(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        result = await client.get_precipitation_in_the_next_two_hours(location)

    click.echo(result.summary)
    for sample in result.minutely:
        click.echo(f"{sample.date_time:%H:%M}  {sample.precip:.2f} mm  {sample.type}")


@cli.command(help="Show sun and moon rise and set times")
@location_argument
@lang_option
@click.option("--date", help="Date as YYYYMMDD, defaults to today")
async def astronomy(*, location: Location, lang: str, date: str | None) -> None:
    async with get_client(lang) as client:
        sun = await client.get_sun_time(location, date)
        moon = await client.get_moon_time(location, date)

    click.echo(f"Sunrise {sun.sun_rise}, sunset {sun.sun_set}")
    click.echo(f"Moonrise {moon.moon_rise}, moonset {moon.moon_set}")
    for phase in moon.moon_phase:
        click.echo(f"  {phase.date_time:%H:%M}  {phase.name} ({phase.illumination}%)")


@cli.command(name="all", help="Fetch everything and print it as JSON")
@location_argument
@lang_option
async def all_(*, location: Location, lang: str) -> None:
    async with get_client(lang) as client:
        weather: Weather | None = await client.get_weather(location)

    if weather is None:
        click.echo("Failed to fetch weather", err=True)
        raise SystemExit(1)

    click.echo(weather.model_dump_json(indent=2))

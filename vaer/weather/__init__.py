"""Provider independent weather model and strategy contract."""

from .base import WeatherStrategy
from .types import Location, Weather

__all__ = [
    "Location",
    "Weather",
    "WeatherStrategy",
]

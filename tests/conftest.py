from __future__ import annotations

import logging
import os

import pytest

from vaer.weather.types import Location


def pytest_configure(config: pytest.Config) -> None:
    os.environ.setdefault("QWEATHER_PUBLIC_ID", "HE0000000000000000")
    os.environ.setdefault("QWEATHER_PRIVATE_KEY", "foo")


def pytest_sessionfinish() -> None:
    """
    Silence exceptions raised when logging during atexit callbacks
    """

    logging.raiseExceptions = False


############
# Location #
############


@pytest.fixture
def coordinate() -> tuple[float, float]:
    # Beijing, as (longitude, latitude)
    return (116.41, 39.92)


@pytest.fixture
def location(coordinate: tuple[float, float]) -> Location:
    longitude, latitude = coordinate
    return Location(longitude=longitude, latitude=latitude)


###############
# Credentials #
###############


@pytest.fixture
def public_id() -> str:
    return "HE2105141711371234"


@pytest.fixture
def private_key() -> str:
    return "2a4c5d8e9f0b1c3d5e7f9a1b3c5d7e9f"

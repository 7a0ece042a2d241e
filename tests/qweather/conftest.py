from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest

from vaer.integrations.qweather.client import QWeatherClient

BASE_URL = "https://api.example.com/v7/"


############
# Payloads #
############


@pytest.fixture
def air_now() -> dict[str, Any]:
    return {
        "pubTime": "2024-01-01T00:00+08:00",
        "aqi": "42",
        "level": "2",
        "category": "良",
        "primary": "NA",
        "pm10": "30",
        "pm2p5": "15",
        "no2": "10",
        "so2": "5",
        "co": "0.5",
        "o3": "60",
    }


@pytest.fixture
def sun_response() -> dict[str, Any]:
    return {
        "code": "200",
        "updateTime": "2024-01-01T00:00+08:00",
        "fxLink": "https://www.qweather.com",
        "sunrise": "2024-01-01T07:36+08:00",
        "sunset": "2024-01-01T16:59+08:00",
    }


@pytest.fixture
def moon_response() -> dict[str, Any]:
    return {
        "code": "200",
        "updateTime": "2024-01-01T00:00+08:00",
        "moonrise": "2024-01-01T21:13+08:00",
        "moonset": "2024-01-01T10:33+08:00",
        "moonPhase": [
            {
                "fxTime": "2024-01-01T00:00+08:00",
                "value": "0.65",
                "name": "亏凸月",
                "illumination": "80",
                "icon": "805",
            },
            {
                "fxTime": "2024-01-01T01:00+08:00",
                "value": "0.66",
                "name": "亏凸月",
                "illumination": "79",
                "icon": "805",
            },
        ],
    }


@pytest.fixture
def warning() -> dict[str, Any]:
    return {
        "id": "10101010020240101000000000000",
        "sender": "北京市气象台",
        "pubTime": "2024-01-01T08:00+08:00",
        "title": "北京市气象台发布大风蓝色预警",
        "startTime": "2024-01-01T08:00+08:00",
        "endTime": "2024-01-02T08:00+08:00",
        "status": "active",
        "level": "蓝色",
        "type": "11B06",
        "typeName": "大风",
        "text": "预计今天白天本市大部分地区有4级左右偏北风，阵风7级左右。",
    }


@pytest.fixture
def index() -> dict[str, Any]:
    return {
        "date": "2024-01-01",
        "type": "1",
        "name": "运动指数",
        "level": "3",
        "category": "较不宜",
        "text": "天气较好，但风力较大，推荐您进行室内运动。",
    }


def precip_sample(time: str, precip: str) -> dict[str, Any]:
    return {"fxTime": f"2024-01-01T{time}+08:00", "precip": precip, "type": "rain"}


@pytest.fixture
def minutely_response() -> dict[str, Any]:
    return {
        "code": "200",
        "summary": "10分钟后雨停",
        "minutely": [
            precip_sample("10:00", "0.12"),
            precip_sample("10:05", "0.05"),
            precip_sample("10:10", "0.0"),
        ],
    }


@pytest.fixture
def hour() -> dict[str, Any]:
    return {
        "fxTime": "2024-01-01T10:00+08:00",
        "temp": "2",
        "icon": "100",
        "text": "晴",
        "wind360": "350",
        "windDir": "北风",
        "windScale": "3-4",
        "windSpeed": "16",
        "humidity": "21",
        "pop": "0",
        "precip": "0.0",
        "pressure": "1028",
        "cloud": "0",
        "dew": "-18",
    }


@pytest.fixture
def day() -> dict[str, Any]:
    return {
        "fxDate": "2024-01-01",
        "sunrise": "07:36",
        "sunset": "16:59",
        "moonrise": "21:13",
        "moonset": "10:33",
        "moonPhase": "亏凸月",
        "moonPhaseIcon": "805",
        "tempMax": "4",
        "tempMin": "-7",
        "iconDay": "100",
        "textDay": "晴",
        "iconNight": "150",
        "textNight": "晴",
        "wind360Day": "315",
        "windDirDay": "西北风",
        "windScaleDay": "3-4",
        "windSpeedDay": "16",
        "wind360Night": "0",
        "windDirNight": "北风",
        "windScaleNight": "1-2",
        "windSpeedNight": "3",
        "humidity": "18",
        "precip": "0.0",
        "pressure": "1030",
        "vis": "25",
        "cloud": "0",
        "uvIndex": "2",
    }


@pytest.fixture
def now_payload() -> dict[str, Any]:
    return {
        "obsTime": "2024-01-01T10:00+08:00",
        "temp": "1",
        "feelsLike": "-4",
        "icon": "100",
        "text": "晴",
        "wind360": "338",
        "windDir": "西北风",
        "windScale": "3",
        "windSpeed": "14",
        "humidity": "22",
        "precip": "0.0",
        "pressure": "1029",
        "vis": "30",
        "cloud": "",
        "dew": "-19",
    }


@pytest.fixture
def responses(
    air_now: dict[str, Any],
    sun_response: dict[str, Any],
    moon_response: dict[str, Any],
    warning: dict[str, Any],
    index: dict[str, Any],
    minutely_response: dict[str, Any],
    hour: dict[str, Any],
    day: dict[str, Any],
    now_payload: dict[str, Any],
) -> dict[str, dict[str, Any]]:
    """
    Response bodies by endpoint, as returned by the QWeather API.
    """
    return {
        "air/now": {"code": "200", "now": air_now},
        "astronomy/sun": sun_response,
        "astronomy/moon": moon_response,
        "warning/now": {"code": "200", "warning": [warning]},
        "indices/1d": {"code": "200", "daily": [index]},
        "minutely/5m": minutely_response,
        "weather/24h": {"code": "200", "hourly": [hour, hour]},
        "weather/7d": {
            "code": "200",
            "updateTime": "2024-01-01T08:35+08:00",
            "daily": [day],
        },
        "weather/now": {"code": "200", "now": now_payload},
    }


##########
# Client #
##########


@pytest.fixture
def requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def transport(
    responses: dict[str, dict[str, Any]], requests: list[httpx.Request]
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        endpoint = request.url.path.removeprefix("/v7/")
        return httpx.Response(200, json=responses[endpoint])

    return httpx.MockTransport(handler)


@pytest.fixture
async def client(
    transport: httpx.MockTransport, public_id: str, private_key: str
) -> AsyncIterator[QWeatherClient]:
    async with QWeatherClient(
        public_id=public_id,
        private_key=private_key,
        base_url=BASE_URL,
        client=httpx.AsyncClient(transport=transport),
    ) as c:
        yield c

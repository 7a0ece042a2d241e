from datetime import datetime
from types import MappingProxyType
from typing import Any, Literal, Optional, TypedDict

from pydantic import BaseModel, ConfigDict, field_validator

###########
# Helpers #
###########


def to_camel(name: str) -> str:
    first, *rest = name.split("_")
    return f"{first}{''.join(word.capitalize() for word in rest)}"


##########
# Tables #
##########

# Application locale to QWeather language code
LANGUAGES = MappingProxyType(
    {
        "zh-CN": "zh",
        "zh-TW": "zh-hant",
        "en-US": "en",
        "en-GB": "en",
    }
)

STATUS_MESSAGES = MappingProxyType(
    {
        200: "请求成功",
        204: "请求成功，但你查询的地区暂时没有你需要的数据",
        400: "请求错误，可能包含错误的请求参数或缺少必选的请求参数",
        401: "认证失败，可能使用了错误的KEY、数字签名错误、KEY的类型错误",
        402: "超过访问次数或余额不足以支持继续访问服务",
        403: "无访问权限，可能是绑定的PackageName、BundleID、域名IP地址不一致，或者是需要额外付费的数据",
        404: "查询的数据或地区不存在",
        429: "超过限定的QPM",
        500: "无响应或超时，接口服务异常",
    }
)

UNKNOWN_STATUS_MESSAGE = "未知错误"


#################
# Request types #
#################


Endpoint = Literal[
    "air/now",
    "astronomy/sun",
    "astronomy/moon",
    "warning/now",
    "indices/1d",
    "minutely/5m",
    "weather/24h",
    "weather/7d",
    "weather/now",
]


class LocationData(TypedDict):
    location: str


class AstronomyData(TypedDict):
    location: str
    date: str


class IndicesData(TypedDict):
    location: str
    type: int


RequestData = LocationData | AstronomyData | IndicesData


##################
# Response types #
##################


class ResponseEnvelope(BaseModel):
    """
    The fields every QWeather response carries. The payload itself differs
    per endpoint and is passed on untouched.
    """

    code: int
    # Carries the UTC offset of the requested location
    update_time: Optional[datetime] = None

    @field_validator("update_time", mode="before")
    def update_time_ignore_empty_string(cls, v: Any) -> Any:
        return None if v == "" else v

    model_config = ConfigDict(alias_generator=to_camel, extra="allow")

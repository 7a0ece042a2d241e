import hashlib
import time
from collections.abc import Mapping
from typing import Any


def sign_params(
    params: Mapping[str, Any],
    *,
    public_id: str,
    private_key: str,
    timestamp: int | None = None,
) -> dict[str, str]:
    """
    Sign request parameters for the QWeather API.

    The current timestamp and the public id are added to the parameters,
    which are then sorted by key and joined as "key=value" pairs separated
    by "&". The private key is appended and the MD5 digest of the result is
    added as the "sign" parameter. The private key itself is never included
    in the returned parameters.
    """

    if timestamp is None:
        timestamp = round(time.time())

    signed = {key: str(value) for key, value in params.items()}
    signed["t"] = str(timestamp)
    signed["publicid"] = public_id

    value = "&".join(f"{key}={signed[key]}" for key in sorted(signed))
    value += private_key

    signed["sign"] = hashlib.md5(value.encode()).hexdigest()
    return signed

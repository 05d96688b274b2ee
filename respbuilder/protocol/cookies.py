"""
Rendering of Set-Cookie header values
"""
from datetime import datetime
from datetime import timezone
from typing import Mapping
from typing import Sequence
from typing import Union
from urllib.parse import quote_plus

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

EXPIRES_FORMAT = "%a, %d %b %Y %H:%M:%S GMT"

CookieValue = Union[str, Sequence[str], Mapping]
Expires = Union[datetime, int, float]


def escape(text) -> str:
    """
    Form-encode a cookie name or value.

    :Example:

    >>> escape("a b&c")
    'a+b%26c'
    """
    if isinstance(text, (bytes, bytearray)):
        return quote_plus(bytes(text))
    return quote_plus(str(text))


def format_expires(expires: Expires) -> str:
    """
    RFC 1123 date in GMT. Naive datetimes are taken as local time,
    numbers as POSIX timestamps.

    :Example:

    >>> format_expires(0)
    'Thu, 01 Jan 1970 00:00:00 GMT'
    """
    if isinstance(expires, datetime):
        moment = expires.astimezone(timezone.utc)
    else:
        moment = datetime.fromtimestamp(expires, timezone.utc)
    return moment.strftime(EXPIRES_FORMAT)


def build_cookie(name: str, value: CookieValue) -> str:
    domain = path = expires = ""

    if isinstance(value, Mapping):
        if value.get("domain"):
            domain = f"; domain={value['domain']}"
        if value.get("path"):
            path = f"; path={value['path']}"
        if value.get("expires") is not None:
            expires = f"; expires={format_expires(value['expires'])}"
        value = value.get("value", "")

    if isinstance(value, (list, tuple)):
        values = list(value)
    else:
        values = [value if value is not None else ""]

    encoded = "&".join(escape(item) for item in values)
    return f"{escape(name)}={encoded}{domain}{path}{expires}"


def cookie_matches(cookie: str, name: str) -> bool:
    """
    True when a rendered cookie string belongs to ``name``.
    The encoded name has to be followed by ``=``, so ``foo`` never
    matches ``foobar=1``.
    """
    return cookie.startswith(f"{escape(name)}=")

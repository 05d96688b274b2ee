__version__ = "1.0.0"

from . import codes
from .errors import InvalidBodyError, RespbuilderError, SetCookieParsingError
from .protocol import body, cookies, headers, http
from .protocol.body import Parts, Text
from .protocol.headers import ContentType, Headers, MimeType, SetCookie
from .protocol.http import Response, WriteMode

__all__ = (
    "codes",
    "ContentType",
    "Headers",
    "InvalidBodyError",
    "MimeType",
    "Parts",
    "Response",
    "RespbuilderError",
    "SetCookie",
    "SetCookieParsingError",
    "Text",
    "WriteMode",
)

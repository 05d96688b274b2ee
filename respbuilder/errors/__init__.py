from .base import RespbuilderError
from .parser import SetCookieParsingError
from .response import InvalidBodyError

__all__ = ("RespbuilderError", "SetCookieParsingError", "InvalidBodyError")

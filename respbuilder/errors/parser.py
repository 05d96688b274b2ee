from .base import RespbuilderError


class SetCookieParsingError(RespbuilderError):
    def __init__(self, value, reason=None):
        self.value = value
        text = f"Can't parse Set-Cookie value {value!r}"
        if reason is not None:
            text = f"{text}: {reason}"
        super(SetCookieParsingError, self).__init__(text)

from .base import RespbuilderError


class InvalidBodyError(RespbuilderError, TypeError):
    def __init__(self, body):
        self.body = body
        super(InvalidBodyError, self).__init__(
            "body must be string-like or iterable of string-like parts, "
            f"got {type(body).__name__}"
        )

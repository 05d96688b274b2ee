import pytest

from respbuilder import Response
from respbuilder.errors import InvalidBodyError
from respbuilder.errors import RespbuilderError
from respbuilder.errors import SetCookieParsingError
from respbuilder.protocol.headers import SetCookie


@pytest.mark.parametrize("body", [1, 1.5, None, object()])
def test_invalid_body(body):
    with pytest.raises(InvalidBodyError) as exc_info:
        Response(body)

    assert exc_info.value.body is body
    assert "string-like or iterable" in str(exc_info.value)


def test_invalid_body_is_type_error():
    with pytest.raises(TypeError):
        Response(42)
    assert issubclass(InvalidBodyError, RespbuilderError)


@pytest.mark.parametrize(
    "value",
    ["", "novalue", "=1", "a=1; unknown=2", "a=1; expires=yesterday"],
)
def test_set_cookie_parsing_error(value):
    with pytest.raises(SetCookieParsingError):
        SetCookie.parse(value)

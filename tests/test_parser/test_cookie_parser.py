from datetime import datetime

import pytest

from respbuilder.errors import SetCookieParsingError
from respbuilder.protocol.headers import SetCookie


class TestCookieParser:
    @pytest.mark.parametrize(
        argnames=["text", "expected"],
        argvalues=[
            (
                "__Secure-ID=1l23; Secure; Domain=example.com; HttpOnly",
                {
                    "key": "__Secure-ID",
                    "value": "1l23",
                    "attrs": {"Secure": None, "Domain": "example.com", "HttpOnly": None},
                },
            ),
            ("sessionId=38afes7a8", {"key": "sessionId", "value": "38afes7a8", "attrs": {}}),
            (
                "id=a3fWa; expires=Wed, 21 Oct 2015 07:28:00 GMT",
                {
                    "key": "id",
                    "value": "a3fWa",
                    "attrs": {"expires": datetime(2015, 10, 21, 7, 28)},
                },
            ),
            (
                "a=1; domain=example.com; path=/",
                {"key": "a", "value": "1", "attrs": {"domain": "example.com", "path": "/"}},
            ),
            (
                "gone=; expires=Thu, 01 Jan 1970 00:00:00 GMT",
                {"key": "gone", "value": "", "attrs": {"expires": datetime(1970, 1, 1)}},
            ),
            (
                "list=a&b+c",
                {"key": "list", "value": "a&b+c", "attrs": {}},
            ),
        ],
    )
    def test_parsing(self, text, expected):
        set_cookie = SetCookie.parse(text)
        assert set_cookie.key == expected["key"]
        assert set_cookie.value == expected["value"]
        assert set_cookie.attrs == expected["attrs"]

    def test_repr(self):
        assert repr(SetCookie.parse("a=1")) == "<Set-Cookie a=1>"

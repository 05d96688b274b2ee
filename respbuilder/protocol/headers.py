"""
Case-insensitive header collection and the header helpers built on it
"""
import logging
from abc import ABC
from abc import abstractmethod
from datetime import datetime
from enum import Enum
from typing import Dict
from typing import Iterator
from typing import List
from typing import Optional
from typing import Tuple
from typing import TypeVar
from typing import Union

from lark import Lark
from lark.exceptions import LarkError

from ..errors.parser import SetCookieParsingError
from ..settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)

T = TypeVar("T", bound="Headers")

HeaderValue = Union[str, List[str]]


class MetaHeaders(type):
    def __call__(cls, initial_headers=None):
        """
        If 'initial headers' passed through 'Headers' is already an instance of 'Headers,'
        return it rather than creating a new one.
        """
        if isinstance(initial_headers, Headers):
            return initial_headers
        return super(MetaHeaders, cls).__call__(initial_headers)


class Headers(metaclass=MetaHeaders):
    """
    Mapping of header names to values with case-insensitive keys.

    The casing used the first time a name is stored is the one reported by
    ``to_dict`` and ``get_parsed``; distinct names keep insertion order.
    Values of ``multivalue_headers`` are kept as a list and read back as a
    plain string while the list holds a single value.
    """

    multivalue_headers = frozenset(("set-cookie", "www-authenticate"))

    def __init__(self, initial_headers: Optional[Union[Dict[str, HeaderValue], T]] = None):
        self._headers: Dict[str, Tuple[str, HeaderValue]] = {}
        self.cache: Optional[str] = None

        if initial_headers:
            for key, value in initial_headers.items():
                self[key] = value

    def _name(self, key: str) -> str:
        stored = self._headers.get(key.lower())
        return stored[0] if stored else key

    def __setitem__(self, key: str, value: HeaderValue):
        self.cache = None
        lowered = key.lower()
        if lowered in self.multivalue_headers:
            if isinstance(value, (list, tuple)):
                value = list(value)
            else:
                value = [value]
        self._headers[lowered] = (self._name(key), value)

    def __getitem__(self, item: str) -> HeaderValue:
        _, value = self._headers[item.lower()]
        if isinstance(value, list):
            return value[0] if len(value) == 1 else list(value)
        return value

    def __delitem__(self, item: str):
        self.cache = None
        del self._headers[item.lower()]

    def add(self, key: str, value: str):
        """
        Append a value. Multi-value headers grow their list, other headers
        are folded into one comma separated value (RFC 7230 3.2.2).
        """
        lowered = key.lower()
        if lowered not in self._headers:
            self[key] = value
            return

        self.cache = None
        name, current = self._headers[lowered]
        if isinstance(current, list):
            current.append(value)
        else:
            self._headers[lowered] = (name, f"{current}, {value}")

    def add_header(self, header: "BaseHeader"):
        self[header.key] = header.value

    def get(self, name: str, default=None):
        if name in self:
            return self[name]
        return default

    def get_all(self, name: str) -> List[str]:
        stored = self._headers.get(name.lower())
        if stored is None:
            return []
        value = stored[1]
        return list(value) if isinstance(value, list) else [value]

    def pop(self, name: str, default=None):
        if name not in self:
            return default
        value = self[name]
        del self[name]
        return value

    def get_parsed(self) -> str:
        if self.cache is not None:
            return self.cache

        lines = []
        for name, value in self._headers.values():
            values = value if isinstance(value, list) else [value]
            lines.extend(f"{name}: {item}" for item in values)
        self.cache = "".join(f"{line}\r\n" for line in lines)
        return self.cache

    def items(self):
        return [(name, self[name]) for name, _ in self._headers.values()]

    def to_dict(self) -> Dict[str, HeaderValue]:
        return dict(self.items())

    def __iter__(self) -> Iterator[str]:
        return iter([name for name, _ in self._headers.values()])

    def __contains__(self, item: str) -> bool:
        return item.lower() in self._headers

    def __or__(self, other):
        if not isinstance(other, Headers):
            raise ValueError(
                f"Can't combine {self.__class__.__name__} object with {type(other).__name__}"
            )

        combined = Headers(self.to_dict())
        for name, value in other.items():
            combined[name] = value
        return combined

    def __eq__(self, other):
        if not isinstance(other, Headers):
            return False
        return {key: value for key, (_, value) in self._headers.items()} == {
            key: value for key, (_, value) in other._headers.items()
        }

    def __len__(self):
        return len(self._headers)

    def __repr__(self):
        return f"Headers:\n" + "\n".join(
            (f" {key}: {value}" for key, value in self.items())
        )


class MimeType(Enum):
    html = "text/html"
    plain = "text/plain"
    css = "text/css"
    csv = "text/csv"
    js = "text/javascript"
    json = "application/json"
    xml = "application/xml"
    binary = "application/octet-stream"
    gzip = "application/gzip"
    png = "image/png"
    gif = "image/gif"


class BaseHeader(ABC):
    key = "NotImplemented"

    @property
    @abstractmethod
    def value(self) -> str:
        ...


class ContentType(BaseHeader):
    """
    :Example:

    >>> from respbuilder.protocol.headers import ContentType, MimeType
    >>> ContentType(MimeType.json, charset="utf-8").value
    'application/json; charset=utf-8'
    >>> ContentType("text/html").value
    'text/html'
    """

    key = "Content-Type"

    def __init__(self, mime: Union[MimeType, str], charset: Optional[str] = None):
        self.mime = mime.value if isinstance(mime, MimeType) else mime
        self.charset = charset

    @property
    def value(self) -> str:
        if self.charset:
            return f"{self.mime}; charset={self.charset}"
        return self.mime


class SetCookie:
    parser = Lark(
        r"""
            cookie_string:  cookie_pair (AREND SP? cookie_parameter)*
            cookie_pair:    KEY EQ VAL?
            cookie_parameter: ATTRIBUTE (EQ VAL)?
            KEY:            /[^=;\s]+/
            VAL:            /[^;]+/
            ATTRIBUTE:      "expires"i | "max-age"i | "domain"i | "path"i
                            | "secure"i | "httponly"i | "samesite"i | "partitioned"i
            EQ:             "="
            AREND:          ";"
            SP:             " "
        """,
        parser="lalr",
        start="cookie_string",
    )

    datetime_formats = (
        "%a, %d %b %Y %H:%M:%S %Z",  # Thu, 01 Jan 1970 00:00:00 GMT
        "%A, %d-%b-%y %H:%M:%S %Z",  # Thursday, 01-Jan-70 00:00:00 GMT
        "%a, %d-%b-%Y %H:%M:%S %Z",
    )

    def __init__(self):
        self.key: Optional[str] = None
        self.value: Optional[str] = None
        self.attrs: Dict[str, Union[str, datetime, None]] = {}

    @classmethod
    def parse_datetime(cls, value: str) -> datetime:
        for date_format in cls.datetime_formats:
            try:
                return datetime.strptime(value, date_format)
            except ValueError:
                continue
        raise SetCookieParsingError(value, "invalid expires date")

    @classmethod
    def parse(cls, value: str) -> "SetCookie":
        """
        :Example:

        >>> from respbuilder.protocol.headers import SetCookie
        >>> SetCookie.parse("id=a3fWa; path=/")
        <Set-Cookie id=a3fWa>
        """
        self = cls()
        try:
            parsed_tree = cls.parser.parse(value)
        except LarkError as exc:
            raise SetCookieParsingError(value, str(exc)) from exc

        pair = parsed_tree.children[0].children
        self.key = pair[0].value
        self.value = pair[2].value if len(pair) == 3 else ""

        for attr in parsed_tree.find_data("cookie_parameter"):
            if len(attr.children) == 1:
                (key,) = attr.children
                self.attrs[key.value] = None
            else:
                key, _, attr_value = attr.children
                if key.value.lower() == "expires":
                    self.attrs[key.value] = cls.parse_datetime(attr_value.value)
                else:
                    self.attrs[key.value] = attr_value.value
        log.trace(f"Parsed Set-Cookie {value!r}")  # type: ignore
        return self

    def __repr__(self):
        return f"<Set-Cookie {self.key}={self.value}>"

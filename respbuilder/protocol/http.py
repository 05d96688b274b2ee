import logging
from enum import Enum
from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterator
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import Union

from .. import codes
from ..settings import DEFAULT_CONTENT_TYPE
from ..settings import DEFAULT_STATUS
from ..settings import LOGGER_NAME
from .body import Fragment
from .body import resolve_body
from .body import to_fragment
from .cookies import EPOCH
from .cookies import CookieValue
from .cookies import build_cookie
from .cookies import cookie_matches
from .headers import ContentType
from .headers import Headers
from .headers import HeaderValue
from .headers import SetCookie

log = logging.getLogger(LOGGER_NAME)

Sink = Callable[[Fragment], Any]
FinishCallback = Callable[["Response"], Any]
ResponseTuple = Tuple[int, Dict[str, HeaderValue], Union["Response", List[Fragment]]]


class WriteMode(Enum):
    BUFFERING = "buffering"
    FORWARDING = "forwarding"


class Response:
    """
    Mutable response accumulated by a request handler.

    ``write`` buffers output until the response is finished.  A callback
    passed to ``finish`` runs after the buffered fragments have been
    handed to the consumer, and anything it writes goes straight to that
    consumer instead of the buffer.

    :Example:

    >>> from respbuilder import Response
    >>> response = Response("hello")
    >>> response.set_cookie("session", "abc")
    >>> status, headers, body = response.finish()
    >>> status, headers["Set-Cookie"], list(body)
    (200, 'session=abc', ['hello'])
    """

    def __init__(
        self,
        body: Any = (),
        status: int = DEFAULT_STATUS,
        headers: Union[Headers, Dict[str, HeaderValue], None] = None,
        setup: Optional[FinishCallback] = None,
    ):
        self.status = status

        seeded = Headers()
        seeded.add_header(ContentType(DEFAULT_CONTENT_TYPE))
        self.headers = seeded | Headers(headers)

        self.body: List[Fragment] = []
        self.mode = WriteMode.BUFFERING
        self._sink: Optional[Sink] = None
        self._callback: Optional[FinishCallback] = None

        for fragment in resolve_body(body).fragments():
            self.write(fragment)

        if setup is not None:
            setup(self)

    def __getitem__(self, key: str) -> HeaderValue:
        return self.headers[key]

    def __setitem__(self, key: str, value: HeaderValue):
        self.headers[key] = value

    def __delitem__(self, key: str):
        del self.headers[key]

    def get(self, key: str, default=None):
        return self.headers.get(key, default)

    def set(self, key: str, value: HeaderValue):
        self.headers[key] = value

    def set_cookie(self, name: str, value: CookieValue):
        self.headers.add("Set-Cookie", build_cookie(name, value))

    def delete_cookie(self, name: str, options: Optional[Mapping] = None):
        cookies = self.headers.get_all("Set-Cookie")
        kept = [cookie for cookie in cookies if not cookie_matches(cookie, name)]
        log.debug(f"Deleting cookie {name!r}, {len(cookies) - len(kept)} removed")
        self.headers["Set-Cookie"] = kept

        expiring = {"value": "", "path": None, "domain": None, "expires": EPOCH}
        expiring.update(options or {})
        self.set_cookie(name, expiring)

    @property
    def cookies(self) -> List[SetCookie]:
        return [SetCookie.parse(cookie) for cookie in self.headers.get_all("Set-Cookie")]

    def write(self, data: Any) -> Fragment:
        fragment = to_fragment(data)
        if self.mode is WriteMode.FORWARDING:
            self._sink(fragment)  # type: ignore
        else:
            self.body.append(fragment)
        log.trace(  # type: ignore
            f"{self.mode.value} {type(fragment).__name__} fragment, length {len(fragment)}"
        )
        return fragment

    def empty(self) -> bool:
        return self._callback is None and not self.body

    def finish(self, callback: Optional[FinishCallback] = None) -> ResponseTuple:
        self._callback = callback
        status = int(self.status)

        if codes.is_bodyless(status):
            self.headers.pop("Content-Type")
            log.debug(f"Finished bodyless {status} response")
            return status, self.headers.to_dict(), []

        log.debug(f"Finished {status} response with {len(self.body)} buffered fragments")
        return status, self.headers.to_dict(), self

    to_tuple = finish

    def _forward_to(self, sink: Sink):
        self.mode = WriteMode.FORWARDING
        self._sink = sink

    def each(self, consumer: Sink):
        for fragment in list(self.body):
            consumer(fragment)

        self._forward_to(consumer)
        if self._callback is not None:
            self._callback(self)

    def __iter__(self) -> Iterator[Fragment]:
        yield from list(self.body)

        if self._callback is not None:
            pending: List[Fragment] = []
            self._forward_to(pending.append)
            self._callback(self)
            self.mode = WriteMode.BUFFERING
            self._sink = None
            yield from pending

    def __repr__(self) -> str:
        return f"<Response {self.status} {codes.reason_phrase(self.status)}>"

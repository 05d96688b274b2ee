from typing import Any
from typing import Iterable
from typing import List
from typing import Union

from ..errors.response import InvalidBodyError

Fragment = Union[str, bytes]

STRING_LIKE = (str, bytes, bytearray)


def to_fragment(data: Any) -> Fragment:
    if data is None:
        return ""
    if isinstance(data, bytearray):
        return bytes(data)
    if isinstance(data, (str, bytes)):
        return data
    return str(data)


class Text:
    """A body given as one string-like value."""

    def __init__(self, value: Union[str, bytes, bytearray]):
        self.value = value

    def fragments(self) -> List[Fragment]:
        return [to_fragment(self.value)]

    def __repr__(self):
        return f"<Text {self.value!r}>"


class Parts:
    """A body given as an iterable of parts, each written separately."""

    def __init__(self, values: Iterable[Any]):
        self.values = values

    def fragments(self) -> List[Fragment]:
        return [to_fragment(part) for part in self.values]

    def __repr__(self):
        return f"<Parts {self.values!r}>"


def resolve_body(body: Any) -> Union[Text, Parts]:
    if isinstance(body, (Text, Parts)):
        return body
    if isinstance(body, STRING_LIKE):
        return Text(body)
    try:
        iter(body)
    except TypeError:
        raise InvalidBodyError(body) from None
    return Parts(body)

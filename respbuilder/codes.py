from typing import Dict, FrozenSet

# 1xx Informational

CONTINUE = 100
SWITCHING_PROTOCOLS = 101

# 2xx Success

OK = 200
CREATED = 201
ACCEPTED = 202
NON_AUTHORITATIVE_INFORMATION = 203
NO_CONTENT = 204
RESET_CONTENT = 205
PARTIAL_CONTENT = 206

# 3xx Redirects

MULTIPLE_CHOICES = 300
MOVED_PERMANENTLY = 301
FOUND = 302
SEE_OTHER = 303
NOT_MODIFIED = 304
TEMPORARY_REDIRECT = 307
PERMANENT_REDIRECT = 308

# 4xx Client errors

BAD_REQUEST = 400
UNAUTHORIZED = 401
FORBIDDEN = 403
NOT_FOUND = 404
METHOD_NOT_ALLOWED = 405
NOT_ACCEPTABLE = 406
CONFLICT = 409
GONE = 410
UNPROCESSABLE_ENTITY = 422
TOO_MANY_REQUESTS = 429

# 5xx Server errors

INTERNAL_SERVER_ERROR = 500
NOT_IMPLEMENTED = 501
BAD_GATEWAY = 502
SERVICE_UNAVAILABLE = 503

# Responses with these codes are sent without a body or Content-Type
BODYLESS_STATUSES: FrozenSet[int] = frozenset((CREATED, NO_CONTENT, NOT_MODIFIED))

REASON_PHRASES: Dict[int, str] = {
    CONTINUE: "Continue",
    SWITCHING_PROTOCOLS: "Switching Protocols",
    OK: "OK",
    CREATED: "Created",
    ACCEPTED: "Accepted",
    NON_AUTHORITATIVE_INFORMATION: "Non-Authoritative Information",
    NO_CONTENT: "No Content",
    RESET_CONTENT: "Reset Content",
    PARTIAL_CONTENT: "Partial Content",
    MULTIPLE_CHOICES: "Multiple Choices",
    MOVED_PERMANENTLY: "Moved Permanently",
    FOUND: "Found",
    SEE_OTHER: "See Other",
    NOT_MODIFIED: "Not Modified",
    TEMPORARY_REDIRECT: "Temporary Redirect",
    PERMANENT_REDIRECT: "Permanent Redirect",
    BAD_REQUEST: "Bad Request",
    UNAUTHORIZED: "Unauthorized",
    FORBIDDEN: "Forbidden",
    NOT_FOUND: "Not Found",
    METHOD_NOT_ALLOWED: "Method Not Allowed",
    NOT_ACCEPTABLE: "Not Acceptable",
    CONFLICT: "Conflict",
    GONE: "Gone",
    UNPROCESSABLE_ENTITY: "Unprocessable Entity",
    TOO_MANY_REQUESTS: "Too Many Requests",
    INTERNAL_SERVER_ERROR: "Internal Server Error",
    NOT_IMPLEMENTED: "Not Implemented",
    BAD_GATEWAY: "Bad Gateway",
    SERVICE_UNAVAILABLE: "Service Unavailable",
}


def reason_phrase(code: int) -> str:
    return REASON_PHRASES.get(int(code), "Unknown")


def is_bodyless(code: int) -> bool:
    return int(code) in BODYLESS_STATUSES


def is_informational(code: int) -> bool:
    return code // 100 == 1


def is_ok(code: int) -> bool:
    return code // 100 == 2


def is_redirect(code: int) -> bool:
    return code // 100 == 3


def is_client_error(code: int) -> bool:
    return code // 100 == 4


def is_server_error(code: int) -> bool:
    return code // 100 == 5

import logging

import pytest

from respbuilder import codes
from respbuilder import settings


@pytest.mark.parametrize(
    "code, expected",
    [(201, True), (204, True), (304, True), ("204", True), (200, False), (205, False), (404, False)],
)
def test_is_bodyless(code, expected):
    assert codes.is_bodyless(code) is expected


@pytest.mark.parametrize(
    "code, predicate",
    [
        (codes.CONTINUE, codes.is_informational),
        (codes.OK, codes.is_ok),
        (codes.FOUND, codes.is_redirect),
        (codes.NOT_FOUND, codes.is_client_error),
        (codes.BAD_GATEWAY, codes.is_server_error),
    ],
)
def test_classes(code, predicate):
    assert predicate(code)


def test_reason_phrase():
    assert codes.reason_phrase(200) == "OK"
    assert codes.reason_phrase(799) == "Unknown"


class TestSettings:
    def test_response_defaults(self):
        assert settings.DEFAULT_CONTENT_TYPE == "text/html"
        assert settings.DEFAULT_STATUS == codes.OK

    def test_format_placeholders(self):
        assert "$" not in settings.FORMAT
        assert "%(message)s" in settings.FORMAT

    def test_logger_is_configured_once(self):
        logger = logging.getLogger(settings.LOGGER_NAME)
        handlers = list(logger.handlers)

        assert settings.setup_logger() is logger
        assert logger.handlers == handlers

        own = [
            handler
            for handler in logger.handlers
            if isinstance(handler.formatter, logging.Formatter)
            and handler.formatter._fmt == settings.FORMAT
        ]
        assert len(own) == 1
        assert logging.getLevelName(settings.LOGGER_TRACE) == "TRACE"

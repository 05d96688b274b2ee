import logging
from datetime import datetime
from datetime import timezone

import pytest

from respbuilder import Response
from respbuilder.settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)

CONSTANTS = dict(
    EXPIRES=datetime(2015, 10, 21, 7, 28, tzinfo=timezone.utc),
    EXPIRES_TEXT="Wed, 21 Oct 2015 07:28:00 GMT",
    EPOCH_TEXT="Thu, 01 Jan 1970 00:00:00 GMT",
)


@pytest.fixture(scope="session")
def constants():
    return CONSTANTS


@pytest.fixture()
def response():
    return Response()


@pytest.fixture()
def drain():
    def inner(body):
        chunks = []
        if isinstance(body, Response):
            body.each(chunks.append)
        else:
            for chunk in body:
                chunks.append(chunk)
        log.debug(f"Drained {len(chunks)} chunks")
        return chunks

    return inner

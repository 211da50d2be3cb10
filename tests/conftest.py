import logging
import typing as t

from _pytest import logging as _logging
from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def clean_configuration() -> t.Generator[None, None, None]:
    from fluentfp import conf
    yield
    conf.configure(None)


@pytest.fixture
def caplog(
    caplog: _logging.LogCaptureFixture,
) -> t.Generator[_logging.LogCaptureFixture, None, None]:
    class LoguruHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            logging.getLogger(record.name).handle(record)

    handler_id = logger.add(
        LoguruHandler(),
        format='{message}',
    )
    yield caplog
    logger.remove(handler_id)

import logging
from configparser import ConfigParser
from pathlib import Path

ini_file_path = str((Path(__file__).parent / "settings.ini").absolute())

parser = ConfigParser()
parser.read(ini_file_path)

LOGGER_TRACE = 5
logging.addLevelName(LOGGER_TRACE, "TRACE")

log_level_mapper = {
    "notset": logging.NOTSET,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "trace": LOGGER_TRACE,
}

log_format_fields = (
    "name",
    "levelno",
    "levelname",
    "pathname",
    "filename",
    "module",
    "funcName",
    "asctime",
    "threadName",
    "message",
)


def _level(option: str) -> int:
    name = parser.get("Logging", option).strip().lower()
    if name not in log_level_mapper:
        raise ValueError(
            f"settings.ini contains invalid value for {option!r}: {name!r}"
        )
    return log_level_mapper[name]


def _format(template: str) -> str:
    for field in log_format_fields:
        template = template.replace(f"${field}", f"%({field})s")
    return template


LOGGER_NAME = parser.get("Logging", "logger_name")
MAIN_LOGGER_LEVEL = _level("logger_level")
STREAM_HANDLER_LEVEL = _level("stream_handler_level")
FORMAT = _format(parser.get("Logging", "stream_handler_format"))

DEFAULT_CONTENT_TYPE = parser.get("Response", "default_content_type")
DEFAULT_STATUS = parser.getint("Response", "default_status")


def _trace(message, *args, **kwargs):
    logger = logging.getLogger(LOGGER_NAME)

    if logger.isEnabledFor(LOGGER_TRACE):
        logger._log(LOGGER_TRACE, message, args, **kwargs)


def setup_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.trace = _trace  # type: ignore
    logger.propagate = False
    logger.setLevel(MAIN_LOGGER_LEVEL)

    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(STREAM_HANDLER_LEVEL)
        stream_handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(stream_handler)
    return logger


main_logger = setup_logger()

import logging
import sys

from pythonjsonlogger import jsonlogger

_level: int | str = logging.INFO


def setup_logging(level: int | str | None = None):
    """
    Configures structured JSON logging for the gateway process.

    Installs a single stdout handler with a JSON formatter (timestamp, level,
    logger name, message, trace_id and span_id) on the root logger and on the
    uvicorn loggers. Modules call this without arguments at import time; the
    entry point calls it once more with the configured level, which then
    sticks for later argument-less calls.

    Args:
        level: Logging level name or number. None keeps the current level.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    global _level
    if level is not None:
        _level = level

    formatter = jsonlogger.JsonFormatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
    )
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(_level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(_level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger

import logging

# Package wide logger name
LOGGER_NAME = "golor"

logger = logging.getLogger(LOGGER_NAME)

# Console only, quiet unless asked otherwise
if not logger.handlers:
    logger.setLevel(logging.WARNING)
    logger.propagate = False

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(
        "[%(asctime)s] - %(levelname)s (%(filename)s:%(lineno)d) - %(message)s"
    ))

    logger.addHandler(stream_handler)


def set_level(level: str) -> None:
    """
    Changes the level of the package logger, e.g. "DEBUG" or "warning".
    """
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level: {level}")
    logger.setLevel(value)

"""Logging setup for nullable_struct.

Library modules obtain loggers through :func:`get_logger` and never configure
handlers themselves. The CLI calls :func:`setup_logging` once at startup.
"""

import logging
from pathlib import Path

from rich.logging import RichHandler

LOGGER_NAME = "nullable_struct"
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_HANDLER_MARKER = "_nullable_struct_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(
    level: str | int = "WARNING",
    log_file: str | Path | None = None,
    use_rich: bool = True,
) -> logging.Logger:
    """Configure the package logger.

    Calling this more than once replaces the handlers installed by an
    earlier call instead of stacking new ones.

    Args:
        level: Log level name or number.
        log_file: Optional file that receives a plain-text copy of the log.
        use_rich: Use a rich console handler instead of a plain stream handler.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            logger.removeHandler(handler)
            handler.close()

    if use_rich:
        console_handler: logging.Handler = RichHandler(
            show_path=False, rich_tracebacks=True, markup=False
        )
        console_handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
    setattr(console_handler, _HANDLER_MARKER, True)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(Path(log_file), encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        setattr(file_handler, _HANDLER_MARKER, True)
        logger.addHandler(file_handler)

    logger.propagate = False
    logger.debug("Logging configured at level %s", logging.getLevelName(level))
    return logger

import logging
import sys

from .settings import get_settings

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str | None = None) -> None:
    """
    Set up logging for zip2meta.

    Log records go to stderr, stdout being reserved for the metadata lines.

    Args:
        level: The logging level to set. Can be an integer (e.g., logging.INFO),
               a string (e.g., "INFO"), or None. If None, the level is taken
               from the ZIP2META_LOG_LEVEL setting.

    """
    if level is None:
        level = get_settings().log_level

    if isinstance(level, str):
        log_level_name = level.upper()
        if isinstance(logging.getLevelName(log_level_name), int):
            log_level = logging.getLevelName(log_level_name)
        else:
            log_level = DEFAULT_LOG_LEVEL
            print(  # noqa: T201
                f"Warning: Invalid log level string '{level}'. Defaulting to {logging.getLevelName(log_level)}.",
                file=sys.stderr,
            )
    else:
        log_level = level

    app_logger = logging.getLogger("zip2meta")
    app_logger.setLevel(log_level)

    # Replace handlers so the new one uses the current sys.stderr,
    # which CliRunner swaps out in tests.
    for handler_to_remove in list(app_logger.handlers):
        app_logger.removeHandler(handler_to_remove)
        handler_to_remove.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)

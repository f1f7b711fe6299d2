import json
import logging
import sys
from pathlib import Path
from typing import Any, cast

from loguru import logger
from loguru._defaults import LOGURU_FORMAT

from fifoqueues.config import Settings

PACKAGE_NAME = "fifoqueues"
_JSON_EXTRA_KEY = "_fifoqueues_json"


class InterceptHandler(logging.Handler):
    """A custom logging handler to intercept standard logging messages.

    This handler redirects standard logging messages to Loguru.
    """

    def emit(self, record: logging.LogRecord) -> None:
        """Emits a log record to the Loguru logger.

        Args:
            record: The log record to emit.
        """
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = cast(Any, frame.f_back)
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def _json_formatter(record: dict[str, Any]) -> str:
    """Structures a log record as a single JSON line.

    Loguru treats the returned string as a format template, so the JSON is
    stashed in `extra` under `_JSON_EXTRA_KEY` and referenced from there. The
    key stays on the record, so later sinks that render `extra` will see it.
    """
    log_object = {
        "timestamp": record["time"].isoformat(),
        "level": record["level"].name,
        "message": record["message"],
        "source": {
            "name": record["name"],
            "file": f"{record['file'].name}:{record['line']}",
            "function": record["function"],
        },
        "extra": {
            k: v for k, v in record["extra"].items() if k != _JSON_EXTRA_KEY
        },
    }
    record["extra"][_JSON_EXTRA_KEY] = json.dumps(log_object, default=str)
    return "{extra[" + _JSON_EXTRA_KEY + "]}\n"


def setup_logging(
    console_level: str = "INFO",
    file_level: str = "DEBUG",
    log_dir: Path | None = None,
) -> None:
    """Configures Loguru for an application that embeds fifoqueues.

    The package disables its own logger on import. This function removes any
    default handlers, sets up a console sink with a readable format, an
    optional rotating file sink with JSON lines, intercepts standard library
    logging, and re-enables the package logger.

    Args:
        console_level: The minimum log level for console output.
        file_level: The minimum log level for file output.
        log_dir: Directory to store log files. If None, file logging is disabled.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=console_level.upper(),
        format=LOGURU_FORMAT,
        colorize=True,
    )

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / f"{PACKAGE_NAME}_{{time:YYYY-MM-DD}}.log",
            level=file_level.upper(),
            format=_json_formatter,
            rotation="00:00",  # New file at midnight
            retention="7 days",
            compression="zip",
            encoding="utf-8",
            backtrace=False,
            diagnose=False,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    logger.enable(PACKAGE_NAME)

    logger.info("Logging configured successfully.")


def setup_logging_from_settings(settings: Settings | None = None) -> None:
    """Applies the `[general]` section of the settings to `setup_logging`."""
    general = (settings or Settings.get_instance()).general
    log_dir = Path(general.log_directory) if general.log_directory else None
    setup_logging(
        console_level=general.log_level_console,
        file_level=general.log_level_file,
        log_dir=log_dir,
    )

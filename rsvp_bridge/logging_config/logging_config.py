import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# handlers installed by the last setup_logging call
_installed_handlers: list[logging.Handler] = []


def _rotating_file_handler(path: Path, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=10_000_000,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(app_name: str = "rsvp-bridge") -> None:
    """Configure application logging

    Logs go to the console, to a rotating ``<app_name>.log`` and, for errors,
    to ``<app_name>-error.log`` under ``$LOG_DIR``. Calling it again replaces
    the handlers of the previous call.

    Args:
        app_name: Name to use for log files

    """
    log_dir = Path(os.getenv("LOG_DIR", "logs"))
    os.makedirs(log_dir, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    _installed_handlers.extend(
        [
            console_handler,
            _rotating_file_handler(log_dir / f"{app_name}.log", logging.INFO, formatter),
            _rotating_file_handler(log_dir / f"{app_name}-error.log", logging.ERROR, formatter),
        ]
    )
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

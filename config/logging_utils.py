"""
Logging Utilities

Configures application logging and provides prefixed helpers. Debug
output is only emitted when DEBUG is enabled in settings.
"""

import logging


_app_logger = logging.getLogger("taskflow")


def setup_logging(debug: bool = False) -> None:
    """
    Configure the application logger.

    Args:
        debug: Emit DEBUG records when True, INFO and above otherwise
    """
    if not _app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter('[%(asctime)s] [%(levelname)s] %(name)s: %(message)s', datefmt='%H:%M:%S')
        )
        _app_logger.addHandler(handler)
    _app_logger.setLevel(logging.DEBUG if debug else logging.INFO)


def _format(message: str, args: tuple, prefix: str) -> str:
    formatted_message = f"[{prefix}] {message}" if prefix else message
    if args:
        formatted_message = formatted_message % args
    return formatted_message


def log_debug(message: str, *args, prefix: str = "") -> None:
    """
    Log a debug message.

    Args:
        message: The message to log
        *args: Additional arguments to format into the message
        prefix: Optional prefix for categorizing logs (e.g., "AUTH", "TASKS")
    """
    if not _app_logger.isEnabledFor(logging.DEBUG):
        return
    _app_logger.debug(_format(message, args, prefix))


def log_success(message: str, *args, prefix: str = "") -> None:
    """Log a success message with a checkmark."""
    _app_logger.info(_format(f"✓ {message}", args, prefix))


def log_error(message: str, *args, prefix: str = "") -> None:
    """Log a failure message with an X mark."""
    _app_logger.warning(_format(f"✗ {message}", args, prefix))

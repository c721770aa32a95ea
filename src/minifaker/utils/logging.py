"""Rich-based logging helpers.

Library modules obtain their logger through ``configure_module_logger``;
applications may call ``setup_logging`` to route the root logger
through Rich as well.
"""

import logging
import sys
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

_KEYWORDS = ["locale", "default", "seed", "field"]


def _rich_handler(console: Console, level: int, show_path: bool = False) -> RichHandler:
    handler = RichHandler(
        console=console,
        show_path=show_path,
        show_time=True,
        rich_tracebacks=True,
        markup=True,
        show_level=True,
        level=level,
        omit_repeated_times=False,
        keywords=_KEYWORDS,
    )
    handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return handler


def setup_logging(
    level: int = logging.INFO,
    show_path: bool = False,
    console: Optional[Console] = None,
) -> None:
    """
    Configure the root logger with a single Rich handler.

    Args:
        level: Logging level (default: INFO).
        show_path: Show file path in log messages (default: False).
        console: Optional Rich Console instance (default: stderr console).
    """
    if console is None:
        console = Console(stderr=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_rich_handler(console, level, show_path=show_path))
    root_logger.propagate = False


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a logger, installing the Rich root handler on first use.

    Args:
        name: Logger name (typically __name__).
        level: Optional logging level override.
    """
    logger = logging.getLogger(name)

    if level is not None:
        logger.setLevel(level)

    root_logger = logging.getLogger()
    if not any(isinstance(h, RichHandler) for h in root_logger.handlers):
        setup_logging()

    return logger


def configure_module_logger(
    module_name: str,
    level: int = logging.INFO,
    use_colors: bool = True,
) -> logging.Logger:
    """
    Configure a module-specific logger with its own handler.

    Args:
        module_name: Module name (typically __name__).
        level: Logging level.
        use_colors: Use a Rich handler; a plain stderr handler otherwise.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(module_name)
    logger.setLevel(level)
    logger.handlers.clear()

    handler: Union[RichHandler, logging.Handler]
    if use_colors:
        console = Console(stderr=True, force_terminal=True, legacy_windows=False)
        # NOTSET lets the logger do the filtering
        handler = _rich_handler(console, logging.NOTSET)
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.propagate = False

    return logger

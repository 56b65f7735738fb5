"""Logging setup for the isogrid CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr, filtered by the ``-v``/``-q`` verbosity;
- an optional "flight recorder", a `MemoryHandler` that keeps recent records at
  DEBUG granularity and dumps them to a file when a WARNING (or worse) is
  logged, or on exit when asked to.

stdout is never written to, so generated CSS can be piped into a stylesheet.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from importlib.metadata import version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from isogrid.domain.value_objects import GridConfig

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "isogrid"
DEFAULT_FLIGHT_CAPACITY = 2000

FILE_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

type ColorSystem = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other packages with their top-level package name.

    ``click_extra.colorize`` becomes ``[click_extra]``; isogrid's own records
    get an empty prefix. Never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Map ``-v``/``-q`` counts to a level, one step of 10 each way from WARNING."""
    level = logging.WARNING + 10 * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown; debug mode always shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of third-party prefixes.
        color: Follows click-extra's ``--color/--no-color``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the flight recorder writing to `path`.

    The file is truncated when the recorder is created, so it only ever holds
    the records of the latest run.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(FILE_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


@dataclass(frozen=True, slots=True)
class LoggingSetup:
    """What `configure_logging` installed, for the startup report."""

    level: int
    handlers: list[logging.Handler]
    log_path: Path | None = None
    flight_capacity: int | None = None
    flush_on_close: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def flight_recorder(self) -> bool:
        return self.flight_capacity is not None


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_capacity: int = DEFAULT_FLIGHT_CAPACITY,
    flush_on_close: bool = False,
    logger_levels: Mapping[str, int] | None = None,
) -> LoggingSetup:
    """Install the console handler and, if `log_path` is given, the flight recorder.

    The root logger is opened to DEBUG and each handler applies its own
    threshold. `logger_levels` then raises (or lowers) individual loggers,
    which affects both handlers.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                log_path, capacity=flight_capacity, flush_on_close=flush_on_close
            )
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    levels = dict(logger_levels or {})
    for name, logger_level in levels.items():
        logging.getLogger(name).setLevel(logger_level)

    return LoggingSetup(
        level=level,
        handlers=handlers,
        log_path=log_path,
        flight_capacity=flight_capacity if log_path is not None else None,
        flush_on_close=flush_on_close,
        logger_levels=levels,
    )


def log_startup(
    logger: logging.Logger,
    setup: LoggingSetup,
    *,
    app_version: str,
    defaults: GridConfig | None = None,
) -> None:
    """Log a one-line INFO summary of the run, then DEBUG diagnostics.

    The diagnostics cover the interpreter, platform, process, library
    versions, handlers, flight-recorder settings, per-logger levels and the
    grid defaults in effect.
    """
    logger.info(
        "isogrid %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(setup.level),
        "ON" if setup.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("click: %s, rich: %s", version("click"), version("rich"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in setup.handlers])
    if setup.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            setup.log_path,
            setup.flight_capacity,
            setup.flush_on_close,
        )
    overrides = {
        name: logging.getLevelName(level)
        for name, level in setup.logger_levels.items()
    }
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
    if defaults is not None:
        logger.debug("Grid defaults: %s", defaults)

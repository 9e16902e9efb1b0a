"""Shared logging configuration using structlog."""

from __future__ import annotations

import logging
import os
import sys

import structlog

from sm_common.config.env import parse_bool_env


def _resolve_level(value: str | int | None, debug: bool) -> int:
    if debug:
        return logging.DEBUG
    if value is None:
        return logging.WARNING
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    return logging.getLevelNamesMapping().get(value.upper(), logging.WARNING)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Configure stdlib logging and structlog with a shared formatter.

    The launcher shares the terminal with the menu and with the commands it
    runs, so the console level defaults to WARNING. ``SM_LOG_LEVEL``,
    ``SM_LOG_JSON`` and ``SM_LOG_FILE`` override the defaults; explicit
    arguments override the environment.
    """
    env_level = os.environ.get("SM_LOG_LEVEL")
    env_json = parse_bool_env(os.environ.get("SM_LOG_JSON"))
    env_log_file = os.environ.get("SM_LOG_FILE")

    resolved_level = _resolve_level(level or env_level, debug)
    resolved_json = env_json if json is None else json
    resolved_log_file = env_log_file if log_file is None else log_file

    renderer: structlog.types.Processor
    if resolved_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_shared_processors(),
    )

    root_logger = logging.getLogger()
    structlog_processors = [
        *_shared_processors(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]
    if root_logger.handlers and not force:
        structlog.configure(
            processors=structlog_processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        return

    handlers: list[logging.Handler] = []
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(resolved_level)
    handlers.append(stream_handler)

    if resolved_log_file:
        # The log file records at least INFO even when the console is quiet.
        file_handler = logging.FileHandler(resolved_log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(min(resolved_level, logging.INFO))
        handlers.append(file_handler)

    if force:
        root_logger.handlers.clear()

    root_logger.setLevel(min(handler.level for handler in handlers))
    for handler in handlers:
        root_logger.addHandler(handler)

    structlog.configure(
        processors=structlog_processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

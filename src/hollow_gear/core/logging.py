"""Structured logging for the Hollow Gear engine.

The engine functions are pure, so logging is their only side effect.
Each module takes a structlog logger from :func:`get_logger` and emits
these events:

- ``Formula cast`` / ``Miracle cast`` (debug): cost, heat or faith
  feedback, and the overclock or overchannel flag of an applied cast.
- ``Formula rejected`` / ``Miracle rejected`` (debug): the error code of
  the first failed check.
- ``Rest applied to heat`` and ``Concentration save`` (info): heat
  after a rest, and the DC, total and outcome of a save.
- ``Malformed state record`` (warning) and ``State record failed
  validation`` (info): records refused by the storage loaders.

Callers that track several casters bind the caster identity once with
:func:`bind_caster` and every engine event carries it.

Example:
    >>> from hollow_gear.core.logging import bind_caster, get_logger
    >>> from hollow_gear.models.enums import CasterKind
    >>> bind_caster("brassveil", CasterKind.ARCANIST)
    >>> get_logger(__name__).debug("Formula cast", cost=2, heat=3)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from hollow_gear.models.enums import CasterKind


ENGINE_TAG = "hollow_gear"
STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def tag_engine(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Tag every event with the engine name."""
    event_dict["app"] = ENGINE_TAG
    return event_dict


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    log_file: str | None = None,
) -> None:
    """Configure structlog for the engine's events.

    Args:
        level: Minimum level. Cast outcomes log at DEBUG, rests and
            concentration saves at INFO.
        json_format: Render one JSON object per event instead of the
            coloured console format.
        log_file: Optional path that also receives standard library
            log records.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        tag_engine,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format=STDLIB_FORMAT,
        level=numeric_level,
        stream=sys.stdout,
        force=True,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter(STDLIB_FORMAT))
        logging.getLogger().addHandler(file_handler)


def configure_from_settings() -> None:
    """Configure logging from ``HOLLOW_GEAR_LOG_*`` settings."""
    from hollow_gear.core.config import get_settings

    settings = get_settings()
    configure_logging(
        level="DEBUG" if settings.debug else settings.log_level,
        json_format=settings.log_json,
        log_file=settings.log_file,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, typically for ``__name__``."""
    return structlog.get_logger(name)


def bind_caster(caster_id: str, caster_kind: CasterKind) -> None:
    """Attach a caster's identity to every following engine event.

    Args:
        caster_id: Caller-side identifier of the character.
        caster_kind: Arcanist or Templar.
    """
    structlog.contextvars.bind_contextvars(
        caster_id=caster_id,
        caster_kind=caster_kind.value,
    )


def bind_context(**kwargs: Any) -> None:
    """Bind arbitrary context, such as an encounter id, to later events."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all bound context, including the caster identity."""
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "bind_caster",
    "bind_context",
    "clear_context",
]

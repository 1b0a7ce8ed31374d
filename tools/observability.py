"""Instrumentation for the operations the FitStyle facade exposes."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from fitstyle_app.logging_config import get_logger, log_event, operation_context

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")

_PREVIEW_KEYS = 6


def _arguments_preview(kwargs: dict) -> dict:
    """First few keyword arguments, flagged when more were passed."""

    preview = dict(list(kwargs.items())[:_PREVIEW_KEYS])
    if len(kwargs) > _PREVIEW_KEYS:
        preview["truncated"] = True
    return preview


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


def instrument_operation(
    operation: str,
    input_model: type[BaseModel] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Run the wrapped operation inside its own log scope.

    When ``input_model`` is given the keyword arguments are validated (and
    normalised) by it first; a :class:`ValidationError` is logged and
    re-raised without calling the operation.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with operation_context(operation) as correlation_id:

                def emit(level: int, event: str, **fields: Any) -> None:
                    log_event(
                        LOGGER,
                        level,
                        event,
                        operation=operation,
                        correlation_id=correlation_id,
                        **fields,
                    )

                started = time.perf_counter()
                if input_model is not None:
                    try:
                        kwargs = input_model.model_validate(kwargs).model_dump()
                    except ValidationError as exc:
                        emit(
                            logging.WARNING,
                            "operation_validation_failed",
                            errors=exc.errors(include_url=False, include_context=False),
                        )
                        raise

                emit(logging.INFO, "operation_started", kwargs=_arguments_preview(kwargs))
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    emit(
                        logging.ERROR,
                        "operation_failed",
                        duration_ms=_elapsed_ms(started),
                        exc_info=True,
                    )
                    raise
                emit(logging.INFO, "operation_completed", duration_ms=_elapsed_ms(started))
                return result

        return wrapper

    return decorator


__all__ = ["instrument_operation"]

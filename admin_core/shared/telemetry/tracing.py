"""Span helpers for admin-core operations.

Only the opentelemetry API is used here: without an SDK configured by the host
application every span is a no-op, so decorating hot paths stays cheap.
"""

import inspect
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

_tracer = trace.get_tracer("admin_core")

# Argument names recorded as span attributes. Values are stringified.
_RECORDED_ARGS = frozenset({
    "entity_type", "period", "prefix", "group_code", "role_code", "user_id",
    "resource", "action", "table", "column", "include_inactive",
})


def _recorded_args(signature: inspect.Signature, args: tuple, kwargs: dict) -> dict[str, str]:
    try:
        bound = signature.bind_partial(*args, **kwargs)
    except TypeError:
        return {}
    return {
        f"arg.{name}": str(value)
        for name, value in bound.arguments.items()
        if name in _RECORDED_ARGS and value is not None
    }


@contextmanager
def _span(name: str, attributes: dict[str, Any]) -> Iterator[trace.Span]:
    with _tracer.start_as_current_span(name, record_exception=False) as span:
        span.set_attributes(attributes)
        try:
            yield span
        except Exception as exc:
            span.record_exception(exc)
            span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
            raise


def traced(
    operation_name: str | None = None,
    attributes: dict[str, str | int | float | bool] | None = None,
) -> Callable:
    """Wrap a sync or async callable in a span.

    Args:
        operation_name: Span name; defaults to ``module.qualname``.
        attributes: Static attributes set on every span.

    Arguments whose names are in the recorded set (entity_type, user_id, ...)
    are added as ``arg.<name>`` attributes, whether passed by keyword or
    position.
    """

    def decorator(func: Callable) -> Callable:
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"
        signature = inspect.signature(func)
        static = dict(attributes or {})

        if inspect.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                attrs = static | _recorded_args(signature, args, kwargs)
                with _span(span_name, attrs):
                    return await func(*args, **kwargs)

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _span(span_name, static | _recorded_args(signature, args, kwargs)):
                return func(*args, **kwargs)

        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Set attributes on the active span, if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(attributes)


def add_span_event(name: str, attributes: dict | None = None) -> None:
    """Record an event (e.g. an allocation retry) on the active span."""
    span = trace.get_current_span()
    if span.is_recording():
        span.add_event(name, attributes=attributes or {})

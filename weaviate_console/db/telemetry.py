"""
Telemetry for data-access operations.

Provides a decorator that times every catalog, query and mutation call and
records it on an OpenTelemetry histogram, plus a counter for count lookups
that fell back to zero. Without an OpenTelemetry SDK configured the meter is
a no-op and only the debug log line remains.
"""

import functools
import inspect
import logging
import time
from typing import Any, Callable, Dict, Optional, TypeVar

from opentelemetry import metrics

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

meter = metrics.get_meter("weaviate_console.db")

operation_duration = meter.create_histogram(
    name="weaviate_console_operation_duration_seconds",
    description="Duration of Weaviate data-access operations",
    unit="s",
)

count_fallbacks = meter.create_counter(
    name="weaviate_console_count_fallbacks_total",
    description="Collection counts that defaulted to zero after a failed aggregate",
    unit="1",
)


def record_operation(duration: float, labels: Dict[str, str]) -> None:
    """Record one operation on the duration histogram."""
    operation_duration.record(duration, attributes=labels)
    logger.debug(f"{labels.get('operation', 'operation')} took {duration * 1000:.1f}ms ({labels})")


def _safe_extract_labels(
    extract_labels: Optional[Callable],
    args: tuple,
    kwargs: dict,
) -> Dict[str, str]:
    if not extract_labels:
        return {}

    try:
        labels = extract_labels(*args, **kwargs)
        return {k: str(v) for k, v in labels.items()} if labels else {}
    except Exception as e:
        logger.debug(f"Failed to extract labels: {e}")
        return {}


def track_duration(
    operation: str,
    extract_labels: Optional[Callable[..., Dict[str, str]]] = None,
    record_func: Callable[[float, Dict[str, str]], None] = record_operation,
) -> Callable[[F], F]:
    """
    Decorator to time an operation and record it with a success label.

    Handles both sync and async functions.

    Args:
        operation: Operation name recorded as the 'operation' label
        extract_labels: Optional function receiving the call's args/kwargs
                        and returning extra labels
        record_func: Recorder called with (duration_seconds, labels)

    Example:
        @track_duration("list_objects", extract_labels=lambda self, client, name, *a, **kw: {"collection": name})
        def list_objects(self, client, name, ...):
            ...
    """

    def _finish(start_time: float, success: bool, args: tuple, kwargs: dict) -> None:
        duration = time.perf_counter() - start_time
        labels = _safe_extract_labels(extract_labels, args, kwargs)
        labels["operation"] = operation
        labels["success"] = "true" if success else "false"
        try:
            record_func(duration, labels)
        except Exception as record_error:
            logger.warning(f"Failed to record metric: {record_error}")

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            success = True
            try:
                return await func(*args, **kwargs)
            except Exception:
                success = False
                raise
            finally:
                _finish(start_time, success, args, kwargs)

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            start_time = time.perf_counter()
            success = True
            try:
                return func(*args, **kwargs)
            except Exception:
                success = False
                raise
            finally:
                _finish(start_time, success, args, kwargs)

        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        return sync_wrapper  # type: ignore

    return decorator

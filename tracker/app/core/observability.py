"""
Observability helpers for the persistence layer.

Adds correlation IDs, timing and structured logging context to store calls.
"""

import time
import uuid
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Optional
from tracker.app.core.exceptions import ResourceNotFoundError

# Configure structured logger
logger = logging.getLogger("tracker")


def configure_logging(level: Optional[str] = None) -> None:
    """Set the tracker logger level (defaults to ``settings.log_level``)."""
    if level is None:
        from tracker.app.core.config import settings
        level = settings.log_level
    logger.setLevel(level.upper())


@contextmanager
def observe(operation: str, correlation_id: Optional[str] = None, **fields: Any) -> Iterator[Dict[str, Any]]:
    """
    Time a single store operation and log its outcome.

    Yields the mutable log context so the caller can attach results
    (e.g. affected row count) before the record is emitted. Exceptions
    are logged and re-raised unchanged.
    """
    log_data: Dict[str, Any] = {
        "correlation_id": correlation_id or str(uuid.uuid4()),
        "operation": operation,
        **fields,
    }
    start_time = time.perf_counter()

    try:
        yield log_data
    except Exception as exc:
        log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
        log_data["error_type"] = type(exc).__name__
        # Log level based on outcome
        if isinstance(exc, ResourceNotFoundError):
            logger.warning("Store Lookup Miss", extra=log_data)
        else:
            logger.error("Store Operation Failed", extra=log_data)
        raise

    log_data["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
    logger.info("Store Operation", extra=log_data)

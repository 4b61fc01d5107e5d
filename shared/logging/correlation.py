"""
Correlation ID context for request tracing.

Every HTTP request gets an ID (taken from X-Correlation-ID or generated)
stored in a contextvar, so it follows the request through every await
and shows up in each log line written while handling it.

Usage:
    from shared.logging.correlation import get_correlation_id

    cid = get_correlation_id()
"""

import uuid
from contextvars import ContextVar
from typing import Optional

_correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

REQUEST_PREFIX = "req-"


def get_correlation_id() -> Optional[str]:
    """Current correlation_id, or None outside a request."""
    return _correlation_id_var.get()


def set_correlation_id(cid: Optional[str]) -> None:
    _correlation_id_var.set(cid)


def generate_correlation_id(prefix: str = REQUEST_PREFIX) -> str:
    """
    Generate a new correlation_id.

    Format: {prefix}{8 hex chars}, e.g. req-e5f6a7b8
    """
    short = uuid.uuid4().hex[:8]
    return f"{prefix}{short}" if prefix else short

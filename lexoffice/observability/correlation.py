"""
Request correlation IDs.

The ID lives in a ContextVar so log records written anywhere during a
request carry it. Incoming IDs are accepted only when they are short and
made of safe characters; anything else is replaced with a fresh UUID so a
client cannot inject text into log lines.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import re
import uuid
from contextvars import ContextVar

MAX_CORRELATION_ID_LENGTH = 64
_SAFE_ID = re.compile(r"^[A-Za-z0-9._:-]+$")

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def is_valid_correlation_id(value: str | None) -> bool:
    return bool(value) and len(value) <= MAX_CORRELATION_ID_LENGTH and bool(_SAFE_ID.match(value))


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Store the request's correlation ID.

    Args:
        correlation_id: ID received from the client, if any

    Returns:
        str: The ID now in context (the received one, or a new UUID)
    """
    value = correlation_id if is_valid_correlation_id(correlation_id) else str(uuid.uuid4())
    correlation_id_ctx.set(value)
    return value


def get_correlation_id() -> str:
    """Current correlation ID; empty outside a request."""
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    correlation_id_ctx.set("")

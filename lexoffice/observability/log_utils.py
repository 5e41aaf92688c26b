"""
Logging utilities for route failures.

Turns the keyword arguments of a failing route into log-safe context:
injected services are skipped, request bodies are reduced to the names of
the fields that were sent, and personal data (tax ids, contact and bank
fields) is masked.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions
"""

import enum
import logging
import uuid
from typing import Any

from pydantic import BaseModel

# Fields holding personal data of clients and debtors
PERSONAL_FIELDS = frozenset(
    {
        "tax_id",
        "debtor_tax_id",
        "identity_number",
        "email",
        "phone",
        "mobile",
        "whatsapp",
        "account",
        "pix_key",
    }
)


def mask_value(value: Any) -> str:
    """Keep the last two characters of a personal value."""
    text = str(value)
    if len(text) <= 2:
        return "**"
    return "*" * (len(text) - 2) + text[-2:]


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Convert a value to a short string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    if value is None:
        return "None"
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, BaseModel):
        sent = ",".join(sorted(value.model_fields_set)) or "-"
        return f"{type(value).__name__}(sent: {sent})"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    text = str(value)
    if len(text) > max_length:
        return text[:max_length] + f"... (truncated, {len(text)} total)"
    return text


def route_context(call_kwargs: dict[str, Any]) -> dict[str, str]:
    """Log-safe view of a route's keyword arguments."""
    context = {}
    for key, value in call_kwargs.items():
        if key == "db" or key.endswith("_service"):
            continue
        if key in PERSONAL_FIELDS and value is not None:
            context[f"arg_{key}"] = mask_value(value)
        else:
            context[f"arg_{key}"] = safe_log_value(value)
    return context


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    endpoint: str,
    call_kwargs: dict[str, Any],
) -> None:
    """
    Log an unexpected route failure with its traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        endpoint: Route function name
        call_kwargs: Keyword arguments the route was called with
    """
    extra = route_context(call_kwargs)
    extra.update(
        {
            "endpoint": endpoint,
            "error_type": type(exc).__name__,
            "error_msg": safe_log_value(exc),
        }
    )
    logger.exception(message, extra=extra)

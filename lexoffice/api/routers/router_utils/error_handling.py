"""
Router error handling utilities.

Decorator that turns domain exceptions raised by the services into
HTTPExceptions with consistent logging across every router.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from lexoffice.core.exceptions import LexOfficeException
from lexoffice.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to handle service errors and transform them into HTTPExceptions.

    This centralizes:
    - Mapping LexOfficeException subclasses to their status codes
    - Reporting database constraint violations as 409 conflicts
    - Logging of errors with the exception's details
    - Converting unexpected failures to 500 with a traceback in the logs
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except LexOfficeException as e:
            logger.warning(
                f"{func.__name__} refused: {e.message}",
                extra={
                    "endpoint": func.__name__,
                    "status_code": e.status_code,
                    "error_type": type(e).__name__,
                    **{f"detail_{k}": str(v) for k, v in e.details.items()},
                },
            )
            raise HTTPException(status_code=e.status_code, detail=e.message)

        except IntegrityError as e:
            logger.warning(
                f"{func.__name__} violated a database constraint",
                extra={"endpoint": func.__name__, "error": str(e.orig)},
            )
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Request conflicts with existing data",
            )

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"endpoint": func.__name__, "error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(),
            )

        except Exception as e:
            log_exception_with_context(
                logger,
                f"Unexpected failure in {func.__name__}",
                e,
                endpoint=func.__name__,
                call_kwargs=kwargs,
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {type(e).__name__}",
            )

    return wrapper  # type: ignore

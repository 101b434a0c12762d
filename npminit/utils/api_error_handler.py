"""
Reusable decorator for handling registry request exceptions.

Wraps client methods so that every ``requests`` failure surfaces as one of
the ``ExternalAPIError`` subclasses, logged once at DEBUG with the package name as
context.
"""

import functools
import logging
from typing import Callable, Optional

import requests

from .exceptions import (
    APIServerError,
    APITimeoutError,
    ExternalAPIError,
    RestrictedEnvironmentError,
)


def handle_external_api_errors(service: str):
    """
    Decorator that converts ``requests`` exceptions into ``ExternalAPIError``.

    Usage:
        @handle_external_api_errors(service="npm registry")
        def check_availability(self, package):
            response = self.session.get(url)
            return response.json()

    The decorated method should store the URL it requested on
    ``self.last_url`` so the error can name the endpoint.

    Args:
        service: Name of the external service, used in messages

    Returns:
        Decorated function that raises ``ExternalAPIError`` subclasses only
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            logger = getattr(self, "logger", logging.getLogger(func.__name__))
            context = _extract_context(args, kwargs)

            try:
                return func(self, *args, **kwargs)

            except requests.exceptions.Timeout as e:
                error = APITimeoutError(
                    message=f"Timeout while calling {service}",
                    service=service,
                    endpoint=getattr(self, "last_url", None),
                    timeout_duration=getattr(self, "timeout", None),
                    original_exception=e,
                )
                _log_and_raise(error, logger, context, e)

            except requests.exceptions.ConnectionError as e:
                error = RestrictedEnvironmentError.detect(
                    connection_error=e,
                    service=service,
                    endpoint=getattr(self, "last_url", None),
                )
                _log_and_raise(error, logger, context, e)

            except requests.exceptions.HTTPError as e:
                error = _create_http_exception(
                    e, service, getattr(self, "last_url", None)
                )
                _log_and_raise(error, logger, context, e)

            except requests.exceptions.RequestException as e:
                # Also covers requests.exceptions.JSONDecodeError
                error = ExternalAPIError(
                    message=f"Request failed for {service}",
                    service=service,
                    endpoint=getattr(self, "last_url", None),
                    original_exception=e,
                    suggested_action="Check network connectivity and run npminit again",
                )
                _log_and_raise(error, logger, context, e)

            except ValueError as e:
                error = ExternalAPIError(
                    message=f"Invalid response from {service}",
                    service=service,
                    endpoint=getattr(self, "last_url", None),
                    original_exception=e,
                    suggested_action="Verify the registry URL points at an npm-compatible registry",
                )
                _log_and_raise(error, logger, context, e)

        return wrapper

    return decorator


def _create_http_exception(
    http_error: requests.exceptions.HTTPError,
    service: str,
    endpoint: Optional[str],
) -> ExternalAPIError:
    """Map an HTTP error to a specific exception."""
    response = http_error.response
    status_code = response.status_code if response is not None else None

    if status_code and 500 <= status_code < 600:
        return APIServerError(
            message=f"{service} server error",
            service=service,
            endpoint=endpoint,
            status_code=status_code,
            original_exception=http_error,
        )

    return ExternalAPIError(
        message=f"HTTP error calling {service}",
        service=service,
        endpoint=endpoint,
        original_exception=http_error,
        suggested_action=(
            f"HTTP {status_code} - Check the registry URL or try again later"
            if status_code
            else "Check the registry URL or try again later"
        ),
    )


def _extract_context(args: tuple, kwargs: dict) -> str:
    """Return the package name the call was made for, if any."""
    package = kwargs.get("package") or (args[0] if args else None)
    return str(package) if package else ""


def _log_and_raise(
    error: ExternalAPIError,
    logger: logging.Logger,
    context: str,
    cause: Exception,
):
    """Log ``error`` at DEBUG and raise it chained to ``cause``.

    Callers report the raised error to the user, so the log line only adds
    detail under ``--verbose``.
    """
    log_message = str(error)
    if context:
        log_message = f"[{context}] {log_message}"

    logger.debug(log_message)

    raise error from cause


__all__ = ["handle_external_api_errors"]

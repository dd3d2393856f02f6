"""
Reusable decorator for translating ``requests`` failures into registry errors.

Registry client methods only deal with the happy path; the decorator maps
timeouts, connection failures, HTTP status codes and invalid JSON bodies to
the ``RegistryError`` hierarchy so callers can tell a missing package apart
from a broken network.
"""

import functools
from typing import Callable, Optional

import requests

from .exceptions import (
    RegistryAuthenticationError,
    RegistryConnectionError,
    RegistryError,
    RegistryNotFoundError,
    RegistryRateLimitError,
    RegistryResponseError,
    RegistryServerError,
    RegistryTimeoutError,
)


def handle_registry_errors():
    """
    Decorator that translates registry request exceptions.

    Usage:
        @handle_registry_errors()
        def _get_json(self, url):
            response = self.session.get(url)
            response.raise_for_status()
            return response.json()

    The translated ``RegistryError`` is raised without logging; callers
    decide how a failed request is reported.

    Returns:
        Decorated function that handles all exceptions automatically
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            endpoint = kwargs.get("url") or (args[0] if args else None)

            try:
                return func(self, *args, **kwargs)
            except RegistryError as e:
                error = e
            except requests.exceptions.Timeout as e:
                error = RegistryTimeoutError(
                    message="Timeout while calling the registry",
                    endpoint=endpoint,
                    timeout_duration=getattr(self, "timeout", None),
                    original_exception=e,
                )
            except requests.exceptions.ConnectionError as e:
                error = RegistryConnectionError(
                    message="Connection to the registry failed",
                    endpoint=endpoint,
                    original_exception=e,
                )
            except requests.exceptions.HTTPError as e:
                error = _create_http_exception(e, endpoint)
            except requests.exceptions.JSONDecodeError as e:
                error = RegistryResponseError(
                    message="Registry returned a body that is not valid JSON",
                    endpoint=endpoint,
                    original_exception=e,
                )
            except requests.exceptions.RequestException as e:
                error = RegistryError(
                    message="Registry request failed",
                    endpoint=endpoint,
                    original_exception=e,
                    suggested_action="Check network connectivity and run the report again",
                )

            raise error

        return wrapper

    return decorator


def _create_http_exception(
    http_error: requests.exceptions.HTTPError,
    endpoint: Optional[str],
) -> RegistryError:
    """Map an HTTP error to the matching registry exception."""
    response = http_error.response
    status_code = response.status_code if response is not None else None

    if status_code == 404:
        return RegistryNotFoundError(
            message="Resource not found in the registry (404)",
            endpoint=endpoint,
            original_exception=http_error,
        )

    if status_code in (401, 403):
        return RegistryAuthenticationError(
            message=f"Registry rejected the credentials ({status_code})",
            endpoint=endpoint,
            status_code=status_code,
            original_exception=http_error,
        )

    if status_code == 429:
        retry_after = response.headers.get("Retry-After")
        return RegistryRateLimitError(
            message="Registry rate limit exceeded (429)",
            endpoint=endpoint,
            retry_after=int(retry_after) if retry_after and retry_after.isdigit() else None,
            original_exception=http_error,
        )

    if status_code and 500 <= status_code < 600:
        return RegistryServerError(
            message=f"Registry server error ({status_code})",
            endpoint=endpoint,
            status_code=status_code,
            original_exception=http_error,
        )

    return RegistryError(
        message=f"HTTP error calling the registry ({status_code})" if status_code else "HTTP error calling the registry",
        endpoint=endpoint,
        status_code=status_code,
        original_exception=http_error,
    )


__all__ = ["handle_registry_errors"]

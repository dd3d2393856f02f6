"""
Exception classes for orgsize.

Two unrelated families live here:

- ``SetupError`` and its subclasses describe failures that stop a run before
  any network activity (bad configuration, missing credentials). They map to
  a non-zero exit code.
- ``RegistryError`` and its subclasses describe failures of a single registry
  request. They are absorbed per package (or per listing) and never abort a
  run.

Each registry exception includes:
- Clear error message
- Endpoint context
- Suggested user action
- Original exception preserved for debugging
"""

from typing import Optional


class SetupError(Exception):
    """Base class for errors that prevent a report from starting."""


class ConfigurationError(SetupError):
    """Raised when configuration values are missing or invalid."""


class CredentialsNotFoundError(SetupError):
    """
    Raised when no registry token can be resolved.

    This typically indicates:
    - The .npmrc file does not exist or cannot be read
    - The file has no ``_authToken`` entry for the registry host
    - The entry is present but empty
    """

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message)


class RegistryError(Exception):
    """
    Base exception for all registry request failures.

    This is the parent class for all registry exceptions and should
    be used for generic errors that don't fit other specific categories.
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize RegistryError.

        Args:
            message: Human-readable error message
            endpoint: URL that failed
            status_code: HTTP status code, when one was received
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.endpoint = endpoint
        self.status_code = status_code
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if endpoint:
            error_parts.append(f"Endpoint: {endpoint}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class RegistryTimeoutError(RegistryError):
    """Raised when a registry request times out."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        timeout_duration: Optional[float] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.timeout_duration = timeout_duration

        suggested_action = "Check network connectivity and run the report again"
        if timeout_duration:
            suggested_action += f" (timeout after {timeout_duration}s)"

        super().__init__(
            message=message,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class RegistryConnectionError(RegistryError):
    """
    Raised when the registry cannot be reached.

    This typically indicates:
    - Network connectivity issues
    - DNS resolution failures
    - Proxy or firewall restrictions
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action="Check network connectivity and verify the registry is accessible",
        )


class RegistryAuthenticationError(RegistryError):
    """Raised on 401/403 responses."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        if status_code == 401:
            suggested_action = "Verify the token in .npmrc is valid and not expired"
        elif status_code == 403:
            suggested_action = "Verify the token has read access to this organization"
        else:
            suggested_action = "Check registry credentials and permissions"

        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=status_code,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class RegistryRateLimitError(RegistryError):
    """Raised on 429 responses."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        retry_after: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.retry_after = retry_after

        suggested_action = "Lower --concurrency and run the report again"
        if retry_after:
            suggested_action += f" (retry after {retry_after}s)"

        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=429,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class RegistryNotFoundError(RegistryError):
    """Raised on 404 responses, e.g. a package that does not exist."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=404,
            original_exception=original_exception,
        )


class RegistryServerError(RegistryError):
    """Raised on 5xx responses."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=status_code,
            original_exception=original_exception,
            suggested_action="The registry is experiencing issues. Wait and run the report again",
        )


class RegistryResponseError(RegistryError):
    """Raised when a response body is not valid JSON or has an unexpected shape."""


__all__ = [
    "SetupError",
    "ConfigurationError",
    "CredentialsNotFoundError",
    "RegistryError",
    "RegistryTimeoutError",
    "RegistryConnectionError",
    "RegistryAuthenticationError",
    "RegistryRateLimitError",
    "RegistryNotFoundError",
    "RegistryServerError",
    "RegistryResponseError",
]

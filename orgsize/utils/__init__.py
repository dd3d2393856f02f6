"""
Utility modules for orgsize.

This package contains shared helpers used throughout the orgsize codebase,
including exception handling for registry calls and the HTTP session factory.
"""

from orgsize.utils.api_error_handler import handle_registry_errors
from orgsize.utils.exceptions import (
    ConfigurationError,
    CredentialsNotFoundError,
    RegistryAuthenticationError,
    RegistryConnectionError,
    RegistryError,
    RegistryNotFoundError,
    RegistryRateLimitError,
    RegistryResponseError,
    RegistryServerError,
    RegistryTimeoutError,
    SetupError,
)
from orgsize.utils.http import create_http_session, mount_pool

__all__ = [
    "handle_registry_errors",
    "create_http_session",
    "mount_pool",
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

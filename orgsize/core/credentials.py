"""
Registry credential lookup.

Reads the bearer token for a registry host from the user's ``.npmrc``.
"""
import logging
import os
import re
from typing import Optional
from urllib.parse import urlparse

from orgsize.models import DEFAULT_REGISTRY_URL
from orgsize.utils.exceptions import CredentialsNotFoundError


class CredentialResolver:
    """Resolves the registry auth token from an npm config file."""

    NPMRC_FILENAME = ".npmrc"

    def __init__(self, registry_url: str = DEFAULT_REGISTRY_URL, npmrc_path: Optional[str] = None):
        self.registry_url = registry_url
        self.npmrc_path = npmrc_path
        self.logger = logging.getLogger(self.__class__.__name__)

    def get_home_directory(self) -> str:
        """Return HOME, falling back to USERPROFILE."""
        return os.environ.get("HOME") or os.environ.get("USERPROFILE") or ""

    def get_npmrc_path(self) -> str:
        if self.npmrc_path:
            return os.path.abspath(os.path.expanduser(self.npmrc_path))
        return os.path.abspath(os.path.join(self.get_home_directory(), self.NPMRC_FILENAME))

    def token_pattern(self) -> "re.Pattern[str]":
        """Pattern matching ``//<host>/:_authToken=<token>`` for the registry host."""
        host = urlparse(self.registry_url).netloc or "registry.npmjs.org"
        return re.compile(rf"//{re.escape(host)}/:_authToken=(.*)")

    def find_token(self, content: str) -> Optional[str]:
        match = self.token_pattern().search(content)
        if not match:
            return None
        token = match.group(1).strip()
        return token or None

    def resolve(self) -> str:
        """Return the registry token or raise CredentialsNotFoundError."""
        path = self.get_npmrc_path()

        try:
            with open(path, "r", encoding="utf-8") as f:
                content = f.read()
        except OSError as e:
            self.logger.error(f"Failed to read npm token from {path}: {e}")
            raise CredentialsNotFoundError(f"Failed to retrieve npm token from {path}", path=path) from e

        token = self.find_token(content)
        if token is None:
            raise CredentialsNotFoundError(f"Failed to retrieve npm token from {path}", path=path)

        self.logger.debug(f"Resolved registry token from {path}")
        return token

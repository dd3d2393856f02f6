"""
npm registry client.

Lists the packages of an organization and looks up the unpacked size of
each package's latest version.
"""

import logging
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from orgsize.models import FetchOutcome, FetchStatus, PackageSizeInfo, RegistryConfig
from orgsize.utils.api_error_handler import handle_registry_errors
from orgsize.utils.exceptions import RegistryError, RegistryNotFoundError, RegistryResponseError
from orgsize.utils.http import create_http_session, mount_pool


class NpmRegistryClient:
    """Read-only client for the npm registry HTTP API."""

    def __init__(self, config: RegistryConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.logger = logging.getLogger(self.__class__.__name__)
        self.base_url = config.base_url
        self.timeout = config.timeout
        self._owns_session = session is None
        self.pool_size = max(config.concurrency, 10)
        self.session = session or self._create_session()

    def _create_session(self) -> requests.Session:
        return create_http_session(
            user_agent=self.config.user_agent,
            pool_size=self.pool_size,
            auth_token=self.config.token,
        )

    def ensure_pool_size(self, size: int):
        """Grow the connection pool so ``size`` concurrent lookups each keep a connection."""
        if not self._owns_session or size <= self.pool_size:
            return
        mount_pool(self.session, size)
        self.pool_size = size

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        self.session.close()

    def org_packages_url(self, org: str) -> str:
        return f"{self.base_url}/-/org/{quote(org, safe='')}/package"

    def package_url(self, package: str) -> str:
        return f"{self.base_url}/{quote(package, safe='')}"

    @handle_registry_errors()
    def _get_json(self, url: str) -> Any:
        """GET a registry document and decode its JSON body."""
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def list_org_packages(self, org: str) -> List[str]:
        """Return the names of all packages owned by ``org``.

        Any failure is logged and yields an empty list.
        """
        url = self.org_packages_url(org)
        try:
            data = self._get_json(url)
            if not isinstance(data, dict):
                raise RegistryResponseError(
                    message=f"Unexpected response format: expected an object, got {type(data).__name__}",
                    endpoint=url,
                )
        except RegistryError as e:
            self.logger.error(f"Failed to list packages for organization {org}: {e.message}")
            return []

        self.logger.info(f"Organization {org} has {len(data)} packages")
        return list(data.keys())

    def fetch_package_size(self, package: str) -> FetchOutcome:
        """Look up the unpacked size of the latest version of ``package``."""
        try:
            document = self._get_json(self.package_url(package))
        except RegistryNotFoundError:
            self.logger.warning(f"Package {package} not found (404)")
            return FetchOutcome(package=package, status=FetchStatus.NOT_FOUND, error="not found")
        except RegistryError as e:
            self.logger.error(f"Failed to fetch size for package {package}: {e.message}")
            return FetchOutcome(package=package, status=FetchStatus.FAILED, error=str(e))

        raw_size = self.extract_unpacked_size(document)
        if raw_size is None:
            self.logger.info(f"No unpacked size published for the latest version of {package}")
            return FetchOutcome(package=package, status=FetchStatus.NO_SIZE)

        return FetchOutcome(
            package=package,
            status=FetchStatus.OK,
            info=PackageSizeInfo.from_raw_size(package, raw_size),
        )

    def get_package_size(self, package: str) -> Optional[PackageSizeInfo]:
        """Return the package's size info, or None when it cannot be determined."""
        return self.fetch_package_size(package).info

    @staticmethod
    def extract_unpacked_size(document: Any) -> Optional[int]:
        """Read ``versions[dist-tags.latest].dist.unpackedSize`` from a packument."""
        if not isinstance(document, dict):
            return None

        dist_tags = document.get("dist-tags")
        latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
        if isinstance(latest, bool) or not isinstance(latest, (str, int, float)) or not latest:
            return None
        # version keys are strings; a numeric tag still names one
        if isinstance(latest, float) and latest.is_integer():
            latest = int(latest)
        latest = str(latest)

        versions = document.get("versions")
        version_info = versions.get(latest) if isinstance(versions, dict) else None
        if not isinstance(version_info, dict):
            return None

        dist: Dict[str, Any] = version_info.get("dist") or {}
        size = dist.get("unpackedSize") if isinstance(dist, dict) else None

        # bool is an int subclass but never a size
        if isinstance(size, bool) or not isinstance(size, (int, float)):
            return None
        if isinstance(size, float):
            if not size.is_integer():
                return None
            size = int(size)
        if size < 0:
            return None
        return size

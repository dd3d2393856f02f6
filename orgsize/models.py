"""
Data models for orgsize.

Dataclass-based models shared by the registry client, the aggregator and
the reporter.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from orgsize.formatting import format_bytes


DEFAULT_REGISTRY_URL = "https://registry.npmjs.org/"


class FetchStatus(Enum):
    """Outcome of a single package size lookup"""
    OK = "ok"
    NOT_FOUND = "not_found"
    NO_SIZE = "no_size"
    FAILED = "failed"


@dataclass(frozen=True)
class PackageSizeInfo:
    """Unpacked size of the latest version of one package"""
    name: str
    raw_size: int
    size: str

    @classmethod
    def from_raw_size(cls, name: str, raw_size: int) -> "PackageSizeInfo":
        return cls(name=name, raw_size=raw_size, size=format_bytes(raw_size))


@dataclass
class FetchOutcome:
    """Result of one package lookup, successful or not"""
    package: str
    status: FetchStatus
    info: Optional[PackageSizeInfo] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK


@dataclass
class RegistryConfig:
    """Connection settings for the registry client and aggregator"""
    token: str
    registry_url: str = DEFAULT_REGISTRY_URL
    timeout: float = 30
    concurrency: int = 0
    user_agent: str = "orgsize"

    @property
    def base_url(self) -> str:
        return self.registry_url.rstrip("/")


@dataclass
class AggregationResult:
    """Sorted package sizes plus every individual outcome of a run"""
    packages: List[PackageSizeInfo]
    outcomes: List[FetchOutcome] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.outcomes)

    def count(self, status: FetchStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

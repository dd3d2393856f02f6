"""
HTTP session helpers.

This module provides the shared ``requests`` session factory used by the
registry client.
"""

from typing import Optional

import requests
from requests.adapters import HTTPAdapter


def mount_pool(session: requests.Session, pool_size: int) -> None:
    """Mount single-attempt adapters holding ``pool_size`` connections per host."""
    adapter = HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size, max_retries=0)
    for prefix in ("http://", "https://"):
        replaced = session.adapters.get(prefix)
        session.mount(prefix, adapter)
        if replaced is not None and replaced is not adapter and replaced not in session.adapters.values():
            replaced.close()


def create_http_session(
    user_agent: str,
    pool_size: int = 10,
    auth_token: Optional[str] = None,
) -> requests.Session:
    """
    Create a configured HTTP session with standard headers.

    Requests are attempted once; the adapter is mounted only to size the
    connection pool for the worker pool that shares the session.

    Args:
        user_agent: User-Agent string for the session
        pool_size: Number of pooled connections per host
        auth_token: Optional registry token (sent as a Bearer Authorization header)

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    mount_pool(session, pool_size)

    headers = {"User-Agent": user_agent, "Accept": "application/json"}

    if auth_token:
        headers["Authorization"] = f"Bearer {auth_token}"

    session.headers.update(headers)

    return session

"""Shared HTTP client for upstream calls."""

import requests
from requests.adapters import HTTPAdapter

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a shared requests.Session with pooled connections.

    Retries are disabled: a failed upstream call surfaces to the caller at once.
    """
    global _session
    if _session is None:
        _session = requests.Session()
        adapter = HTTPAdapter(pool_connections=10, pool_maxsize=20, max_retries=0)
        _session.mount("http://", adapter)
        _session.mount("https://", adapter)
    return _session

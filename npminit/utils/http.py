"""
HTTP session construction.

The registry check is a single request that is deliberately not retried, so
the session only carries headers. Proxies are passed per request because
request-level proxies take precedence over HTTP(S)_PROXY from the
environment, while session-level ones do not.
"""

from typing import Dict, Optional

import requests


def create_http_session(
    user_agent: str,
    additional_headers: Optional[Dict[str, str]] = None,
) -> requests.Session:
    """
    Create a configured HTTP session with standard headers.

    Args:
        user_agent: User-Agent string for the session
        additional_headers: Optional additional headers to add to the session

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()

    headers = {"User-Agent": user_agent, "Accept": "application/json"}
    if additional_headers:
        headers.update(additional_headers)
    session.headers.update(headers)

    return session


def build_proxies(proxy_url: Optional[str]) -> Optional[Dict[str, str]]:
    """Return a ``requests`` proxies mapping routing all traffic via ``proxy_url``."""
    if not proxy_url:
        return None
    return {"http": proxy_url, "https": proxy_url}

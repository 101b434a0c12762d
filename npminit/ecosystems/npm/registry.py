"""
npm registry availability checks.

The registry answers ``GET /<name>`` with the package document when the
name is taken and with ``{"error": "Not found"}`` when it is free. The
presence of that ``error`` field is the only availability signal used.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from npminit import __version__
from npminit.utils.api_error_handler import handle_external_api_errors
from npminit.utils.http import build_proxies, create_http_session
from npminit.ecosystems.npm.naming import encode_uri_component

DEFAULT_REGISTRY_URL = "https://registry.npmjs.com"


@dataclass
class RegistryAvailability:
    """Result of an availability check for one package name."""

    package: str
    available: bool
    status_code: int


class NpmRegistryClient:
    """Minimal npm registry client used to check package-name availability."""

    SERVICE_NAME = "npm registry"

    def __init__(
        self,
        registry_url: str = DEFAULT_REGISTRY_URL,
        proxy_url: Optional[str] = None,
        timeout: float = 30,
        session: Optional[requests.Session] = None,
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.registry_url = registry_url.rstrip("/")
        self.proxy_url = proxy_url or None
        self.timeout = timeout
        self.session = session or create_http_session(user_agent=f"npminit/{__version__}")
        self.last_url: Optional[str] = None

    def package_url(self, package: str) -> str:
        # Scoped names keep their "@" but the "/" must be encoded
        return f"{self.registry_url}/{encode_uri_component(package).replace('%40', '@', 1)}"

    @handle_external_api_errors(service=SERVICE_NAME)
    def check_availability(self, package: str) -> RegistryAvailability:
        """Ask the registry whether ``package`` is still free.

        Raises:
            ExternalAPIError: on network failure, a 5xx answer or a body
                that is not a JSON object.
        """
        self.last_url = self.package_url(package)
        self.logger.debug(
            "GET %s%s", self.last_url, f" via proxy {self.proxy_url}" if self.proxy_url else ""
        )

        response = self.session.get(
            self.last_url,
            proxies=build_proxies(self.proxy_url),
            timeout=self.timeout,
        )
        if response.status_code >= 500:
            response.raise_for_status()

        body = response.json()
        if not isinstance(body, dict):
            raise ValueError(f"expected a JSON object, got {type(body).__name__}")

        available = self._is_not_found(body)
        self.logger.debug("%s: status=%s available=%s", package, response.status_code, available)
        return RegistryAvailability(package=package, available=available, status_code=response.status_code)

    @staticmethod
    def _is_not_found(body: Dict[str, Any]) -> bool:
        return bool(body.get("error"))

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

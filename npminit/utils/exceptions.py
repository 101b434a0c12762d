"""
Custom exceptions for npminit.

Two families live here:

- ``InitializerError`` and its subclasses cover the local workflow
  (git lookup, manifest I/O, package-name validation).
- ``ExternalAPIError`` and its subclasses cover the registry request, with
  enough context (service, endpoint, suggested action, original error) to
  give the user something actionable when the network gets in the way.
"""

from typing import List, Optional


class InitializerError(Exception):
    """Base exception for errors raised while initializing a package."""


class AuthorLookupError(InitializerError):
    """Raised when the default author name cannot be read from git."""


class ManifestError(InitializerError):
    """Base exception for manifest file errors."""

    def __init__(self, message: str, path: str, original_exception: Optional[Exception] = None):
        self.path = path
        self.original_exception = original_exception
        if original_exception:
            message = f"{message}: {original_exception}"
        super().__init__(message)


class ManifestReadError(ManifestError):
    """Raised when an existing manifest cannot be read or parsed."""


class ManifestWriteError(ManifestError):
    """Raised when the manifest cannot be written."""


class InvalidPackageNameError(InitializerError):
    """
    Raised when a package name fails npm naming rules.

    Both hard errors and warnings end up in ``messages``; a name with
    warnings is still unusable for a new package.
    """

    def __init__(self, name: str, messages: List[str]):
        self.name = name
        self.messages = list(messages)
        super().__init__(f"Invalid package name {name!r}: " + "; ".join(self.messages))


class NameAttemptsExhaustedError(InitializerError):
    """Raised when every candidate name offered by the user was taken."""

    def __init__(self, attempts: int, last_name: str):
        self.attempts = attempts
        self.last_name = last_name
        super().__init__(
            f"No available package name after {attempts} attempt(s) "
            f"(last tried: {last_name!r})"
        )


class ExternalAPIError(Exception):
    """
    Base exception for all registry request errors.

    Used directly for failures that don't fit a more specific subclass,
    such as a response body that is not JSON.
    """

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        """
        Initialize ExternalAPIError.

        Args:
            message: Human-readable error message
            service: Name of the external service (e.g., "npm registry")
            endpoint: URL that failed
            original_exception: The original exception that was caught
            suggested_action: Suggested action for the user to resolve the issue
        """
        self.message = message
        self.service = service
        self.endpoint = endpoint
        self.original_exception = original_exception
        self.suggested_action = suggested_action

        error_parts = [message]

        if service:
            error_parts.append(f"Service: {service}")

        if endpoint:
            error_parts.append(f"Endpoint: {endpoint}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class APITimeoutError(ExternalAPIError):
    """Raised when the registry request times out."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        timeout_duration: Optional[float] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.timeout_duration = timeout_duration

        suggested_action = "Check network connectivity and run npminit again"
        if timeout_duration:
            suggested_action += f" (timed out after {timeout_duration}s)"

        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action=suggested_action,
        )


class APIConnectionError(ExternalAPIError):
    """
    Raised when no connection to the registry could be established.

    Typical causes are DNS failures, an unreachable registry or a
    misconfigured proxy.
    """

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        suggested_action: Optional[str] = None,
    ):
        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action=suggested_action
            or "Check network connectivity and verify the registry is accessible",
        )


class RestrictedEnvironmentError(APIConnectionError):
    """
    Raised when a connection failure looks like a network restriction.

    Corporate networks frequently require a proxy for outbound traffic,
    which is exactly the situation the proxy prompt exists for.
    """

    _ACTIONS = {
        "dns": "DNS resolution failed. If you are behind a corporate network, "
               "run npminit again and answer 'y' to the proxy question",
        "proxy": "Proxy connection failed. Check the proxy URL and any "
                 "credentials it requires",
        "firewall": "Connection refused. A firewall may be blocking the "
                    "registry; try again through a proxy",
        "unknown": "Network connection failed. This may be a firewall or proxy "
                   "restriction; verify access to the registry",
    }

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        original_exception: Optional[Exception] = None,
        restriction_type: Optional[str] = None,
    ):
        """
        Initialize RestrictedEnvironmentError.

        Args:
            message: Human-readable error message
            service: Name of the external service
            endpoint: URL that failed
            original_exception: The original connection exception
            restriction_type: Type of restriction detected
                (dns, proxy, firewall, unknown)
        """
        self.restriction_type = restriction_type or "unknown"
        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action=self._ACTIONS.get(self.restriction_type, self._ACTIONS["unknown"]),
        )

    @classmethod
    def detect(
        cls,
        connection_error: Exception,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
    ) -> "RestrictedEnvironmentError":
        """
        Classify a connection error by inspecting its message.

        Args:
            connection_error: The original connection exception
            service: Name of the external service
            endpoint: URL that failed

        Returns:
            A RestrictedEnvironmentError describing the likely cause
        """
        error_msg = str(connection_error).lower()

        if any(
            pattern in error_msg
            for pattern in [
                "name resolution",
                "nodename nor servname provided",
                "getaddrinfo failed",
                "name or service not known",
                "dns",
            ]
        ):
            restriction_type, message = "dns", "DNS resolution failed"
        elif any(
            pattern in error_msg
            for pattern in ["proxy", "407 proxy authentication", "tunnel connection failed"]
        ):
            restriction_type, message = "proxy", "Proxy connection failed"
        elif "connection refused" in error_msg or "errno 111" in error_msg:
            restriction_type, message = "firewall", "Connection refused"
        else:
            restriction_type, message = "unknown", "Network connection failed"

        return cls(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=connection_error,
            restriction_type=restriction_type,
        )


class APIServerError(ExternalAPIError):
    """Raised when the registry answers with a 5xx status."""

    def __init__(
        self,
        message: str,
        service: Optional[str] = None,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.status_code = status_code
        super().__init__(
            message=message,
            service=service,
            endpoint=endpoint,
            original_exception=original_exception,
            suggested_action="The registry is experiencing issues. Wait and run npminit again",
        )


__all__ = [
    "InitializerError",
    "AuthorLookupError",
    "ManifestError",
    "ManifestReadError",
    "ManifestWriteError",
    "InvalidPackageNameError",
    "NameAttemptsExhaustedError",
    "ExternalAPIError",
    "APITimeoutError",
    "APIConnectionError",
    "RestrictedEnvironmentError",
    "APIServerError",
]

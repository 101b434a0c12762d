"""
Utility modules for npminit.

Shared exception types, the registry error-handling decorator, HTTP session
construction and logging setup.
"""

from npminit.utils.api_error_handler import handle_external_api_errors
from npminit.utils.exceptions import (
    APIConnectionError,
    APIServerError,
    APITimeoutError,
    AuthorLookupError,
    ExternalAPIError,
    InitializerError,
    InvalidPackageNameError,
    ManifestError,
    ManifestReadError,
    ManifestWriteError,
    NameAttemptsExhaustedError,
    RestrictedEnvironmentError,
)

__all__ = [
    "handle_external_api_errors",
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

"""NPM ecosystem helpers."""

from .manifest import read_manifest, write_manifest
from .naming import validate_package_name
from .registry import NpmRegistryClient

__all__ = ["read_manifest", "write_manifest", "validate_package_name", "NpmRegistryClient"]

"""Reading, merging and writing the ``package.json`` manifest."""

from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from npminit.utils.exceptions import ManifestReadError, ManifestWriteError

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_FIELDS: Dict[str, Any] = {
    "version": "1.0.0",
    "description": "",
    "main": "index.js",
    "scripts": {
        "test": 'echo "Error: no test specified" && exit 1',
    },
}


@dataclass
class ManifestWriteResult:
    """What ``write_manifest`` did."""

    path: Path
    created: bool
    manifest: Dict[str, Any]


def read_manifest(path: Path) -> Optional[Dict[str, Any]]:
    """Return the parsed manifest at ``path``, or ``None`` if there is none.

    Raises:
        ManifestReadError: if the file exists but cannot be read, is not
            valid JSON, or does not hold a JSON object.
    """
    if not path.exists():
        return None

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ManifestReadError(f"Error reading {path.name} file", str(path), e) from e

    if not isinstance(data, dict):
        raise ManifestReadError(
            f"Error reading {path.name} file: expected a JSON object, got {type(data).__name__}",
            str(path),
        )
    return data


def build_manifest(
    name: str,
    author: str,
    license: str,
    existing: Optional[Dict[str, Any]] = None,
    defaults: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Merge name, author and license into ``existing`` or a fresh skeleton.

    Every other field of an existing manifest is kept as is, in its
    original position.
    """
    if existing is not None:
        manifest = dict(existing)
        manifest["name"] = name
        manifest["author"] = author
        manifest["license"] = license
        return manifest

    fields = copy.deepcopy(DEFAULT_MANIFEST_FIELDS if defaults is None else defaults)
    manifest = {"name": name}
    manifest.update(fields)
    manifest["author"] = author
    manifest["license"] = license
    return manifest


def write_manifest(
    path: Path,
    name: str,
    author: str,
    license: str,
    defaults: Optional[Dict[str, Any]] = None,
) -> ManifestWriteResult:
    """Create or update the manifest at ``path``.

    Nothing is written when the existing file cannot be parsed.

    Raises:
        ManifestReadError: if an existing manifest is unreadable.
        ManifestWriteError: if the merged manifest cannot be written.
    """
    existing = read_manifest(path)
    manifest = build_manifest(name, author, license, existing=existing, defaults=defaults)

    try:
        path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    except OSError as e:
        raise ManifestWriteError(
            f"An error occurred while updating or creating {path.name}", str(path), e
        ) from e

    logger.debug("Wrote %s (created=%s)", path, existing is None)
    return ManifestWriteResult(path=path, created=existing is None, manifest=manifest)

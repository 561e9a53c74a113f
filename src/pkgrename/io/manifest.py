"""
Reading and patching JSON project manifests.
"""

import json
import warnings
from pathlib import Path
from typing import Any, Dict

from ..exceptions import ManifestError

PACKAGE_MANIFEST = "package.json"
SECONDARY_MANIFEST = "manifest.json"

# Field preferred over "name" when looking up the current identifier
NAME_FIELDS = ("pythonPackageName", "name")


def load_manifest(path: Path) -> Dict[str, Any]:
    """
    Load a JSON manifest object.

    Raises
    ------
    ManifestError
        If the file is missing, is not valid JSON or is not an object
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ManifestError(f"Manifest not found: {path}")
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in {path}: {e}")

    if not isinstance(data, dict):
        raise ManifestError(f"Expected a JSON object in {path}")
    return data


def save_manifest(path: Path, data: Dict[str, Any]):
    """Write ``data`` back with 2-space indentation, keeping key order."""
    with open(path, 'w', encoding='utf-8') as f:
        f.write(json.dumps(data, indent=2, ensure_ascii=False))


def read_old_name(root) -> str:
    """
    Current package identifier of the project at ``root``.

    Uses ``pythonPackageName`` from ``package.json`` and falls back to
    ``name``.
    """
    path = Path(root) / PACKAGE_MANIFEST
    data = load_manifest(path)
    for key in NAME_FIELDS:
        value = data.get(key)
        if isinstance(value, str) and value:
            return value
    raise ManifestError(f"No {' or '.join(NAME_FIELDS)} field in {path}")


def update_description(root, description: str) -> list:
    """
    Overwrite ``description`` in the project's manifests.

    ``package.json`` must exist; ``manifest.json`` is updated only when
    present.

    Returns
    -------
    list of Path
        Manifests that were rewritten
    """
    root = Path(root)
    updated = []
    for name in (PACKAGE_MANIFEST, SECONDARY_MANIFEST):
        path = root / name
        if name == SECONDARY_MANIFEST and not path.exists():
            continue
        data = load_manifest(path)
        if 'description' not in data:
            warnings.warn(f"Adding a description field to {path}", UserWarning)
        data['description'] = description
        save_manifest(path, data)
        updated.append(path)
    return updated

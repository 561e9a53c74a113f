"""
Project manifest input/output.

``package.json`` supplies the current package identifier; it and the
optional ``manifest.json`` receive the new description.
"""

from pkgrename.io.manifest import (
    PACKAGE_MANIFEST,
    SECONDARY_MANIFEST,
    load_manifest,
    save_manifest,
    read_old_name,
    update_description,
)

__all__ = [
    "PACKAGE_MANIFEST",
    "SECONDARY_MANIFEST",
    "load_manifest",
    "save_manifest",
    "read_old_name",
    "update_description",
]

# flake8: noqa: F401
from .package_json import (
    get_manifest_version,
    manifest_path,
    read_manifest,
    update_manifest_version,
    write_manifest,
)

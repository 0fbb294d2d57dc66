import json
import logging
import os
from typing import Optional

from ..config import DEFAULT_MANIFEST_FILE

logger = logging.getLogger(__name__)


def manifest_path(project_path: str, manifest_file: str = DEFAULT_MANIFEST_FILE) -> str:
    return os.path.join(project_path, manifest_file)


def read_manifest(path: str) -> Optional[dict]:
    """Reads a json manifest, None if it is missing, unreadable or not an object."""
    if not os.path.isfile(path):
        logger.debug(f"Manifest {path} does not exist.")
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read manifest {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Manifest {path} does not contain a json object.")
        return None
    return data


def write_manifest(path: str, data: dict):
    with open(path, "w", encoding="utf-8") as f:
        f.write(json.dumps(data, indent=2, ensure_ascii=False) + "\n")


def get_manifest_version(
    project_path: str, manifest_file: str = DEFAULT_MANIFEST_FILE
) -> Optional[str]:
    data = read_manifest(manifest_path(project_path, manifest_file))
    if data is None:
        return None
    version = data.get("version")
    return version if isinstance(version, str) else None


def update_manifest_version(
    version: str,
    project_path: str,
    manifest_file: str = DEFAULT_MANIFEST_FILE,
) -> bool:
    """Sets the version field of the manifest, everything else is kept as is.

    Returns:
        bool: False if the manifest is missing, unparsable or not writable
    """
    path = manifest_path(project_path, manifest_file)
    data = read_manifest(path)
    if data is None:
        return False

    data["version"] = version
    try:
        write_manifest(path, data)
    except OSError as e:
        logger.warning(f"Could not write manifest {path}: {e}")
        return False

    logger.info(f"Updated version in {path} to {version}")
    return True

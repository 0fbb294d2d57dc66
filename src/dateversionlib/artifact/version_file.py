"""Generated source file exposing build metadata to the runtime."""

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime
from string import Template
from typing import Optional

from ..config import DEFAULT_ARTIFACT_PATH
from ..utils.date import to_epoch_millis, to_iso_millis

logger = logging.getLogger(__name__)

GENERATOR_NAME = "dateversion"

TYPESCRIPT_TEMPLATE = Template(
    """// Auto-generated version file
// Do not edit manually - this file is updated by ${generator}

export const BUILD_VERSION = ${version};
export const BUILD_DATE = ${date};
export const BUILD_TIMESTAMP = ${timestamp};
export const BUILD_INFO = {
  version: BUILD_VERSION,
  date: BUILD_DATE,
  timestamp: BUILD_TIMESTAMP,
};

// Helper function to get readable build date
export const getBuildDateString = (): string => {
  return new Date(BUILD_TIMESTAMP).toLocaleDateString();
};

// Helper function to get version display string
export const getVersionDisplayString = (): string => {
  return BUILD_VERSION.split('-')[0] ?? '';
};
"""
)

PYTHON_TEMPLATE = Template(
    '''# Auto-generated version file
# Do not edit manually - this file is updated by ${generator}
from datetime import datetime

BUILD_VERSION = ${version}
BUILD_DATE = ${date}
BUILD_TIMESTAMP = ${timestamp}
BUILD_INFO = {
    "version": BUILD_VERSION,
    "date": BUILD_DATE,
    "timestamp": BUILD_TIMESTAMP,
}


def get_build_date_string() -> str:
    """Build date in the locale's date representation."""
    return datetime.fromtimestamp(BUILD_TIMESTAMP / 1000).strftime("%x")


def get_version_display_string() -> str:
    """Version without the release type and build number suffix."""
    return BUILD_VERSION.split("-")[0]
'''
)

templates = {"typescript": TYPESCRIPT_TEMPLATE, "python": PYTHON_TEMPLATE}
supported_languages = list(templates.keys())


@dataclass(frozen=True)
class BuildInfo:
    version: str
    date: str
    timestamp: int

    @classmethod
    def from_version(cls, version: str, now: Optional[datetime] = None):
        now = now or datetime.now().astimezone()
        return cls(version=version, date=to_iso_millis(now), timestamp=to_epoch_millis(now))

    def as_dict(self) -> dict:
        return {"version": self.version, "date": self.date, "timestamp": self.timestamp}


def get_version_display_string(version: str) -> str:
    return version.split("-", 1)[0]


def get_build_date_string(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp / 1000).strftime("%x")


def language_for_path(path: str) -> str:
    return "python" if path.endswith(".py") else "typescript"


def render_version_file(build_info: BuildInfo, language: str = "typescript") -> str:
    if language not in templates:
        raise ValueError(
            f"Unsupported language {language}, use one of {', '.join(templates)}"
        )
    # json string literals are valid in both typescript and python
    return templates[language].substitute(
        generator=GENERATOR_NAME,
        version=json.dumps(build_info.version),
        date=json.dumps(build_info.date),
        timestamp=build_info.timestamp,
    )


def create_version_file(
    version: str,
    project_path: str,
    output_path: str = DEFAULT_ARTIFACT_PATH,
    now: Optional[datetime] = None,
) -> bool:
    """Writes the build metadata file, creating missing directories.

    Args:
        version (str): The version to expose
        project_path (str): Base for relative output paths
        output_path (str): Target file, the language follows from its suffix
        now (datetime, optional): Build instant, defaults to now

    Returns:
        bool: True if the file was written
    """
    path = os.path.join(project_path, output_path)
    try:
        content = render_version_file(
            BuildInfo.from_version(version, now), language_for_path(path)
        )
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not create version file {path}: {e}")
        return False

    logger.info(f"Version file {path} written for {version}")
    return True

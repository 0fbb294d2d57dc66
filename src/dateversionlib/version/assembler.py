"""Date based version strings.

Two shapes are produced::

    YY.MM.DD.N          clean/release build (empty release type)
    YY.MM.DD-TYPE.N     typed build, e.g. 25.12.26-dev.3

YY are the last two digits of the year, MM and DD are zero padded and N is
the build number in plain decimal.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..utils.errors import InvalidBuildNumberError, InvalidReleaseTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersionRequest:
    release_type: str
    date: date
    build_number: int


@dataclass(frozen=True)
class AssemblyResult:
    version: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.version is not None


def is_clean_release_type(release_type: Optional[str]) -> bool:
    return release_type is None or release_type.strip() == ""


def validate_release_type(release_type: str) -> str:
    if not isinstance(release_type, str):
        raise InvalidReleaseTypeError(release_type)
    if not is_clean_release_type(release_type) and any(
        c.isspace() for c in release_type
    ):
        raise InvalidReleaseTypeError(release_type)
    return release_type


def validate_build_number(build_number) -> int:
    # bool is an int subclass but never a meaningful build number
    if (
        isinstance(build_number, bool)
        or not isinstance(build_number, int)
        or build_number < 0
    ):
        raise InvalidBuildNumberError(build_number)
    return build_number


def date_version(day: date) -> str:
    return f"{day.year % 100:02d}.{day.month:02d}.{day.day:02d}"


def assemble_version(release_type: str, day: date, build_number: int) -> str:
    validate_release_type(release_type)
    validate_build_number(build_number)

    if is_clean_release_type(release_type):
        return f"{date_version(day)}.{build_number}"
    return f"{date_version(day)}-{release_type}.{build_number}"


def assemble(request: VersionRequest) -> str:
    return assemble_version(request.release_type, request.date, request.build_number)


def try_assemble(request: VersionRequest) -> AssemblyResult:
    """Like assemble but reports failures as a result instead of raising.

    A failed result carries no version at all, never an empty string, so
    callers cannot mistake it for a legitimately produced version.
    """
    try:
        return AssemblyResult(version=assemble(request))
    except Exception as e:
        logger.debug(f"Version assembly failed for {request}: {e}")
        return AssemblyResult(error=str(e))

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..scm import CommitCounter, GitCommitCounter
from .assembler import validate_build_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildNumberResult:
    build_number: int
    override_used: bool = False
    source_available: bool = True


def resolve_build_number(
    day: date,
    project_path: str,
    override: Optional[int] = None,
    counter: Optional[CommitCounter] = None,
) -> BuildNumberResult:
    """Determines the build number for day.

    An override is returned unchanged and the history is not consulted.
    Otherwise the commits of day reachable from HEAD are counted; if the
    history cannot be read the build number is 0. Nothing is cached, every
    call queries the counter again.

    Args:
        day (date): Day to count commits for
        project_path (str): Directory to evaluate the history in
        override (int, optional): Fixed build number
        counter (CommitCounter, optional): Defaults to a GitCommitCounter

    Raises:
        InvalidBuildNumberError: If the override is negative or not an int
    """
    if override is not None:
        return BuildNumberResult(
            build_number=validate_build_number(override), override_used=True
        )

    counter = counter or GitCommitCounter()
    try:
        count = counter.count_commits(day, project_path)
    except Exception as e:
        logger.debug(f"Commit counter {type(counter).__name__} failed: {e}")
        count = None

    if count is None or count < 0:
        return BuildNumberResult(build_number=0, source_available=False)

    logger.debug(f"Found {count} commits on {day} in {project_path}")
    return BuildNumberResult(build_number=count)

import logging
import os
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, Union

from ..utils.date import day_bounds, parse_day

logger = logging.getLogger(__name__)


class CommitCounter(ABC):
    @abstractmethod
    def count_commits(self, day: date, project_path: str) -> Optional[int]:
        """Number of commits reachable from HEAD made on day.

        Returns None if the history is not available.
        """
        pass


class StaticCommitCounter(CommitCounter):
    """Returns a fixed count, None simulates a missing history."""

    def __init__(self, count: Optional[int]):
        self.count = count
        self.calls = []

    def count_commits(self, day: date, project_path: str) -> Optional[int]:
        self.calls.append((day, project_path))
        return self.count


def parse_count_output(output: Optional[str]) -> Optional[int]:
    if output is None:
        return None
    raw = output.strip()
    if raw == "":
        return 0
    try:
        count = int(raw)
    except ValueError:
        logger.debug(f"Unexpected output of git rev-list: {raw!r}")
        return None
    return count if count >= 0 else None


class GitCommitCounter(CommitCounter):
    """Counts commits using git rev-list. Never modifies the repository."""

    def __init__(self, search_parent_directories: bool = True):
        self.search_parent_directories = search_parent_directories

    def count_commits(self, day: date, project_path: str) -> Optional[int]:
        since, until = day_bounds(day)
        try:
            # GitPython raises ImportError if no git binary is found
            from git import Repo
            from git.exc import GitError, NoSuchPathError
        except ImportError as e:
            logger.debug(f"GitPython not usable: {e}")
            return None

        try:
            repo = Repo(
                project_path,
                search_parent_directories=self.search_parent_directories,
            )
        except (GitError, NoSuchPathError, OSError) as e:
            logger.debug(f"No git repository at {project_path}: {e!r}")
            return None

        try:
            with repo:
                output = repo.git.rev_list(
                    "--count", f"--since={since}", f"--until={until}", "HEAD"
                )
        except (GitError, OSError) as e:
            logger.debug(f"git rev-list failed in {project_path}: {e}")
            return None

        return parse_count_output(output)


def get_git_commit_count(
    day: Union[str, date],
    project_path: Optional[str] = None,
    counter: Optional[CommitCounter] = None,
) -> int:
    """Number of commits made on day in the repository at project_path.

    Args:
        day (str | date): YYYY-MM-DD or a date
        project_path (str, optional): Defaults to the current working directory

    Returns:
        int: The count, 0 if the history cannot be read
    """
    counter = counter or GitCommitCounter()
    project_path = project_path or os.getcwd()
    try:
        count = counter.count_commits(parse_day(day), project_path)
    except Exception as e:
        logger.debug(f"Counting commits failed: {e}")
        return 0
    return count if count is not None else 0

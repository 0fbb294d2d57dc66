# flake8: noqa: F401
from .commit_counter import (
    CommitCounter,
    GitCommitCounter,
    StaticCommitCounter,
    get_git_commit_count,
    parse_count_output,
)

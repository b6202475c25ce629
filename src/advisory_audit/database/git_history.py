# advisory_audit/database/git_history.py

import logging
import os
from typing import Optional

from .protocol import CommitInfo
from ..exceptions import DatabaseError

try:
    from git import Repo, InvalidGitRepositoryError, NoSuchPathError
except ImportError:
    raise ImportError(
        "GitPython is required but not installed. Please install it with: pip install GitPython"
    )

logger = logging.getLogger(__name__)


def open_repository(repo_path: str) -> Repo:
    """
    Open the git checkout holding an advisory database.

    Args:
        repo_path: Path to the advisory database checkout

    Returns:
        Repo: GitPython repository object

    Raises:
        DatabaseError: If the path does not exist or is not a git repository
    """
    if not os.path.isdir(repo_path):
        raise DatabaseError(f"Advisory database path does not exist: {repo_path}")
    try:
        return Repo(repo_path)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        raise DatabaseError(
            f"Advisory database is not a git repository: {repo_path}",
            details={"error": str(e)},
        ) from e


def latest_commit(repo_path: str) -> Optional[CommitInfo]:
    """
    Read the HEAD commit of an advisory database checkout.

    Args:
        repo_path: Path to the advisory database checkout

    Returns:
        Optional[CommitInfo]: Commit hash and timestamp, or None when the
        repository has no commits yet
    """
    repo = open_repository(repo_path)
    try:
        commit = repo.head.commit
    except ValueError as e:
        # GitPython raises ValueError when HEAD points at an unborn branch
        logger.warning(f"Advisory database at {repo_path} has no commits: {e}")
        return None

    logger.debug(f"Advisory database HEAD: {commit.hexsha}")
    return CommitInfo(commit_id=commit.hexsha, timestamp=commit.committed_datetime)

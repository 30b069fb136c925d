"""
Data Models

AI Code Reviewer 의 핵심 데이터 모델들
"""

from .pr_diff import PRContext, DiffFile, DiffChunk, LineChange, DEV_NULL
from .review import ReviewFinding, GitHubComment, ReviewOutcome, RunResult
from .event import EventPayload, Repository, RepositoryOwner

__all__ = [
    "PRContext",
    "DiffFile",
    "DiffChunk",
    "LineChange",
    "DEV_NULL",
    "ReviewFinding",
    "GitHubComment",
    "ReviewOutcome",
    "RunResult",
    "EventPayload",
    "Repository",
    "RepositoryOwner",
]

"""
Comment Mapper

Turns validated model findings for a chunk into GitHub review comments.
"""

import logging
from typing import List

from ..models.pr_diff import DiffFile, DiffChunk
from ..models.review import ReviewFinding, GitHubComment


logger = logging.getLogger(__name__)


def map_findings(
    diff_file: DiffFile,
    chunk: DiffChunk,
    findings: List[ReviewFinding],
    validate_lines: bool = False
) -> List[GitHubComment]:
    """
    Map findings onto comments for the file's new-side path.

    Args:
        diff_file: File the chunk belongs to
        chunk: Chunk that was reviewed
        findings: Findings returned for the chunk
        validate_lines: Drop findings whose line is not on the chunk's new side

    Returns:
        List of GitHubComment objects, in finding order
    """
    if not diff_file.has_target:
        return []

    valid_lines = chunk.new_line_numbers if validate_lines else None

    comments = []
    for finding in findings:
        if valid_lines is not None and finding.line_number not in valid_lines:
            logger.warning(
                f"Dropping finding for {diff_file.to_path}:{finding.line_number}, "
                f"line is outside {chunk.content}"
            )
            continue

        comments.append(GitHubComment(
            path=diff_file.to_path,
            line=finding.line_number,
            body=finding.review_comment,
        ))

    return comments

"""
File Filter

Drops diff files whose path matches user-supplied exclusion globs.
"""

import logging
from typing import Iterable, List, Optional

from wcmatch import glob

from ..models.pr_diff import DiffFile


logger = logging.getLogger(__name__)

# minimatch defaults: "**" spans directories, "*" stays within one, braces and extglobs expand
GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB


def parse_exclude_patterns(raw: Optional[str]) -> List[str]:
    """Split a comma-separated pattern list, trimming entries and dropping empties."""
    if not raw:
        return []
    return [pattern.strip() for pattern in raw.split(',') if pattern.strip()]


def is_excluded(path: str, patterns: Iterable[str]) -> bool:
    if not path:
        return False
    return any(glob.globmatch(path, pattern, flags=GLOB_FLAGS) for pattern in patterns)


def filter_files(files: List[DiffFile], patterns: Iterable[str]) -> List[DiffFile]:
    """
    Keep the files whose target path matches none of the patterns.

    Args:
        files: Parsed diff files
        patterns: Glob patterns (minimatch syntax)

    Returns:
        Matching-free subset of files, in the original order
    """
    patterns = list(patterns)
    if not patterns:
        return list(files)

    kept = []
    for diff_file in files:
        if is_excluded(diff_file.path, patterns):
            logger.debug(f"Excluding {diff_file.path}")
            continue
        kept.append(diff_file)

    if len(kept) != len(files):
        logger.info(f"Excluded {len(files) - len(kept)} of {len(files)} files")
    return kept

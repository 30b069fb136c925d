"""
Unified Diff Parser

Parses raw unified diff text (as returned by the GitHub diff media type)
into structured files and chunks with per-line numbering on both sides.
"""

import re
import logging
from typing import List, Optional

from ..models.pr_diff import DiffFile, DiffChunk, LineChange, DEV_NULL


logger = logging.getLogger(__name__)


class UnifiedDiffParser:
    """
    Parser for unified diff text.

    Best-effort: malformed input yields an empty or partial result
    instead of raising.
    """

    def __init__(self):
        """Initialize unified diff parser."""
        self.git_header_pattern = re.compile(r'^diff --git "?a/(.+?)"? "?b/(.+?)"?$')
        self.chunk_header_pattern = re.compile(r'^@@\s*-(\d+)(?:,(\d+))?\s*\+(\d+)(?:,(\d+))?\s*@@(.*)$')
        self.binary_file_pattern = re.compile(r'^Binary files? .* differ')

    def parse(self, diff_text: Optional[str]) -> List[DiffFile]:
        """
        Parse unified diff text into DiffFile objects.

        Args:
            diff_text: Raw unified diff

        Returns:
            Ordered list of DiffFile objects
        """
        if not diff_text:
            return []

        files: List[DiffFile] = []
        current_file: Optional[DiffFile] = None
        current_chunk: Optional[DiffChunk] = None
        old_line = new_line = 0
        old_remaining = new_remaining = 0

        # Only "\n" ends a diff line; form feeds and U+2028 are line content
        for raw_line in diff_text.split('\n'):
            line = raw_line.rstrip('\r')
            in_chunk_body = current_chunk is not None and (old_remaining > 0 or new_remaining > 0)

            if line.startswith('diff '):
                current_file = self._start_file(files)
                current_chunk = None
                match = self.git_header_pattern.match(line)
                if match:
                    current_file.from_path = match.group(1)
                    current_file.to_path = match.group(2)
                continue

            if not in_chunk_body:
                if line.startswith('--- '):
                    # Plain unified diffs have no "diff" line between files
                    if current_file is None or current_file.chunks:
                        current_file = self._start_file(files)
                    current_chunk = None
                    current_file.from_path = self._parse_path(line[4:])
                    continue

                if line.startswith('+++ '):
                    if current_file is None:
                        current_file = self._start_file(files)
                    current_chunk = None
                    current_file.to_path = self._parse_path(line[4:])
                    continue

                if current_file is not None and current_chunk is None:
                    if self._parse_extended_header(line, current_file):
                        continue

            header_match = self.chunk_header_pattern.match(line)
            if header_match:
                if current_file is None:
                    current_file = self._start_file(files)

                old_start = int(header_match.group(1))
                old_lines = int(header_match.group(2) if header_match.group(2) is not None else 1)
                new_start = int(header_match.group(3))
                new_lines = int(header_match.group(4) if header_match.group(4) is not None else 1)

                current_chunk = DiffChunk(
                    content=line,
                    old_start=old_start,
                    old_lines=old_lines,
                    new_start=new_start,
                    new_lines=new_lines,
                )
                current_file.chunks.append(current_chunk)

                old_line, new_line = old_start, new_start
                old_remaining, new_remaining = old_lines, new_lines
                continue

            if current_chunk is None:
                continue

            if line.startswith('+'):
                current_chunk.changes.append(LineChange(type='add', content=line, new_line=new_line))
                new_line += 1
                new_remaining -= 1
            elif line.startswith('-'):
                current_chunk.changes.append(LineChange(type='del', content=line, old_line=old_line))
                old_line += 1
                old_remaining -= 1
            elif line.startswith(' ') or (line == '' and in_chunk_body):
                current_chunk.changes.append(
                    LineChange(type='normal', content=line, old_line=old_line, new_line=new_line)
                )
                old_line += 1
                new_line += 1
                old_remaining -= 1
                new_remaining -= 1
            # "\ No newline at end of file" and anything unrecognised is skipped

        self._finalize(files)
        logger.debug(f"Parsed {len(files)} files, {sum(len(f.chunks) for f in files)} chunks")
        return files

    def _start_file(self, files: List[DiffFile]) -> DiffFile:
        diff_file = DiffFile()
        files.append(diff_file)
        return diff_file

    def _parse_extended_header(self, line: str, diff_file: DiffFile) -> bool:
        """Handle git extended header lines. Returns True if consumed."""
        if line.startswith('new file mode'):
            diff_file.is_new = True
        elif line.startswith('deleted file mode'):
            diff_file.is_deleted = True
        elif line.startswith('rename from '):
            diff_file.from_path = line[len('rename from '):]
        elif line.startswith('rename to '):
            diff_file.to_path = line[len('rename to '):]
        elif self.binary_file_pattern.match(line):
            diff_file.is_binary = True
        elif line.startswith(('index ', 'old mode', 'new mode', 'similarity index',
                              'dissimilarity index', 'copy from', 'copy to')):
            pass
        else:
            return False
        return True

    def _parse_path(self, raw: str) -> str:
        """Strip timestamps, quotes and the a/ b/ prefixes from a header path."""
        path = raw.split('\t', 1)[0].strip()
        if len(path) >= 2 and path.startswith('"') and path.endswith('"'):
            path = path[1:-1]
        if path == DEV_NULL:
            return path
        if path.startswith(('a/', 'b/')):
            return path[2:]
        return path

    def _finalize(self, files: List[DiffFile]) -> None:
        """Reconcile deletion/creation markers with the header paths."""
        for diff_file in files:
            if diff_file.to_path == DEV_NULL:
                diff_file.is_deleted = True
            elif diff_file.is_deleted:
                diff_file.to_path = DEV_NULL

            if diff_file.from_path == DEV_NULL:
                diff_file.is_new = True
            elif diff_file.is_new:
                diff_file.from_path = DEV_NULL

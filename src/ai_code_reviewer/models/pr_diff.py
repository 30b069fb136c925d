"""
PR Diff Data Models

Pull Request 와 unified diff 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from typing import List, Optional, Set


DEV_NULL = "/dev/null"


@dataclass(frozen=True)
class PRContext:
    """리뷰 대상 Pull Request 정보"""
    owner: str
    repo: str
    pull_number: int
    title: str = ""
    description: str = ""

    def __post_init__(self):
        """데이터 검증"""
        if self.pull_number <= 0:
            raise ValueError("PR number must be positive")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class LineChange:
    """청크 안의 한 줄 변경사항"""
    type: str  # 'add', 'del', 'normal'
    content: str
    old_line: Optional[int] = None
    new_line: Optional[int] = None

    def __post_init__(self):
        """데이터 검증"""
        valid_types = {'add', 'del', 'normal'}
        if self.type not in valid_types:
            raise ValueError(f"Invalid change type: {self.type}")

    @property
    def line_number(self) -> Optional[int]:
        """모델에게 보여줄 라인 번호 (삭제된 줄은 원본 기준)"""
        if self.type == 'del':
            return self.old_line
        return self.new_line


@dataclass
class DiffChunk:
    """diff의 개별 청크 (hunk)"""
    content: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    changes: List[LineChange] = field(default_factory=list)

    def __post_init__(self):
        """데이터 검증"""
        if self.old_start < 0 or self.new_start < 0:
            raise ValueError("Line numbers must be non-negative")
        if self.old_lines < 0 or self.new_lines < 0:
            raise ValueError("Line counts must be non-negative")

    @property
    def new_line_numbers(self) -> Set[int]:
        """새 파일 기준으로 존재하는 라인 번호들"""
        return {c.new_line for c in self.changes if c.new_line is not None}

    @property
    def additions(self) -> int:
        return sum(1 for c in self.changes if c.type == 'add')

    @property
    def deletions(self) -> int:
        return sum(1 for c in self.changes if c.type == 'del')


@dataclass
class DiffFile:
    """diff 안의 파일 하나"""
    from_path: Optional[str] = None
    to_path: Optional[str] = None
    chunks: List[DiffChunk] = field(default_factory=list)
    is_new: bool = False
    is_deleted: bool = False
    is_binary: bool = False

    @property
    def has_target(self) -> bool:
        """코멘트를 달 수 있는 대상 경로가 있는지 확인"""
        return bool(self.to_path) and self.to_path != DEV_NULL

    @property
    def path(self) -> str:
        """필터링용 경로 (대상 경로가 없으면 빈 문자열)"""
        return self.to_path or ""

    @property
    def additions(self) -> int:
        return sum(chunk.additions for chunk in self.chunks)

    @property
    def deletions(self) -> int:
        return sum(chunk.deletions for chunk in self.chunks)

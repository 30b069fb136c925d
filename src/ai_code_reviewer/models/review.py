"""
Review Data Models

코드 리뷰 관련 데이터 모델들
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewFinding(BaseModel):
    """모델이 반환한 개별 리뷰 항목"""
    model_config = ConfigDict(populate_by_name=True)

    line_number: int = Field(alias="lineNumber")
    review_comment: str = Field(alias="reviewComment")

    @field_validator('line_number', mode='before')
    @classmethod
    def coerce_line_number(cls, v):
        # "42", 42 and 42.0 are all accepted; no range check against the diff
        if isinstance(v, str):
            v = v.strip()
            try:
                return int(v)
            except ValueError:
                number = float(v)
                if not number.is_integer():
                    raise ValueError(f"Line number is not an integer: {v}")
                return int(number)
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


@dataclass(frozen=True)
class GitHubComment:
    """GitHub PR 리뷰 코멘트 형식"""
    path: str
    line: int
    body: str

    def to_payload(self) -> Dict[str, Any]:
        return {"path": self.path, "line": self.line, "body": self.body}


@dataclass(frozen=True)
class ReviewOutcome:
    """
    Result of one inference call for a diff chunk.

    Either ``ok`` with the validated findings, or ``failed`` with a reason.
    A failed outcome carries no findings.
    """
    succeeded: bool
    findings: List[ReviewFinding] = field(default_factory=list)
    reason: Optional[str] = None

    @classmethod
    def ok(cls, findings: List[ReviewFinding]) -> "ReviewOutcome":
        return cls(succeeded=True, findings=list(findings))

    @classmethod
    def failed(cls, reason: str) -> "ReviewOutcome":
        return cls(succeeded=False, findings=[], reason=reason)


@dataclass
class RunResult:
    """리뷰 실행 결과"""
    status: str  # 'skipped', 'no_diff', 'no_comments', 'submitted'
    comments: List[GitHubComment] = field(default_factory=list)
    chunks_reviewed: int = 0
    chunks_failed: int = 0

    def __post_init__(self):
        """데이터 검증"""
        valid_statuses = {'skipped', 'no_diff', 'no_comments', 'submitted'}
        if self.status not in valid_statuses:
            raise ValueError(f"Invalid status: {self.status}")

    @property
    def submitted(self) -> bool:
        return self.status == 'submitted'

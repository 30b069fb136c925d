"""
Event Payload Models

GitHub Actions 이벤트 페이로드 모델
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class RepositoryOwner(BaseModel):
    """저장소 소유자"""
    model_config = ConfigDict(extra='ignore')

    login: str


class Repository(BaseModel):
    """이벤트의 저장소 정보"""
    model_config = ConfigDict(extra='ignore')

    name: str
    owner: RepositoryOwner


class EventPayload(BaseModel):
    """pull_request 이벤트 페이로드"""
    model_config = ConfigDict(extra='ignore')

    action: str
    number: int
    repository: Repository
    before: Optional[str] = None
    after: Optional[str] = None

    @field_validator('number')
    @classmethod
    def validate_number(cls, v):
        if v <= 0:
            raise ValueError('PR number must be positive')
        return v

    @property
    def owner(self) -> str:
        return self.repository.owner.login

    @property
    def repo(self) -> str:
        return self.repository.name

"""
Configuration Management

시스템 설정 관리 (GitHub Action 입력, 환경 변수, YAML 파일)
"""

import os
import yaml
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from pathlib import Path
import logging
from logging.handlers import RotatingFileHandler

from .review.filter import parse_exclude_patterns


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _input(*names: str, default: Optional[str] = None) -> Optional[str]:
    """첫 번째로 설정된 환경 변수 값 반환 (빈 문자열은 미설정으로 간주)"""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


@dataclass
class GitHubConfig:
    """GitHub API 설정"""
    token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout_seconds: int = 30


@dataclass
class OpenAIConfig:
    """OpenAI API 설정"""
    api_key: Optional[str] = None
    model: str = "gpt-4"
    base_url: Optional[str] = None
    temperature: float = 0.2
    max_tokens: int = 700
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0


@dataclass
class ReviewConfig:
    """리뷰 생성 설정"""
    exclude: str = ""
    validate_line_numbers: bool = False

    @property
    def exclude_patterns(self) -> List[str]:
        return parse_exclude_patterns(self.exclude)


@dataclass
class LoggingConfig:
    """로깅 설정"""
    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT
    file_path: Optional[str] = None
    max_file_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5


@dataclass
class AppConfig:
    """전체 애플리케이션 설정"""
    github: GitHubConfig = field(default_factory=GitHubConfig)
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    review: ReviewConfig = field(default_factory=ReviewConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    event_path: Optional[str] = None
    event_name: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        """GitHub Action 입력 및 환경 변수에서 설정 로드"""
        return cls(
            github=GitHubConfig(
                token=_input("INPUT_GITHUBTOKEN", "INPUT_GITHUB_TOKEN", "GITHUB_TOKEN"),
                api_base_url=_input("GITHUB_API_URL", default="https://api.github.com"),
                timeout_seconds=int(_input("GITHUB_TIMEOUT", default="30")),
            ),
            openai=OpenAIConfig(
                api_key=_input("INPUT_OPENAI_API_KEY", "OPENAI_API_KEY"),
                model=_input("INPUT_OPENAI_API_MODEL", "OPENAI_API_MODEL", default="gpt-4"),
                base_url=_input("INPUT_OPENAI_BASE_URL", "OPENAI_BASE_URL"),
            ),
            review=ReviewConfig(
                exclude=_input("INPUT_EXCLUDE", "EXCLUDE", default=""),
                validate_line_numbers=_input(
                    "INPUT_VALIDATE_LINE_NUMBERS", "VALIDATE_LINE_NUMBERS", default="false"
                ).lower() == "true",
            ),
            logging=LoggingConfig(
                level=_input("LOG_LEVEL", default="INFO"),
                format=_input("LOG_FORMAT", default=DEFAULT_LOG_FORMAT),
                file_path=_input("LOG_FILE"),
                max_file_size=int(_input("LOG_MAX_SIZE", default=str(10 * 1024 * 1024))),
                backup_count=int(_input("LOG_BACKUP_COUNT", default="5")),
            ),
            event_path=_input("GITHUB_EVENT_PATH"),
            event_name=_input("GITHUB_EVENT_NAME"),
        )

    @classmethod
    def from_yaml(cls, config_path: str) -> "AppConfig":
        """YAML 파일에서 설정 로드"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(
            github=GitHubConfig(**config_data.get('github', {})),
            openai=OpenAIConfig(**config_data.get('openai', {})),
            review=ReviewConfig(**config_data.get('review', {})),
            logging=LoggingConfig(**config_data.get('logging', {})),
            event_path=config_data.get('event_path'),
            event_name=config_data.get('event_name'),
        )

    def validate(self) -> None:
        """설정 유효성 검사"""
        errors = []

        # 토큰 필수 확인
        if not self.github.token:
            errors.append("GitHub token is required")
        if not self.openai.api_key:
            errors.append("OpenAI API key is required")
        if not self.openai.model:
            errors.append("OpenAI model is required")

        if not self.event_path:
            errors.append("Event payload path is required")

        if self.openai.max_tokens <= 0:
            errors.append("max_tokens must be positive")

        # 로그 레벨 검증
        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.logging.level.upper() not in valid_log_levels:
            errors.append(f"Invalid log level: {self.logging.level}")

        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

    def to_dict(self) -> Dict[str, Any]:
        """설정을 딕셔너리로 변환"""
        return {
            'github': {
                'api_base_url': self.github.api_base_url,
                'timeout_seconds': self.github.timeout_seconds,
                # 보안상 토큰은 제외
            },
            'openai': {
                'model': self.openai.model,
                'base_url': self.openai.base_url,
                'temperature': self.openai.temperature,
                'max_tokens': self.openai.max_tokens,
                'top_p': self.openai.top_p,
                'frequency_penalty': self.openai.frequency_penalty,
                'presence_penalty': self.openai.presence_penalty,
            },
            'review': {
                'exclude': self.review.exclude,
                'validate_line_numbers': self.review.validate_line_numbers,
            },
            'logging': {
                'level': self.logging.level,
                'format': self.logging.format,
                'file_path': self.logging.file_path,
                'max_file_size': self.logging.max_file_size,
                'backup_count': self.logging.backup_count,
            },
            'event_path': self.event_path,
            'event_name': self.event_name,
        }


def setup_logging(config: LoggingConfig) -> None:
    """로깅 설정"""
    logging.basicConfig(
        level=getattr(logging, config.level.upper()),
        format=config.format,
    )

    # 파일 로깅이 설정된 경우 로테이션 설정
    if config.file_path:
        handler = RotatingFileHandler(
            config.file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )
        handler.setFormatter(logging.Formatter(config.format))
        logging.getLogger().addHandler(handler)

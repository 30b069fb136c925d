"""
AI Code Reviewer

GitHub Pull Request diff 를 청크 단위로 LLM 에 리뷰 요청하고
결과를 인라인 리뷰 코멘트로 게시하는 GitHub Action
"""

__version__ = "1.0.0"

from .api import CodeReviewer

__all__ = ["CodeReviewer"]

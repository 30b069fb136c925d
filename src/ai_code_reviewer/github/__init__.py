"""
GitHub Integration Layer

This module provides GitHub API integration for PR diff retrieval,
unified diff parsing, event payload loading and review submission.
"""

from .client import GitHubClient, GitHubAPIError
from .parser import UnifiedDiffParser
from .event import load_event, EventPayloadError

__all__ = ['GitHubClient', 'GitHubAPIError', 'UnifiedDiffParser', 'load_event', 'EventPayloadError']

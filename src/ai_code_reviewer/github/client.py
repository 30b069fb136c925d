"""
GitHub API Client

Handles GitHub API authentication and communication.
Provides methods for PR metadata, diff retrieval and review submission.
"""

import logging
from typing import Dict, List, Optional
import requests

from ..models.pr_diff import PRContext
from ..models.review import GitHubComment


logger = logging.getLogger(__name__)


DIFF_MEDIA_TYPE = 'application/vnd.github.v3.diff'
JSON_MEDIA_TYPE = 'application/vnd.github.v3+json'
REVIEW_EVENT = 'COMMENT'


class GitHubAPIError(Exception):
    """GitHub API related errors"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_data: Optional[Dict] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class GitHubClient:
    """
    GitHub API client with authentication and error handling.

    Provides methods for:
    - PR metadata retrieval
    - Full PR diff and commit-range diff retrieval
    - Review submission with inline comments
    """

    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: Optional[float] = 30):
        """
        Initialize GitHub client.

        Args:
            token: GitHub access token
            base_url: GitHub API base URL (default: https://api.github.com)
            timeout: Per-request timeout in seconds passed to requests
        """
        if not token:
            raise ValueError("GitHub token is required")

        self.token = token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create requests session with authentication."""
        session = requests.Session()
        session.headers.update({
            'Authorization': f'token {self.token}',
            'Accept': JSON_MEDIA_TYPE,
            'User-Agent': 'AI-Code-Reviewer/1.0'
        })
        return session

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self.session.headers)

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make authenticated request to GitHub API.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: For API and transport errors
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault('timeout', self.timeout)

        try:
            response = self.session.request(method, url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Request failed: {e}")
            raise GitHubAPIError(f"Request failed: {str(e)}")

        if not response.ok:
            try:
                error_data = response.json() if response.content else {}
            except ValueError:
                error_data = {}
            raise GitHubAPIError(
                f"GitHub API error: {response.status_code} - {error_data.get('message', 'Unknown error')}",
                status_code=response.status_code,
                response_data=error_data
            )

        return response

    def get_pull_request(self, owner: str, repo: str, pr_number: int) -> Dict:
        """
        Get pull request information.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Pull request data
        """
        logger.info(f"Fetching PR {owner}/{repo}#{pr_number}")

        response = self._make_request('GET', f'/repos/{owner}/{repo}/pulls/{pr_number}')
        return response.json()

    def get_pr_context(self, owner: str, repo: str, pr_number: int) -> PRContext:
        """Fetch PR title and description into a PRContext."""
        pr_data = self.get_pull_request(owner, repo, pr_number)
        return PRContext(
            owner=owner,
            repo=repo,
            pull_number=pr_number,
            title=pr_data.get('title') or "",
            description=pr_data.get('body') or "",
        )

    def get_pull_request_diff(self, owner: str, repo: str, pr_number: int) -> str:
        """
        Get the full unified diff of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number

        Returns:
            Raw diff text
        """
        logger.info(f"Fetching diff for {owner}/{repo}#{pr_number}")

        response = self._make_request(
            'GET',
            f'/repos/{owner}/{repo}/pulls/{pr_number}',
            headers={'Accept': DIFF_MEDIA_TYPE}
        )
        return response.text

    def compare_commits_diff(self, owner: str, repo: str, base: str, head: str) -> str:
        """
        Get the unified diff between two commits.

        Args:
            owner: Repository owner
            repo: Repository name
            base: Base commit SHA
            head: Head commit SHA

        Returns:
            Raw diff text
        """
        logger.info(f"Fetching diff for {owner}/{repo} {base[:7]}...{head[:7]}")

        response = self._make_request(
            'GET',
            f'/repos/{owner}/{repo}/compare/{base}...{head}',
            headers={'Accept': DIFF_MEDIA_TYPE}
        )
        return response.text

    def create_review(
        self,
        owner: str,
        repo: str,
        pr_number: int,
        comments: List[GitHubComment]
    ) -> Dict:
        """
        Submit a single review containing inline comments.

        Args:
            owner: Repository owner
            repo: Repository name
            pr_number: Pull request number
            comments: Comments to attach to the review

        Returns:
            Created review data
        """
        logger.info(f"Submitting review with {len(comments)} comments to {owner}/{repo}#{pr_number}")

        response = self._make_request(
            'POST',
            f'/repos/{owner}/{repo}/pulls/{pr_number}/reviews',
            json={
                'comments': [comment.to_payload() for comment in comments],
                'event': REVIEW_EVENT,
            }
        )
        return response.json()

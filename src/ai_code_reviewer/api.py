"""
Main Code Reviewer API

Main interface that orchestrates one review run, from the triggering
event to a single submitted GitHub review.
"""

import logging
from typing import Iterable, List, Optional

from .github.client import GitHubClient
from .github.parser import UnifiedDiffParser
from .llm.client import ReviewClient
from .llm.prompts import PromptBuilder
from .models.event import EventPayload
from .models.pr_diff import DiffFile, PRContext
from .models.review import GitHubComment, RunResult
from .review.filter import filter_files
from .review.mapper import map_findings


logger = logging.getLogger(__name__)


ACTION_OPENED = "opened"
ACTION_SYNCHRONIZE = "synchronize"


class CodeReviewer:
    """
    Main Code Reviewer interface.

    Orchestrates the complete review process:
    1. Fetch PR context and the diff for the event action
    2. Parse the diff and drop excluded files
    3. Review every chunk sequentially with the chat model
    4. Submit all resulting comments as one GitHub review
    """

    def __init__(
        self,
        github: GitHubClient,
        review_client: ReviewClient,
        prompt_builder: Optional[PromptBuilder] = None,
        exclude_patterns: Iterable[str] = (),
        validate_lines: bool = False,
    ):
        """
        Initialize Code Reviewer.

        Args:
            github: GitHub API client
            review_client: Chat completion review client
            prompt_builder: Prompt builder (default rules when omitted)
            exclude_patterns: Glob patterns of files to skip
            validate_lines: Drop findings outside the chunk's new-side lines
        """
        self.github = github
        self.review_client = review_client
        self.prompt_builder = prompt_builder or PromptBuilder()
        self.exclude_patterns = list(exclude_patterns)
        self.validate_lines = validate_lines
        self.diff_parser = UnifiedDiffParser()

    def run(self, event: EventPayload) -> RunResult:
        """
        Run one review for the given event.

        Args:
            event: Triggering pull_request event payload

        Returns:
            RunResult describing what was done
        """
        pr = self.github.get_pr_context(event.owner, event.repo, event.number)
        logger.info(f"Reviewing {pr.full_name}#{pr.pull_number}: {pr.title}")

        if event.action == ACTION_OPENED:
            diff = self.github.get_pull_request_diff(pr.owner, pr.repo, pr.pull_number)
        elif event.action == ACTION_SYNCHRONIZE:
            if not event.before or not event.after:
                raise ValueError("synchronize event is missing 'before' or 'after' commit")
            diff = self.github.compare_commits_diff(pr.owner, pr.repo, event.before, event.after)
        else:
            logger.warning(f"Unsupported event action: {event.action}")
            return RunResult(status='skipped')

        if not diff:
            logger.info("No diff found")
            return RunResult(status='no_diff')

        parsed_files = self.diff_parser.parse(diff)
        files = filter_files(parsed_files, self.exclude_patterns)
        logger.info(f"Reviewing {len(files)} of {len(parsed_files)} changed files")

        result = self.analyze_files(files, pr)

        if result.comments:
            self.github.create_review(pr.owner, pr.repo, pr.pull_number, result.comments)
            result.status = 'submitted'
            logger.info(f"Submitted review with {len(result.comments)} comments")
        else:
            logger.info("No review comments generated")

        return result

    def analyze_files(self, files: List[DiffFile], pr: PRContext) -> RunResult:
        """
        Review every chunk of every file, one at a time, in document order.

        Args:
            files: Filtered diff files
            pr: Pull request context

        Returns:
            RunResult with status 'no_comments' and the collected comments
        """
        result = RunResult(status='no_comments')
        comments: List[GitHubComment] = []

        for diff_file in files:
            if not diff_file.has_target:
                logger.debug(f"Skipping deleted file {diff_file.from_path}")
                continue

            for chunk in diff_file.chunks:
                prompt = self.prompt_builder.build_review_prompt(diff_file, chunk, pr)
                outcome = self.review_client.review(prompt)
                result.chunks_reviewed += 1

                if not outcome.succeeded:
                    result.chunks_failed += 1
                    logger.warning(f"No findings for {diff_file.to_path} {chunk.content}: {outcome.reason}")
                    continue

                comments.extend(map_findings(diff_file, chunk, outcome.findings, self.validate_lines))

        result.comments = comments
        return result

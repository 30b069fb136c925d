"""
Prompt Builder

Builds the per-chunk review prompt sent to the chat model. The prompt asks
for a strict JSON array of {lineNumber, reviewComment} objects and embeds
the chunk with explicit line numbers so findings can be placed inline.
"""

import logging
from typing import List

from ..models.pr_diff import DiffFile, DiffChunk, PRContext


logger = logging.getLogger(__name__)


RESPONSE_FORMAT = '[{"lineNumber": <line_number>, "reviewComment": "<review comment>"}]'

REVIEW_RULES = [
    f"Provide the response in the following JSON format: {RESPONSE_FORMAT}",
    "Do not give positive comments or compliments.",
    "Provide comments and suggestions ONLY if there is something to improve, "
    "otherwise return an empty array.",
    "Write the comment in GitHub Markdown format.",
    "Use the given description only for the overall context and only comment the code.",
    "IMPORTANT: NEVER suggest adding comments to the code.",
]


class PromptBuilder:
    """
    Builds review prompts for a single diff chunk.
    """

    def __init__(self, rules: List[str] = None):
        self.rules = list(rules) if rules is not None else list(REVIEW_RULES)

    def build_review_prompt(self, diff_file: DiffFile, chunk: DiffChunk, pr: PRContext) -> str:
        """
        Build the complete review prompt for one chunk.

        Args:
            diff_file: File the chunk belongs to
            chunk: Chunk to review
            pr: Pull request title and description

        Returns:
            Prompt text
        """
        logger.debug(f"Building review prompt for {diff_file.to_path} {chunk.content}")

        sections = [
            "Your task is to review pull requests. Instructions:",
            "\n".join(f"- {rule}" for rule in self.rules),
            "",
            f'Review the following code diff in the file "{diff_file.to_path}" and take '
            "the pull request title and description into account when writing the response.",
            "",
            f"Pull request title: {pr.title}",
            "Pull request description:",
            "",
            "---",
            pr.description,
            "---",
            "",
            "Git diff to review:",
            "",
            "```diff",
            chunk.content,
            self.format_changes(chunk),
            "```",
            "",
        ]
        return "\n".join(sections)

    def format_changes(self, chunk: DiffChunk) -> str:
        """Render each change as '<line number> <raw line>'."""
        return "\n".join(f"{change.line_number} {change.content}" for change in chunk.changes)

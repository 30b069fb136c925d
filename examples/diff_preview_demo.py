#!/usr/bin/env python3
"""
Diff Preview Demo

Fetches a PR diff, applies exclusion patterns and prints the prompt
that would be sent to the model for each chunk. No model calls and no
review submission.

Usage:
    python examples/diff_preview_demo.py <owner> <repo> <pr_number> [exclude]

Example:
    python examples/diff_preview_demo.py octocat hello-world 42 "*.md,*.lock"
"""

import sys
import os
import logging

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ai_code_reviewer.github.client import GitHubClient, GitHubAPIError
from ai_code_reviewer.github.parser import UnifiedDiffParser
from ai_code_reviewer.llm.prompts import PromptBuilder
from ai_code_reviewer.review.filter import filter_files, parse_exclude_patterns


def setup_logging():
    """Set up logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def main():
    """Main demo function."""
    setup_logging()

    if len(sys.argv) not in (4, 5):
        print("Usage: python diff_preview_demo.py <owner> <repo> <pr_number> [exclude]")
        sys.exit(1)

    owner, repo = sys.argv[1], sys.argv[2]
    try:
        pr_number = int(sys.argv[3])
    except ValueError:
        print("Error: PR number must be an integer")
        sys.exit(1)
    exclude = parse_exclude_patterns(sys.argv[4] if len(sys.argv) == 5 else "")

    token = os.getenv('GITHUB_TOKEN')
    if not token:
        print("Error: GitHub token not found. Set GITHUB_TOKEN environment variable.")
        sys.exit(1)

    try:
        client = GitHubClient(token)
        pr = client.get_pr_context(owner, repo, pr_number)
        diff = client.get_pull_request_diff(owner, repo, pr_number)
    except GitHubAPIError as e:
        print(f"Error: {e}")
        sys.exit(1)

    files = filter_files(UnifiedDiffParser().parse(diff), exclude)
    builder = PromptBuilder()

    print(f"PR: {pr.title}")
    print(f"Files to review: {len(files)}")

    for diff_file in files:
        if not diff_file.has_target:
            print(f"\n(skipped deleted file {diff_file.from_path})")
            continue
        print(f"\n📄 {diff_file.to_path} (+{diff_file.additions}/-{diff_file.deletions})")
        for chunk in diff_file.chunks:
            print("=" * 60)
            print(builder.build_review_prompt(diff_file, chunk, pr))


if __name__ == "__main__":
    main()

"""
Command line entry point

Runs a single review for the event that triggered the GitHub Action.
Exit code 0 means success or no-op, 1 means the run failed.
"""

import argparse
import logging
import sys
from typing import List, Optional

from openai import OpenAI

from .api import CodeReviewer
from .config import AppConfig, setup_logging
from .github.client import GitHubClient
from .github.event import load_event
from .llm.client import ReviewClient, GenerationConfig


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ai-code-reviewer",
        description="Review a pull request diff with an LLM and post inline comments.",
    )
    parser.add_argument("--config", help="YAML config file (defaults to action inputs / environment)")
    parser.add_argument("--event-path", help="Event payload JSON (defaults to $GITHUB_EVENT_PATH)")
    return parser


def build_reviewer(config: AppConfig) -> CodeReviewer:
    """Construct the API clients once and wire them into a CodeReviewer."""
    github = GitHubClient(
        config.github.token,
        base_url=config.github.api_base_url,
        timeout=config.github.timeout_seconds,
    )
    openai_client = OpenAI(api_key=config.openai.api_key, base_url=config.openai.base_url)
    review_client = ReviewClient(
        openai_client,
        model=config.openai.model,
        generation_config=GenerationConfig(
            temperature=config.openai.temperature,
            max_tokens=config.openai.max_tokens,
            top_p=config.openai.top_p,
            frequency_penalty=config.openai.frequency_penalty,
            presence_penalty=config.openai.presence_penalty,
        ),
    )
    return CodeReviewer(
        github,
        review_client,
        exclude_patterns=config.review.exclude_patterns,
        validate_lines=config.review.validate_line_numbers,
    )


def run(config: AppConfig) -> int:
    setup_logging(config.logging)
    logger.debug(f"Configuration: {config.to_dict()}")

    event = load_event(config.event_path)
    logger.info(f"Handling {config.event_name or 'pull_request'} event, action '{event.action}'")

    reviewer = build_reviewer(config)
    result = reviewer.run(event)

    logger.info(
        f"Review finished: {result.status}, {len(result.comments)} comments, "
        f"{result.chunks_reviewed} chunks reviewed, {result.chunks_failed} failed"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    try:
        args = build_parser().parse_args(argv)
    except SystemExit as e:
        # --help exits 0; usage errors map to a failed run instead of status 2
        return 0 if e.code in (0, None) else 1

    try:
        config = AppConfig.from_yaml(args.config) if args.config else AppConfig.from_env()
        if args.event_path:
            config.event_path = args.event_path
        config.validate()
        return run(config)
    except Exception:
        if not logging.getLogger().handlers:
            logging.basicConfig(level=logging.INFO)
        logger.exception("Review run failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())

"""
Review Client

Sends review prompts to an OpenAI-compatible chat completion API and
decodes the reply into validated findings.
"""

import json
import logging
import re
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from pydantic import TypeAdapter

from ..models.review import ReviewFinding, ReviewOutcome


logger = logging.getLogger(__name__)


FINDINGS_ADAPTER = TypeAdapter(List[ReviewFinding])

CODE_FENCE_PATTERN = re.compile(r'^```[\w-]*\s*\n(.*?)\n?```$', re.DOTALL)


@dataclass
class GenerationConfig:
    """Sampling parameters for the chat completion call."""
    temperature: float = 0.2
    max_tokens: int = 700
    top_p: float = 1.0
    frequency_penalty: float = 0.0
    presence_penalty: float = 0.0


class ReviewClient:
    """
    Chat completion client for chunk reviews.

    Every failure (API error, empty choices, malformed JSON, wrong shape)
    is logged and returned as a failed ReviewOutcome, never raised.
    """

    def __init__(self, openai_client, model: str, generation_config: Optional[GenerationConfig] = None):
        """
        Initialize review client.

        Args:
            openai_client: An ``openai.OpenAI`` instance (or compatible fake)
            model: Model identifier to request
            generation_config: Sampling parameters
        """
        self.client = openai_client
        self.model = model
        self.generation_config = generation_config or GenerationConfig()

    def request_params(self, prompt: str) -> Dict[str, Any]:
        return {
            'model': self.model,
            **asdict(self.generation_config),
            'messages': [
                {'role': 'system', 'content': prompt},
            ],
        }

    def review(self, prompt: str) -> ReviewOutcome:
        """
        Request a review for one prompt.

        Args:
            prompt: Prompt built for a single chunk

        Returns:
            ReviewOutcome.ok(findings) or ReviewOutcome.failed(reason)
        """
        try:
            response = self.client.chat.completions.create(**self.request_params(prompt))
            content = response.choices[0].message.content
        except Exception as e:
            logger.error(f"Review request failed: {e}")
            return ReviewOutcome.failed(f"request failed: {e}")

        text = (content or "").strip() or "[]"

        try:
            findings = self.parse_findings(text)
        except ValueError as e:
            logger.error(f"Could not decode review response: {e}")
            logger.debug(f"Raw response: {text}")
            return ReviewOutcome.failed(f"invalid response: {e}")

        logger.debug(f"Model returned {len(findings)} findings")
        return ReviewOutcome.ok(findings)

    def parse_findings(self, text: str) -> List[ReviewFinding]:
        """
        Decode and validate a JSON array of findings.

        Raises:
            ValueError: If the text is not JSON or not a list of findings
        """
        fenced = CODE_FENCE_PATTERN.match(text)
        if fenced:
            text = fenced.group(1).strip() or "[]"

        data = json.loads(text)
        return FINDINGS_ADAPTER.validate_python(data)

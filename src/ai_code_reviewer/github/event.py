"""
Event Payload Loader

Reads the GitHub Actions event payload that triggered the run.
"""

import os
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..models.event import EventPayload


logger = logging.getLogger(__name__)


class EventPayloadError(Exception):
    """Event payload could not be read or has an unexpected shape"""


def load_event(event_path: Optional[str] = None) -> EventPayload:
    """
    Load and validate the event payload.

    Args:
        event_path: Path to the JSON payload (defaults to $GITHUB_EVENT_PATH)

    Returns:
        Validated EventPayload

    Raises:
        EventPayloadError: If the file is missing, unreadable or malformed
    """
    event_path = event_path or os.getenv("GITHUB_EVENT_PATH", "")
    if not event_path:
        raise EventPayloadError("Event payload path is not set (GITHUB_EVENT_PATH)")

    path = Path(event_path)
    logger.debug(f"Loading event payload from {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except OSError as e:
        raise EventPayloadError(f"Cannot read event payload {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise EventPayloadError(f"Event payload is not valid JSON: {e}") from e

    try:
        return EventPayload.model_validate(data)
    except ValidationError as e:
        raise EventPayloadError(f"Unexpected event payload shape: {e}") from e

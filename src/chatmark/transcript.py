"""Chat history loading."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

ROLES = ("user", "assistant")


class TranscriptError(ValueError):
    """Raised when a transcript file cannot be interpreted."""


@dataclass(slots=True)
class ChatMessage:
    role: str
    content: str
    created_at: str | None = None


def load_transcript(input_path: Path) -> list[ChatMessage]:
    """Load messages from a JSON file.

    Accepts either a bare list of message objects or an object with a
    ``messages`` list, which is what the conversation endpoint returns.
    """
    input_path = Path(input_path)
    try:
        data = json.loads(input_path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise TranscriptError(f"{input_path.name}: not valid UTF-8 (byte {exc.start})") from exc
    except json.JSONDecodeError as exc:
        raise TranscriptError(f"{input_path.name}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    messages = parse_messages(data)
    logger.debug("loaded %d messages from %s", len(messages), input_path)
    return messages


def parse_messages(data: object) -> list[ChatMessage]:
    if isinstance(data, dict):
        data = data.get("messages")
    if not isinstance(data, list):
        raise TranscriptError("expected a list of messages or an object with a 'messages' list")

    messages: list[ChatMessage] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            raise TranscriptError(f"message {idx}: expected an object")
        role = item.get("role")
        content = item.get("content")
        created_at = item.get("created_at")
        if role not in ROLES:
            raise TranscriptError(f"message {idx}: role must be one of {', '.join(ROLES)}, got {role!r}")
        if not isinstance(content, str):
            raise TranscriptError(f"message {idx}: content must be a string")
        if created_at is not None and not isinstance(created_at, str):
            raise TranscriptError(f"message {idx}: created_at must be a string")
        messages.append(ChatMessage(role=role, content=content, created_at=created_at))
    return messages

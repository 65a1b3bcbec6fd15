"""Prompt construction for content generation requests."""
from __future__ import annotations

import re
from enum import Enum
from string import Template

MIN_CONTENT_LENGTH = 50
MAX_CONTENT_LENGTH = 1000
DEFAULT_CONTENT_LENGTH = 200
MAX_TOPIC_LENGTH = 500
MAX_KEYWORDS_LENGTH = 200


class Tone(str, Enum):
    PROFESSIONAL = "Professional"
    CASUAL = "Casual"
    ENTHUSIASTIC = "Enthusiastic"
    INFORMATIVE = "Informative"
    HUMOROUS = "Humorous/Funny"
    PERSUASIVE = "Persuasive"


_PROMPT_TEMPLATE = Template("""
You are an expert content creator. Your task is to generate high-quality written content based on the following instructions.

Topic: "$topic"
Tone of Voice: $tone
$keyword_instructions
The generated content should be approximately $content_length words long.

Please generate a well-structured, engaging, and informative piece of content.
Ensure the tone is consistent throughout. Do not include a title or any preamble like "Here is the content you requested". Just provide the main body of the content.
""")

_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_topic(topic: str) -> str:
    return (topic or "").strip()[:MAX_TOPIC_LENGTH]


def sanitize_keywords(keywords: str | None) -> str:
    return (keywords or "").strip()[:MAX_KEYWORDS_LENGTH]


def build_prompt(topic: str, tone: Tone | str, keywords: str, content_length: int) -> str:
    """Return the generation prompt for already sanitized inputs."""

    keyword_instructions = (
        f"Please naturally incorporate the following keywords: {keywords}." if keywords else ""
    )
    tone_value = tone.value if isinstance(tone, Tone) else str(tone)
    return _PROMPT_TEMPLATE.substitute(
        topic=topic,
        tone=tone_value,
        keyword_instructions=keyword_instructions,
        content_length=content_length,
    )


def count_words(text: str) -> int:
    """Count whitespace separated words."""

    stripped = (text or "").strip()
    if not stripped:
        return 0
    return len(_WHITESPACE_RE.split(stripped))


__all__ = [
    "DEFAULT_CONTENT_LENGTH",
    "MAX_CONTENT_LENGTH",
    "MAX_KEYWORDS_LENGTH",
    "MAX_TOPIC_LENGTH",
    "MIN_CONTENT_LENGTH",
    "Tone",
    "build_prompt",
    "count_words",
    "sanitize_keywords",
    "sanitize_topic",
]

"""Tests for prompt construction helpers."""

from __future__ import annotations

from content_writer.prompting import (
    MAX_KEYWORDS_LENGTH,
    MAX_TOPIC_LENGTH,
    Tone,
    build_prompt,
    count_words,
    sanitize_keywords,
    sanitize_topic,
)


def test_prompt_includes_parameters() -> None:
    prompt = build_prompt("Cats", Tone.CASUAL, "seo, ai", 300)

    assert 'Topic: "Cats"' in prompt
    assert "Tone of Voice: Casual" in prompt
    assert "Please naturally incorporate the following keywords: seo, ai." in prompt
    assert "approximately 300 words long" in prompt


def test_prompt_without_keywords_skips_instruction() -> None:
    prompt = build_prompt("Cats", Tone.HUMOROUS, "", 200)

    assert "incorporate" not in prompt
    assert "Tone of Voice: Humorous/Funny" in prompt


def test_sanitizers_trim_and_truncate() -> None:
    assert sanitize_topic("  Dogs  ") == "Dogs"
    assert len(sanitize_topic("x" * 900)) == MAX_TOPIC_LENGTH
    assert sanitize_keywords(None) == ""
    assert len(sanitize_keywords(" k" * 300)) == MAX_KEYWORDS_LENGTH


def test_count_words() -> None:
    assert count_words("one  two\nthree") == 3
    assert count_words("   ") == 0

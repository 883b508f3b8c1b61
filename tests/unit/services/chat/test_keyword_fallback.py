"""Tests for the keyword responder."""

import random

import pytest

from application.services.chat.fallback import KNOWLEDGE_BASE, KeywordResponder


@pytest.fixture
def responder():
    return KeywordResponder(rng=random.Random(7))


@pytest.mark.parametrize(
    "message, category",
    [
        ("Hello there", "greetings"),
        ("What is your UX process?", "design"),
        ("Do you use AI?", "ai"),
        ("Show me your portfolio", "portfolio"),
        ("Where have you worked before?", "experience"),
        ("Which tools do you know?", "skills"),
        ("What's the weather like?", "default"),
    ],
)
def test_categorize(responder, message, category):
    assert responder.categorize(message) == category


def test_first_matching_category_wins(responder):
    # "hi" and "design" both match; greetings is checked first
    assert responder.categorize("Hi, tell me about design") == "greetings"


def test_word_boundaries(responder):
    # "ai" inside "said" or "maintain" must not match
    assert responder.categorize("She said to maintain it") == "default"


def test_respond_picks_from_category(responder):
    assert responder.respond("hello") in KNOWLEDGE_BASE["greetings"]


def test_injected_rng_is_deterministic():
    first = KeywordResponder(rng=random.Random(3)).respond("random question")
    second = KeywordResponder(rng=random.Random(3)).respond("random question")

    assert first == second


def test_knowledge_base_needs_default():
    with pytest.raises(ValueError):
        KeywordResponder(knowledge_base={"greetings": ["hi"]})

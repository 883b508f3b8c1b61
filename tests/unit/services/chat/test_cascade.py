"""Tests for the ordered model cascade."""

import httpx
import pytest

from application.services.chat.cascade import is_model_removed, try_in_order
from common.exception import ModelExhaustedError, ProviderResponseError


def scripted_attempt(outcomes):
    """Return an attempt function plus the list of candidates it was called with."""
    calls = []

    async def attempt(candidate):
        calls.append(candidate)
        outcome = outcomes[candidate]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    return attempt, calls


@pytest.mark.asyncio
async def test_removed_models_advance_to_next():
    attempt, calls = scripted_attempt(
        {
            "A": ProviderResponseError("model 'A' was removed on September 15, 2025", 404),
            "B": ProviderResponseError("model 'B' was removed on September 15, 2025", 404),
            "C": "Hello from C",
        }
    )

    result = await try_in_order(["A", "B", "C"], attempt)

    assert result == "Hello from C"
    assert calls == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_stops_at_first_success():
    attempt, calls = scripted_attempt({"A": "first", "B": "second"})

    assert await try_in_order(["A", "B"], attempt) == "first"
    assert calls == ["A"]


@pytest.mark.asyncio
async def test_last_error_propagates_unchanged():
    last_error = ProviderResponseError("Cohere API error: overloaded", 503)
    attempt, calls = scripted_attempt(
        {"A": ProviderResponseError("removed", 404), "B": RuntimeError("nope"), "C": last_error}
    )

    with pytest.raises(ProviderResponseError) as exc_info:
        await try_in_order(["A", "B", "C"], attempt)

    assert exc_info.value is last_error
    assert calls == ["A", "B", "C"]


@pytest.mark.asyncio
async def test_timeout_advances():
    attempt, calls = scripted_attempt({"A": httpx.ReadTimeout("slow"), "B": "ok"})

    assert await try_in_order(["A", "B"], attempt) == "ok"
    assert calls == ["A", "B"]


@pytest.mark.asyncio
async def test_empty_candidates_raise_exhausted():
    attempt, calls = scripted_attempt({})

    with pytest.raises(ModelExhaustedError):
        await try_in_order([], attempt)
    assert calls == []


def test_is_model_removed():
    assert is_model_removed(Exception("Model was REMOVED"))
    assert is_model_removed(Exception("this model is deprecated"))
    assert not is_model_removed(Exception("rate limited"))

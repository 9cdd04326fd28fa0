"""
Tests unitaires pour les types resultat Success / Failure et or_else.
"""

from unittest.mock import AsyncMock

import pytest

from src.core.errors import ProviderError
from src.core.value_objects.outcome import Failure, Success, attempt, or_else


async def _value(value):
    return value


async def _raise(error: Exception):
    raise error


class TestSuccessFailure:
    """Tests des types Success et Failure."""

    def test_success_unwrap_returns_value(self):
        outcome = Success(42)
        assert outcome.ok is True
        assert outcome.unwrap() == 42

    def test_failure_unwrap_raises_original_error(self):
        error = ProviderError("boom", status_code=500)
        outcome = Failure(error)

        assert outcome.ok is False
        with pytest.raises(ProviderError) as exc_info:
            outcome.unwrap()
        assert exc_info.value is error


class TestAttempt:
    """Tests de attempt()."""

    @pytest.mark.asyncio
    async def test_wraps_value_in_success(self):
        outcome = await attempt(_value("ok"))
        assert outcome == Success("ok")

    @pytest.mark.asyncio
    async def test_captures_provider_error(self):
        error = ProviderError("not found", status_code=404)
        outcome = await attempt(_raise(error))

        assert isinstance(outcome, Failure)
        assert outcome.error is error

    @pytest.mark.asyncio
    async def test_does_not_capture_programming_errors(self):
        with pytest.raises(KeyError):
            await attempt(_raise(KeyError("bug")))


class TestOrElse:
    """Tests du combinateur or_else()."""

    @pytest.mark.asyncio
    async def test_returns_first_success_without_running_next(self):
        second = AsyncMock(return_value=Success(2))

        outcome = await or_else(
            lambda: attempt(_value(1)),
            second,
        )

        assert outcome.unwrap() == 1
        second.assert_not_called()

    @pytest.mark.asyncio
    async def test_falls_back_on_failure(self):
        outcome = await or_else(
            lambda: attempt(_raise(ProviderError("movie", status_code=404))),
            lambda: attempt(_value("series")),
        )

        assert outcome.unwrap() == "series"

    @pytest.mark.asyncio
    async def test_returns_last_failure_when_all_fail(self):
        last = ProviderError("series", status_code=404)

        outcome = await or_else(
            lambda: attempt(_raise(ProviderError("movie", status_code=404))),
            lambda: attempt(_raise(last)),
        )

        assert not outcome.ok
        assert outcome.error is last

    @pytest.mark.asyncio
    async def test_requires_at_least_one_alternative(self):
        with pytest.raises(ValueError):
            await or_else()

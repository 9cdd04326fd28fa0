"""
Tests unitaires pour les primitives de lots gather_all / gather_settled.
"""

import asyncio

import pytest

from src.core.errors import AggregationFailure, ProviderError
from src.services.batch import gather_all, gather_settled


async def _value(value, delay: float = 0):
    await asyncio.sleep(delay)
    return value


async def _fail(error: Exception, delay: float = 0):
    await asyncio.sleep(delay)
    raise error


class TestGatherAll:
    """Tests du lot tout-ou-rien."""

    @pytest.mark.asyncio
    async def test_returns_results_in_order(self):
        results = await gather_all(
            _value("slow", delay=0.02),
            _value("fast"),
            operation="test",
        )

        assert results == ["slow", "fast"]

    @pytest.mark.asyncio
    async def test_provider_error_fails_whole_batch(self):
        cause = ProviderError("GET /tv/popular returned HTTP 500", status_code=500)

        with pytest.raises(AggregationFailure) as exc_info:
            await gather_all(_value("ok"), _fail(cause), operation="home:all")

        assert exc_info.value.operation == "home:all"
        assert exc_info.value.cause is cause
        assert exc_info.value.__cause__ is cause

    @pytest.mark.asyncio
    async def test_cancels_pending_siblings(self):
        cancelled = asyncio.Event()

        async def slow_member():
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        with pytest.raises(AggregationFailure):
            await gather_all(
                slow_member(),
                _fail(ProviderError("boom", status_code=503)),
                operation="details:movie/1",
            )

        assert cancelled.is_set()

    @pytest.mark.asyncio
    async def test_programming_errors_propagate_unchanged(self):
        with pytest.raises(KeyError):
            await gather_all(_value(1), _fail(KeyError("bug")), operation="test")


class TestGatherSettled:
    """Tests du lot au mieux."""

    @pytest.mark.asyncio
    async def test_drops_failed_members(self):
        results = await gather_settled(
            _value(1),
            _fail(ProviderError("missing", status_code=404)),
            _value(3),
        )

        assert results == [1, 3]

    @pytest.mark.asyncio
    async def test_all_failed_gives_empty_list(self):
        results = await gather_settled(
            _fail(ProviderError("a", status_code=404)),
            _fail(ProviderError("b", status_code=404)),
        )

        assert results == []

    @pytest.mark.asyncio
    async def test_no_member(self):
        assert await gather_settled() == []

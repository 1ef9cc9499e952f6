"""Tests for the search orchestrator."""

import asyncio

import pytest

from site_search.models.presentation import Empty, Results
from site_search.page.regions import RegionName
from site_search.search.orchestrator import build_search_page, run_search
from site_search.search.providers import SearchUnavailableError, StaticSearchProvider


class GivingUpProvider:
    """Provider that fails its search without a result."""

    def __init__(self):
        self.calls = 0

    async def search(self, callback) -> None:
        self.calls += 1
        await asyncio.sleep(0)
        raise SearchUnavailableError("service down")


class SilentProvider:
    """Provider that returns without ever calling back."""

    async def search(self, callback) -> None:
        await asyncio.sleep(0)


class CallSoonProvider:
    """Provider that schedules its callback and returns at once."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    async def search(self, callback) -> None:
        self.calls += 1
        asyncio.get_running_loop().call_soon(callback, self.result)


class ChattyProvider:
    """Provider that calls back more than once."""

    def __init__(self, *results):
        self.results = results

    async def search(self, callback) -> None:
        for result in self.results:
            await asyncio.sleep(0)
            callback(result)


class DeferredProvider:
    """Provider whose callback fires from a scheduled loop callback."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    async def search(self, callback) -> None:
        self.calls += 1
        loop = asyncio.get_running_loop()
        done = loop.create_future()

        def deliver() -> None:
            callback(self.result)
            done.set_result(None)

        loop.call_later(0.01, deliver)
        await done


@pytest.mark.asyncio
async def test_run_search_presents_results(sample_search_result):
    """Test a result is turned into a presentation and handed over."""
    presented = []

    state = await run_search(StaticSearchProvider(sample_search_result), presented.append)

    assert isinstance(state, Results)
    assert presented == [state]


@pytest.mark.asyncio
async def test_run_search_presents_empty(empty_search_result):
    """Test an empty result is handed over as the empty state."""
    presented = []

    state = await run_search(StaticSearchProvider(empty_search_result), presented.append)

    assert state == Empty("zzz")
    assert presented == [Empty("zzz")]


@pytest.mark.asyncio
async def test_run_search_provider_giving_up_presents_nothing():
    """Test a provider that gives up leaves the page alone."""
    provider = GivingUpProvider()
    presented = []

    state = await run_search(provider, presented.append)

    assert state is None
    assert presented == []
    assert provider.calls == 1


@pytest.mark.asyncio
async def test_run_search_uses_first_callback_only(sample_search_result, empty_search_result):
    """Test later callbacks are ignored."""
    presented = []

    state = await run_search(
        ChattyProvider(empty_search_result, sample_search_result),
        presented.append,
    )

    assert state == Empty("zzz")
    assert presented == [Empty("zzz")]


@pytest.mark.asyncio
async def test_run_search_waits_for_deferred_callback(sample_search_result):
    """Test a callback delivered later in the search still completes it."""
    provider = DeferredProvider(sample_search_result)
    presented = []

    state = await run_search(provider, presented.append)

    assert isinstance(state, Results)
    assert len(presented) == 1
    assert provider.calls == 1


@pytest.mark.asyncio
async def test_run_search_presents_callback_after_search_returns(sample_search_result):
    """Test a callback scheduled after search() returns is still presented."""
    provider = CallSoonProvider(sample_search_result)
    presented = []

    state = await run_search(provider, presented.append)

    assert isinstance(state, Results)
    assert presented == [state]
    assert provider.calls == 1


@pytest.mark.asyncio
async def test_run_search_keeps_waiting_without_callback():
    """Test a provider that never calls back leaves the search pending."""
    presented = []

    with pytest.raises(asyncio.TimeoutError):
        await asyncio.wait_for(run_search(SilentProvider(), presented.append), timeout=0.05)

    assert presented == []


@pytest.mark.asyncio
async def test_build_search_page_results(sample_search_result):
    """Test a fresh page ends up showing the results."""
    page, state = await build_search_page(StaticSearchProvider(sample_search_result))

    assert isinstance(state, Results)
    assert RegionName.SEARCH_RESULTS in page.visible_regions()
    assert RegionName.NO_SEARCH_RESULTS not in page.visible_regions()
    assert "09 March 2021" in page.render()


@pytest.mark.asyncio
async def test_build_search_page_without_result_stays_initial():
    """Test the page keeps all presentation regions hidden without a result."""
    page, state = await build_search_page(GivingUpProvider(), title="Nothing yet")

    assert state is None
    assert page.visible_regions() == frozenset()
    assert "<title>Nothing yet</title>" in page.render()

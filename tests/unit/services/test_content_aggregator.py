"""
Tests unitaires pour ContentAggregator (accueil, categories differees, recherche).
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from src.core.entities.catalog import CatalogKind, Category, MediaTab
from src.core.errors import AggregationFailure, ProviderError
from src.services.content_aggregator import (
    ContentAggregator,
    assemble_categories,
    splice_lazy_categories,
)
from src.services.saved_items import SavedItemsService


@pytest.fixture
def saved_items() -> MagicMock:
    """Service My List sans element sauvegarde par defaut."""
    service = MagicMock(spec=SavedItemsService)
    service.resolve_saved = AsyncMock(return_value=[])
    return service


@pytest.fixture
def catalog(mock_catalog, make_item):
    """Chaque flux retourne 25 elements, le premier sans backdrop."""

    async def get_feed(endpoint):
        base = abs(hash(endpoint.path)) % 1000 * 100
        items = [make_item(base, backdrop_path=None, rating=9.5)]
        items += [make_item(base + i, rating=7.0) for i in range(1, 25)]
        return items

    mock_catalog.get_feed.side_effect = get_feed
    return mock_catalog


class TestFetchContent:
    """Tests de fetch_content()."""

    @pytest.mark.asyncio
    async def test_all_tab_places_my_list_second(self, catalog, saved_items, make_item):
        saved_items.resolve_saved.return_value = [make_item(10), make_item(20)]
        aggregator = ContentAggregator(catalog, saved_items)

        home = await aggregator.fetch_content(MediaTab.ALL)

        titles = [category.title for category in home.categories]
        assert titles == [
            "Trending Now",
            "My List",
            "Popular Movies",
            "Popular TV Shows",
            "Top Rated Movies",
            "Top Rated TV Shows",
            "Now Playing",
            "Upcoming",
        ]
        assert [item.id for item in home.categories[1].items] == [10, 20]

    @pytest.mark.asyncio
    async def test_lazy_categories_are_placeholders(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        home = await aggregator.fetch_content(MediaTab.ALL)

        lazy = [category for category in home.categories if category.loading]
        assert [category.title for category in lazy] == [
            "Top Rated Movies",
            "Top Rated TV Shows",
            "Now Playing",
            "Upcoming",
        ]
        assert all(category.items == () for category in lazy)

    @pytest.mark.asyncio
    async def test_priority_categories_are_filtered_and_truncated(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        home = await aggregator.fetch_content(MediaTab.ALL)

        trending = home.categories[0]
        assert not trending.loading
        assert len(trending.items) == 20
        assert all(item.has_images for item in trending.items)

    @pytest.mark.asyncio
    async def test_empty_my_list_is_omitted(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        home = await aggregator.fetch_content(MediaTab.ALL)

        assert "My List" not in [category.title for category in home.categories]

    @pytest.mark.asyncio
    async def test_movie_tab_never_shows_my_list(self, catalog, saved_items, make_item):
        saved_items.resolve_saved.return_value = [make_item(10)]
        aggregator = ContentAggregator(catalog, saved_items)

        home = await aggregator.fetch_content(MediaTab.MOVIE)

        assert "My List" not in [category.title for category in home.categories]
        assert home.categories[0].title == "Trending Movies"

    @pytest.mark.asyncio
    async def test_hero_uses_unfiltered_feed(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        home = await aggregator.fetch_content(MediaTab.TV)

        assert home.hero is not None
        assert home.hero.has_images
        assert home.hero.rating == 7.0

    @pytest.mark.asyncio
    async def test_any_failure_fails_whole_home(self, catalog, saved_items, make_item):
        async def get_feed(endpoint):
            if endpoint.path == "/tv/popular":
                raise ProviderError("GET /tv/popular returned HTTP 500", status_code=500)
            return [make_item(1)]

        catalog.get_feed.side_effect = get_feed
        aggregator = ContentAggregator(catalog, saved_items)

        with pytest.raises(AggregationFailure) as exc_info:
            await aggregator.fetch_content(MediaTab.ALL)

        assert exc_info.value.operation == "home:all"
        assert exc_info.value.cause.status_code == 500

    @pytest.mark.asyncio
    async def test_launches_hero_saved_and_priority_requests(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        await aggregator.fetch_content(MediaTab.ALL)

        saved_items.resolve_saved.assert_awaited_once()
        # hero + 3 flux prioritaires, aucun flux differe
        assert catalog.get_feed.await_count == 4


class TestFetchLazyCategories:
    """Tests de fetch_lazy_categories()."""

    @pytest.mark.asyncio
    async def test_returns_categories_in_configured_order(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        categories = await aggregator.fetch_lazy_categories(MediaTab.MOVIE)

        assert [category.title for category in categories] == [
            "Top Rated Movies",
            "Upcoming",
            "Action",
            "Comedy",
        ]
        assert all(not category.loading for category in categories)
        assert all(len(category.items) == 20 for category in categories)

    @pytest.mark.asyncio
    async def test_failure_returns_empty_list(self, catalog, saved_items):
        catalog.get_feed.side_effect = ProviderError("timeout")
        aggregator = ContentAggregator(catalog, saved_items)

        assert await aggregator.fetch_lazy_categories(MediaTab.ALL) == []


class TestSearch:
    """Tests de search()."""

    @pytest.mark.asyncio
    async def test_excludes_people(self, catalog, saved_items, make_item):
        catalog.search_multi.return_value = [
            make_item(1, media_type="movie"),
            make_item(2, media_type="person", poster_path=None),
            make_item(3, kind=CatalogKind.SERIES, media_type="tv"),
        ]
        aggregator = ContentAggregator(catalog, saved_items)

        results = await aggregator.search("  breaking ")

        assert [item.id for item in results] == [1, 3]
        catalog.search_multi.assert_awaited_once_with("breaking")

    @pytest.mark.asyncio
    async def test_blank_query_makes_no_call(self, catalog, saved_items):
        aggregator = ContentAggregator(catalog, saved_items)

        assert await aggregator.search("   ") == []
        catalog.search_multi.assert_not_called()

    @pytest.mark.asyncio
    async def test_provider_error_gives_empty_list(self, catalog, saved_items):
        catalog.search_multi.side_effect = ProviderError("down", status_code=503)
        aggregator = ContentAggregator(catalog, saved_items)

        assert await aggregator.search("matrix") == []


class TestCategoryAssembly:
    """Tests des fonctions pures d'assemblage."""

    def test_my_list_only_on_all_tab(self, make_item):
        priority = [Category.resolved("A", []), Category.resolved("B", [])]

        categories = assemble_categories(MediaTab.TV, priority, [make_item(1)], ["C"])

        assert [category.title for category in categories] == ["A", "B", "C"]

    def test_splice_replaces_placeholders_by_title(self, make_item):
        home = [
            Category.resolved("Trending Now", [make_item(1)]),
            Category.placeholder("Top Rated Movies"),
            Category.placeholder("Upcoming"),
        ]
        lazy = [Category.resolved("Top Rated Movies", [make_item(2)])]

        categories = splice_lazy_categories(home, lazy)

        assert categories[0] is home[0]
        assert categories[1] == lazy[0]
        assert categories[2].loading

"""
Tests for catalog entities built from TMDB payloads.
"""

import pytest

from src.core.entities.catalog import (
    CatalogItem,
    CatalogKind,
    Category,
    Credits,
    CrewMember,
    Video,
)
from tests.fixtures.tmdb_responses import TMDB_TRENDING_RESPONSE


class TestCatalogItemFromPayload:
    """Tests for CatalogItem.from_payload()."""

    def test_movie_entry_uses_title_and_media_type(self):
        item = CatalogItem.from_payload(TMDB_TRENDING_RESPONSE["results"][0])

        assert item.id == 27205
        assert item.kind is CatalogKind.MOVIE
        assert item.title == "Inception"
        assert item.rating == 8.4
        assert item.recognized
        assert item.has_images

    def test_series_entry_uses_name(self):
        item = CatalogItem.from_payload(TMDB_TRENDING_RESPONSE["results"][1])

        assert item.kind is CatalogKind.SERIES
        assert item.title == "Breaking Bad"

    def test_person_entry_has_no_images(self):
        item = CatalogItem.from_payload(TMDB_TRENDING_RESPONSE["results"][2])

        assert not item.has_images
        assert not item.is_displayable

    def test_feed_kind_applies_when_media_type_missing(self):
        item = CatalogItem.from_payload({"id": 1, "name": "Show"}, CatalogKind.SERIES)
        assert item.kind is CatalogKind.SERIES

    def test_media_type_wins_over_feed_kind(self):
        item = CatalogItem.from_payload(
            {"id": 1, "title": "Film", "media_type": "movie"}, CatalogKind.SERIES
        )
        assert item.kind is CatalogKind.MOVIE

    def test_unrecognized_without_title(self):
        item = CatalogItem.from_payload({"id": 1, "media_type": "collection"})
        assert not item.recognized

    def test_invalid_id_raises(self):
        with pytest.raises(ValueError):
            CatalogItem.from_payload({"title": "No id"})

    def test_raw_payload_is_kept(self):
        payload = TMDB_TRENDING_RESPONSE["results"][0]
        item = CatalogItem.from_payload(payload)
        assert item.raw["original_title"] == "Inception"


class TestCategory:
    """Tests for Category constructors."""

    def test_placeholder_is_loading_and_empty(self):
        category = Category.placeholder("Upcoming")
        assert category.loading
        assert category.items == ()

    def test_resolved_is_not_loading(self):
        item = CatalogItem(id=1, kind=CatalogKind.MOVIE, title="A")
        category = Category.resolved("Popular", [item])

        assert not category.loading
        assert category.items == (item,)


class TestCreditsAndVideos:
    def test_directors(self):
        credits = Credits(
            crew=(
                CrewMember(id=1, name="Christopher Nolan", job="Director"),
                CrewMember(id=2, name="Hans Zimmer", job="Original Music Composer"),
            )
        )
        assert credits.directors == ("Christopher Nolan",)

    def test_youtube_trailer(self):
        assert Video(key="k", name="T", site="YouTube", type="Trailer").is_youtube_trailer
        assert not Video(key="k", name="T", site="Vimeo", type="Trailer").is_youtube_trailer

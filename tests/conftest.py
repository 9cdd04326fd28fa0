"""
Fixtures pytest partagees pour les tests LimeTV.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des interfaces (ICatalogProvider, ISubtitleProvider, ISavedItemsStore)
- Fabrique d'elements du catalogue
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Callable, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Settings
from src.core.entities.catalog import CatalogItem, CatalogKind
from src.core.ports.api_clients import ICatalogProvider, ISubtitleProvider
from src.core.ports.saved_items import ISavedItemsStore


@pytest.fixture
def make_item() -> Callable[..., CatalogItem]:
    """
    Fabrique de CatalogItem affichables par defaut.

    Usage:
        item = make_item(1, rating=8.0, backdrop_path=None)
    """

    def factory(
        item_id: int,
        kind: CatalogKind = CatalogKind.MOVIE,
        title: Optional[str] = None,
        poster_path: Optional[str] = "/poster.jpg",
        backdrop_path: Optional[str] = "/backdrop.jpg",
        rating: float = 7.5,
        recognized: bool = True,
        media_type: Optional[str] = None,
    ) -> CatalogItem:
        raw = {"id": item_id}
        if media_type is not None:
            raw["media_type"] = media_type
        return CatalogItem(
            id=item_id,
            kind=kind,
            title=title if title is not None else f"Item {item_id}",
            poster_path=poster_path,
            backdrop_path=backdrop_path,
            rating=rating,
            recognized=recognized,
            raw=raw,
        )

    return factory


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """
    Mock de ICatalogProvider pour les tests.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return AsyncMock(spec=ICatalogProvider)


@pytest.fixture
def mock_subtitles() -> AsyncMock:
    """Mock de ISubtitleProvider pour les tests."""
    return AsyncMock(spec=ISubtitleProvider)


@pytest.fixture
def memory_store() -> MagicMock:
    """
    Mock de ISavedItemsStore avec etat en memoire.

    get() retourne une copie de la liste courante, set() la remplace.
    """
    state: dict[str, list[int]] = {"items": []}
    store = MagicMock(spec=ISavedItemsStore)
    store.get.side_effect = lambda: list(state["items"])
    store.set.side_effect = lambda item_ids: state.__setitem__("items", list(item_ids))
    store.state = state
    return store


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Utilise tmp_path de pytest pour isoler le stockage et les logs
    de chaque test.
    """
    return Settings(
        tmdb_api_key="test_api_key",
        saved_items_dir=tmp_path / "store",
        log_file=tmp_path / "logs" / "limetv.log",
    )

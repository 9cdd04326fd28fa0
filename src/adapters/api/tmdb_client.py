"""
Client TMDB pour le catalogue (flux d'accueil, fiches, saisons, recherche).

Implemente l'interface ICatalogProvider pour TMDB (The Movie Database).
Les reponses JSON sont validees et converties en entites a la frontiere ;
toute erreur HTTP remonte en ProviderError, sans relance.

Usage:
    client = TMDBClient(api_key="your_key")
    items = await client.get_feed(FeedEndpoint("Popular", "/movie/popular"))
    details = await client.get_movie(27205)
    await client.close()
"""

from typing import Any, Optional

from src.adapters.api.provider_client import ProviderClient
from src.core.entities.catalog import (
    CastMember,
    CatalogItem,
    CatalogKind,
    Credits,
    CrewMember,
    Episode,
    FeedEndpoint,
    Genre,
    MovieDetails,
    SeasonDetails,
    SeasonSummary,
    SeriesDetails,
    Video,
)
from src.core.errors import ProviderError
from src.core.ports.api_clients import ICatalogProvider


def _optional_int(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _as_dict(data: Any, path: str) -> dict[str, Any]:
    """Verifie qu'un corps de reponse est un objet JSON."""
    if not isinstance(data, dict):
        raise ProviderError(f"GET {path} returned an unexpected payload", body=data)
    return data


def _results(data: Any, path: str) -> list[dict[str, Any]]:
    """Extrait la liste "results" d'une reponse paginee."""
    results = _as_dict(data, path).get("results") or []
    return [entry for entry in results if isinstance(entry, dict)]


def _detail_item(data: dict[str, Any], kind: CatalogKind, path: str) -> CatalogItem:
    """Element d'une fiche detaillee; un corps sans id valide est une erreur fournisseur."""
    try:
        return CatalogItem.from_payload(data, kind)
    except ValueError as e:
        raise ProviderError(f"GET {path} returned an entry without a valid id", body=data) from e


def _parse_items(
    entries: list[dict[str, Any]],
    default_kind: Optional[CatalogKind] = None,
) -> list[CatalogItem]:
    """Convertit les entrees en CatalogItem, en ignorant celles sans id."""
    items = []
    for entry in entries:
        try:
            items.append(CatalogItem.from_payload(entry, default_kind))
        except ValueError:
            continue
    return items


def _parse_genres(data: dict[str, Any]) -> tuple[Genre, ...]:
    return tuple(
        Genre(id=int(genre["id"]), name=genre.get("name", ""))
        for genre in data.get("genres") or []
        if isinstance(genre, dict) and _optional_int(genre.get("id")) is not None
    )


class TMDBClient(ProviderClient, ICatalogProvider):
    """
    Client API TMDB pour le catalogue.

    Supporte les deux modes d'authentification TMDB:
    - API Key v3 (32 caracteres hex) : passe en parametre api_key
    - Read Access Token v4 (long JWT) : passe en header Bearer

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
        TMDB_IMAGE_BASE_URL: URL de base pour les images (posters, backdrops)
        TIMEOUT: Timeout des appels de metadonnees (secondes)

    Example:
        client = TMDBClient(api_key="xxx")
        bundle_details = await client.get_details(CatalogKind.MOVIE, 27205)
        print(bundle_details.item.title)
        await client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
    TIMEOUT = 10.0

    def __init__(self, api_key: Optional[str]) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB (v3) ou Read Access Token (v4)
        """
        self._api_key = api_key or ""

        # Detecter le type de cle : v3 (32 hex) vs v4 (long JWT)
        is_v4_token = len(self._api_key) > 40

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json;charset=utf-8",
        }
        params = {}
        if is_v4_token:
            headers["Authorization"] = f"Bearer {self._api_key}"
        elif self._api_key:
            params["api_key"] = self._api_key

        super().__init__(
            base_url=self.TMDB_BASE_URL,
            headers=headers,
            params=params,
            timeout=self.TIMEOUT,
        )

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    @classmethod
    def image_url(cls, path: Optional[str]) -> Optional[str]:
        """URL complete d'une image TMDB, ou None."""
        return f"{cls.TMDB_IMAGE_BASE_URL}{path}" if path else None

    async def get_feed(self, endpoint: FeedEndpoint) -> list[CatalogItem]:
        """
        Recupere les entrees d'un endpoint de liste (trending, popular, ...).

        Les entrees ne sont pas filtrees : le hero est choisi sur la liste
        complete, le filtrage d'affichage est fait par le service.

        Args:
            endpoint: Endpoint a interroger

        Returns:
            Liste de CatalogItem dans l'ordre du fournisseur
        """
        data = await self.get_json(endpoint.path, params=dict(endpoint.params))
        return _parse_items(_results(data, endpoint.path), endpoint.kind)

    async def get_movie(self, movie_id: int) -> MovieDetails:
        """
        Recupere la fiche complete d'un film.

        Raises:
            ProviderError: 404 si le film n'existe pas, ou autre erreur HTTP
        """
        path = f"/movie/{movie_id}"
        data = _as_dict(await self.get_json(path), path)

        return MovieDetails(
            item=_detail_item(data, CatalogKind.MOVIE, path),
            overview=data.get("overview") or None,
            release_date=data.get("release_date") or None,
            runtime=_optional_int(data.get("runtime")),
            genres=_parse_genres(data),
            tagline=data.get("tagline") or None,
            imdb_id=data.get("imdb_id") or None,
            raw=data,
        )

    async def get_series(self, series_id: int) -> SeriesDetails:
        """
        Recupere la fiche complete d'une serie TV.

        Le champ "name" de la serie devient le titre de l'element.

        Raises:
            ProviderError: 404 si la serie n'existe pas, ou autre erreur HTTP
        """
        path = f"/tv/{series_id}"
        data = _as_dict(await self.get_json(path), path)

        seasons = tuple(
            SeasonSummary(
                season_number=int(season["season_number"]),
                name=season.get("name", ""),
                episode_count=_optional_int(season.get("episode_count")) or 0,
                poster_path=season.get("poster_path") or None,
            )
            for season in data.get("seasons") or []
            if isinstance(season, dict) and _optional_int(season.get("season_number")) is not None
        )

        return SeriesDetails(
            item=_detail_item(data, CatalogKind.SERIES, path),
            overview=data.get("overview") or None,
            first_air_date=data.get("first_air_date") or None,
            number_of_seasons=_optional_int(data.get("number_of_seasons")) or 0,
            number_of_episodes=_optional_int(data.get("number_of_episodes")) or 0,
            seasons=seasons,
            genres=_parse_genres(data),
            raw=data,
        )

    async def get_credits(self, kind: CatalogKind, item_id: int) -> Credits:
        """Recupere le casting et l'equipe technique."""
        path = f"/{kind.value}/{item_id}/credits"
        data = _as_dict(await self.get_json(path), path)

        cast = tuple(
            CastMember(
                id=int(member["id"]),
                name=member.get("name", ""),
                character=member.get("character") or None,
                profile_path=member.get("profile_path") or None,
            )
            for member in data.get("cast") or []
            if isinstance(member, dict) and _optional_int(member.get("id")) is not None
        )
        crew = tuple(
            CrewMember(
                id=int(member["id"]),
                name=member.get("name", ""),
                job=member.get("job") or None,
                department=member.get("department") or None,
            )
            for member in data.get("crew") or []
            if isinstance(member, dict) and _optional_int(member.get("id")) is not None
        )
        return Credits(cast=cast, crew=crew)

    async def get_videos(self, kind: CatalogKind, item_id: int) -> list[Video]:
        """Recupere les bandes-annonces, teasers et extraits."""
        path = f"/{kind.value}/{item_id}/videos"
        return [
            Video(
                key=str(entry.get("key", "")),
                name=entry.get("name", ""),
                site=entry.get("site", ""),
                type=entry.get("type", ""),
                official=bool(entry.get("official", False)),
            )
            for entry in _results(await self.get_json(path), path)
            if entry.get("key")
        ]

    async def get_similar(self, kind: CatalogKind, item_id: int) -> list[CatalogItem]:
        """Recupere les titres similaires."""
        path = f"/{kind.value}/{item_id}/similar"
        return _parse_items(_results(await self.get_json(path), path), kind)

    async def get_recommendations(self, kind: CatalogKind, item_id: int) -> list[CatalogItem]:
        """Recupere les recommandations."""
        path = f"/{kind.value}/{item_id}/recommendations"
        return _parse_items(_results(await self.get_json(path), path), kind)

    async def get_season(self, series_id: int, season_number: int) -> SeasonDetails:
        """
        Recupere les details d'une saison d'une serie.

        Args:
            series_id: ID TMDB de la serie
            season_number: Numero de saison (0 pour les specials)

        Returns:
            SeasonDetails avec la liste des episodes
        """
        path = f"/tv/{series_id}/season/{season_number}"
        data = _as_dict(await self.get_json(path), path)

        episodes = tuple(
            Episode(
                episode_number=int(episode["episode_number"]),
                name=episode.get("name", ""),
                overview=episode.get("overview") or None,
                still_path=episode.get("still_path") or None,
                runtime=_optional_int(episode.get("runtime")),
                air_date=episode.get("air_date") or None,
            )
            for episode in data.get("episodes") or []
            if isinstance(episode, dict) and _optional_int(episode.get("episode_number")) is not None
        )

        return SeasonDetails(
            season_number=_optional_int(data.get("season_number")) or season_number,
            name=data.get("name", ""),
            overview=data.get("overview") or None,
            episodes=episodes,
            raw=data,
        )

    async def get_external_ids(
        self, kind: CatalogKind, item_id: int
    ) -> dict[str, Optional[str]]:
        """
        Recupere les IDs externes (IMDb, Wikidata, etc.) d'un film ou d'une serie.

        Returns:
            Dictionnaire avec les IDs externes (valeurs None si absentes)
        """
        path = f"/{kind.value}/{item_id}/external_ids"
        data = _as_dict(await self.get_json(path), path)

        return {
            "imdb_id": data.get("imdb_id") or None,
            "tvdb_id": str(data["tvdb_id"]) if data.get("tvdb_id") else None,
            "wikidata_id": data.get("wikidata_id") or None,
        }

    async def search_multi(self, query: str) -> list[CatalogItem]:
        """
        Recherche des films, series et personnes par texte libre.

        Returns:
            Resultats dans l'ordre du fournisseur (personnes incluses)
        """
        path = "/search/multi"
        data = await self.get_json(path, params={"query": query, "include_adult": "false"})
        return _parse_items(_results(data, path))

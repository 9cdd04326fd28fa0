"""
Catalog entities.

Entities representing what the home and detail screens display, built from
TMDB payloads at the ingestion boundary. Every record keeps the raw payload
as a passthrough so that presentation code can read provider fields the
pipeline does not model.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union


class CatalogKind(Enum):
    """Kind of a catalog entry. Values match TMDB path segments."""

    MOVIE = "movie"
    SERIES = "tv"


class MediaTab(Enum):
    """Home screen tab: unified view, movies only or series only."""

    ALL = "all"
    MOVIE = "movie"
    TV = "tv"


RECOGNIZED_MEDIA_TYPES = frozenset(kind.value for kind in CatalogKind)


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class CatalogItem:
    """
    A movie or series entry as returned by list, search or detail endpoints.

    Attributes:
        id: TMDB identifier
        kind: Movie or series
        title: Display title (TMDB "title" for movies, "name" for series)
        poster_path: Poster path on the TMDB image CDN
        backdrop_path: Backdrop path on the TMDB image CDN
        rating: TMDB vote average
        recognized: True if the payload declared a movie/tv media type or
            carried a title/name
        raw: Untouched provider payload
    """

    id: int
    kind: CatalogKind
    title: str
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    rating: float = 0.0
    recognized: bool = True
    raw: dict[str, Any] = field(default_factory=dict, compare=False, hash=False, repr=False)

    @classmethod
    def from_payload(
        cls,
        payload: dict[str, Any],
        default_kind: Optional[CatalogKind] = None,
    ) -> "CatalogItem":
        """
        Build an item from a raw TMDB result entry.

        The kind is the payload's media_type when it is movie/tv, else the
        kind declared by the feed, else inferred from the title field used.

        Raises:
            ValueError: If the payload has no usable integer id
        """
        try:
            item_id = int(payload["id"])
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Catalog entry without a valid id: {payload!r}") from e

        media_type = payload.get("media_type")
        title = _text(payload.get("title")) or _text(payload.get("name"))

        if media_type in RECOGNIZED_MEDIA_TYPES:
            kind = CatalogKind(media_type)
        elif default_kind is not None:
            kind = default_kind
        elif _text(payload.get("title")):
            kind = CatalogKind.MOVIE
        else:
            kind = CatalogKind.SERIES

        return cls(
            id=item_id,
            kind=kind,
            title=title,
            poster_path=payload.get("poster_path") or None,
            backdrop_path=payload.get("backdrop_path") or None,
            rating=_float(payload.get("vote_average")),
            recognized=media_type in RECOGNIZED_MEDIA_TYPES or bool(title),
            raw=dict(payload),
        )

    @property
    def has_images(self) -> bool:
        """True if both poster and backdrop are present."""
        return bool(self.poster_path) and bool(self.backdrop_path)

    @property
    def is_displayable(self) -> bool:
        """True if the item can be rendered as a card."""
        return self.has_images and bool(self.title)


@dataclass(frozen=True)
class Category:
    """
    A titled row of catalog items.

    A category is either a placeholder (loading, no items) or resolved
    (not loading, populated). Use the constructors rather than building
    intermediate states.
    """

    title: str
    items: tuple[CatalogItem, ...] = ()
    loading: bool = False

    @classmethod
    def placeholder(cls, title: str) -> "Category":
        return cls(title=title, items=(), loading=True)

    @classmethod
    def resolved(cls, title: str, items: list[CatalogItem]) -> "Category":
        return cls(title=title, items=tuple(items), loading=False)


@dataclass(frozen=True)
class HomeModel:
    """Hero item plus ordered categories for one tab."""

    hero: Optional[CatalogItem]
    categories: tuple[Category, ...] = ()


@dataclass(frozen=True)
class Genre:
    id: int
    name: str


@dataclass(frozen=True)
class MovieDetails:
    """
    Full movie record from /movie/{id}.

    Attributes:
        item: Card-level view of the movie
        overview: Plot summary
        release_date: ISO date string, if known
        runtime: Runtime in minutes
        genres: Genres in provider order
        tagline: Marketing tagline
        imdb_id: IMDb id when the payload includes it
        raw: Untouched provider payload
    """

    item: CatalogItem
    overview: Optional[str] = None
    release_date: Optional[str] = None
    runtime: Optional[int] = None
    genres: tuple[Genre, ...] = ()
    tagline: Optional[str] = None
    imdb_id: Optional[str] = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def kind(self) -> CatalogKind:
        return CatalogKind.MOVIE


@dataclass(frozen=True)
class SeasonSummary:
    season_number: int
    name: str
    episode_count: int = 0
    poster_path: Optional[str] = None


@dataclass(frozen=True)
class SeriesDetails:
    """
    Full series record from /tv/{id}.

    Series payloads lack movie-only fields (runtime, release date) and carry
    seasons and episode counts instead.
    """

    item: CatalogItem
    overview: Optional[str] = None
    first_air_date: Optional[str] = None
    number_of_seasons: int = 0
    number_of_episodes: int = 0
    seasons: tuple[SeasonSummary, ...] = ()
    genres: tuple[Genre, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def kind(self) -> CatalogKind:
        return CatalogKind.SERIES


Details = Union[MovieDetails, SeriesDetails]


@dataclass(frozen=True)
class Episode:
    episode_number: int
    name: str
    overview: Optional[str] = None
    still_path: Optional[str] = None
    runtime: Optional[int] = None
    air_date: Optional[str] = None


@dataclass(frozen=True)
class SeasonDetails:
    """One season of a series with its episodes, from /tv/{id}/season/{n}."""

    season_number: int
    name: str
    overview: Optional[str] = None
    episodes: tuple[Episode, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class CastMember:
    id: int
    name: str
    character: Optional[str] = None
    profile_path: Optional[str] = None


@dataclass(frozen=True)
class CrewMember:
    id: int
    name: str
    job: Optional[str] = None
    department: Optional[str] = None


@dataclass(frozen=True)
class Credits:
    cast: tuple[CastMember, ...] = ()
    crew: tuple[CrewMember, ...] = ()

    @property
    def directors(self) -> tuple[str, ...]:
        return tuple(member.name for member in self.crew if member.job == "Director")


@dataclass(frozen=True)
class Video:
    """Trailer, teaser or clip attached to an item."""

    key: str
    name: str
    site: str
    type: str
    official: bool = False

    @property
    def is_youtube_trailer(self) -> bool:
        return self.site == "YouTube" and self.type == "Trailer"


@dataclass(frozen=True)
class DetailBundle:
    """Everything the detail screen renders for one item."""

    details: Details
    credits: Credits
    videos: tuple[Video, ...]
    similar: tuple[CatalogItem, ...]
    recommendations: tuple[CatalogItem, ...]


@dataclass(frozen=True)
class FeedEndpoint:
    """
    A TMDB list endpoint feeding one category.

    Attributes:
        title: Category title shown on the home screen
        path: Endpoint path relative to the API base URL
        params: Extra query parameters
        kind: Kind of every entry when the endpoint does not tag media_type
    """

    title: str
    path: str
    params: tuple[tuple[str, str], ...] = ()
    kind: Optional[CatalogKind] = None


@dataclass(frozen=True)
class FeedConfig:
    """Hero, priority and lazy feeds of one tab."""

    hero: FeedEndpoint
    priority: tuple[FeedEndpoint, ...] = ()
    lazy: tuple[FeedEndpoint, ...] = ()

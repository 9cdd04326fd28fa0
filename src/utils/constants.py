"""
Constantes globales pour LimeTV.

Ce module contient:
- Taille de page des categories et libelles synthetiques
- Cles du stockage "My List"
- Configuration des flux (hero, prioritaires, differes) par onglet
- Signaux de qualite de release pour le classement des sous-titres
"""

from src.core.entities.catalog import CatalogKind, FeedConfig, FeedEndpoint, MediaTab

# Nombre maximum d'elements affiches par categorie
ITEMS_PER_CATEGORY = 20

# Categorie synthetisee a partir des elements sauvegardes
MY_LIST_TITLE = "My List"

# Cles du stockage cle-valeur
MY_LIST_KEY = "@limetv_my_list"
MY_LIST_UPDATED_KEY = "@mylist_updated"

# Note minimale (exclusive) pour qu'un element soit candidat hero au premier niveau
HERO_MIN_RATING = 6

# ====================
# Flux TMDB par onglet
# ====================

_MOVIE = CatalogKind.MOVIE
_SERIES = CatalogKind.SERIES

FEEDS: dict[MediaTab, FeedConfig] = {
    MediaTab.ALL: FeedConfig(
        hero=FeedEndpoint("Trending", "/trending/all/week"),
        priority=(
            FeedEndpoint("Trending Now", "/trending/all/week"),
            FeedEndpoint("Popular Movies", "/movie/popular", kind=_MOVIE),
            FeedEndpoint("Popular TV Shows", "/tv/popular", kind=_SERIES),
        ),
        lazy=(
            FeedEndpoint("Top Rated Movies", "/movie/top_rated", kind=_MOVIE),
            FeedEndpoint("Top Rated TV Shows", "/tv/top_rated", kind=_SERIES),
            FeedEndpoint("Now Playing", "/movie/now_playing", kind=_MOVIE),
            FeedEndpoint("Upcoming", "/movie/upcoming", kind=_MOVIE),
        ),
    ),
    MediaTab.MOVIE: FeedConfig(
        hero=FeedEndpoint("Trending Movies", "/trending/movie/week", kind=_MOVIE),
        priority=(
            FeedEndpoint("Trending Movies", "/trending/movie/week", kind=_MOVIE),
            FeedEndpoint("Popular Movies", "/movie/popular", kind=_MOVIE),
            FeedEndpoint("Now Playing", "/movie/now_playing", kind=_MOVIE),
        ),
        lazy=(
            FeedEndpoint("Top Rated Movies", "/movie/top_rated", kind=_MOVIE),
            FeedEndpoint("Upcoming", "/movie/upcoming", kind=_MOVIE),
            FeedEndpoint("Action", "/discover/movie", (("with_genres", "28"),), _MOVIE),
            FeedEndpoint("Comedy", "/discover/movie", (("with_genres", "35"),), _MOVIE),
        ),
    ),
    MediaTab.TV: FeedConfig(
        hero=FeedEndpoint("Trending TV Shows", "/trending/tv/week", kind=_SERIES),
        priority=(
            FeedEndpoint("Trending TV Shows", "/trending/tv/week", kind=_SERIES),
            FeedEndpoint("Popular TV Shows", "/tv/popular", kind=_SERIES),
            FeedEndpoint("Airing Today", "/tv/airing_today", kind=_SERIES),
        ),
        lazy=(
            FeedEndpoint("Top Rated TV Shows", "/tv/top_rated", kind=_SERIES),
            FeedEndpoint("On The Air", "/tv/on_the_air", kind=_SERIES),
            FeedEndpoint("Drama", "/discover/tv", (("with_genres", "18"),), _SERIES),
            FeedEndpoint("Animation", "/discover/tv", (("with_genres", "16"),), _SERIES),
        ),
    ),
}

# ====================
# Classement des sous-titres
# ====================

# Groupes de signaux (sous-chaines, insensibles a la casse) et leur poids.
# Chaque groupe compte au plus une fois ; les groupes se cumulent.
RELEASE_SIGNAL_WEIGHTS: tuple[tuple[tuple[str, ...], int], ...] = (
    (("web-dl",), 100),
    (("webrip",), 90),
    (("web.",), 85),
    (("amzn", "nf", "dsnp"), 80),
    (("bluray", "brrip", "bdrip"), 70),
    (("dvdrip",), 60),
    # Sources diffusion, toujours classees en dernier
    (("hdtv",), -100),
    ((".hi.", ".cc."), 5),
)

# Bonus de popularite : un point par tranche de 10000 telechargements, plafonne
POPULARITY_DIVISOR = 10000
POPULARITY_BONUS_CAP = 30

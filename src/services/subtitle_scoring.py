"""
Classement des sous-titres pour une lecture en streaming.

Ce module fournit :
- build_search_path : chemin de recherche OpenSubtitles (ordre impose)
- score_subtitle_for_streaming : score de qualite de release
- sort_candidates : tri selon la strategie (smart, popular, recent)
- clamp_index : borne l'index demande a la liste triee

Signaux (sous-chaines du nom de release, insensibles a la casse) :
- web-dl: +100
- webrip: +90
- web.: +85
- amzn / nf / dsnp: +80
- bluray / brrip / bdrip: +70
- dvdrip: +60
- hdtv: -100
- .hi. / .cc.: +5
- popularite: min(telechargements / 10000, 30)
"""

from typing import Optional, Sequence

from src.core.entities.subtitles import SortStrategy, SubtitleCandidate
from src.core.errors import SubtitleUnavailable
from src.utils.constants import (
    POPULARITY_BONUS_CAP,
    POPULARITY_DIVISOR,
    RELEASE_SIGNAL_WEIGHTS,
)

IMDB_PREFIX = "tt"


def build_search_path(
    imdb_id: str,
    language: str,
    season: Optional[int] = None,
    episode: Optional[int] = None,
) -> str:
    """
    Construit le chemin de recherche OpenSubtitles.

    L'API exige l'ordre episode / imdbid / season / sublanguageid ;
    ne pas permuter les segments.

    Args:
        imdb_id: Identifiant IMDb, avec ou sans prefixe "tt"
        language: Code langue OpenSubtitles (ex: "eng")
        season: Numero de saison (series)
        episode: Numero d'episode (series)

    Returns:
        Chemin complet, ex: "/search/episode-3/imdbid-0903747/season-2/sublanguageid-eng"
    """
    clean_id = imdb_id[len(IMDB_PREFIX):] if imdb_id.startswith(IMDB_PREFIX) else imdb_id

    segments = []
    if episode is not None:
        segments.append(f"episode-{episode}")
    segments.append(f"imdbid-{clean_id}")
    if season is not None:
        segments.append(f"season-{season}")
    segments.append(f"sublanguageid-{language}")

    return "/search/" + "/".join(segments)


def popularity_bonus(download_count: int) -> float:
    """Bonus de popularite, plafonne a POPULARITY_BONUS_CAP."""
    return min(max(download_count, 0) / POPULARITY_DIVISOR, POPULARITY_BONUS_CAP)


def score_subtitle_for_streaming(candidate: SubtitleCandidate) -> float:
    """
    Calcule le score d'un candidat pour une video issue du streaming.

    Chaque groupe de signaux compte au plus une fois et les groupes se
    cumulent. Les releases HDTV sont penalisees au point de passer
    quasiment toujours en dernier.

    Args:
        candidate: Candidat a evaluer

    Returns:
        Score (plus haut = meilleur)
    """
    name = candidate.release_name.lower()

    score = 0.0
    for signals, weight in RELEASE_SIGNAL_WEIGHTS:
        if any(signal in name for signal in signals):
            score += weight

    return score + popularity_bonus(candidate.download_count)


def sort_candidates(
    candidates: Sequence[SubtitleCandidate],
    strategy: SortStrategy = SortStrategy.SMART,
) -> list[SubtitleCandidate]:
    """
    Trie les candidats selon la strategie.

    - SMART: score decroissant
    - POPULAR: nombre de telechargements decroissant
    - RECENT: ordre du fournisseur (le plus recent d'abord)

    Le tri est stable : a egalite, l'ordre du fournisseur est conserve.
    """
    if strategy is SortStrategy.SMART:
        return sorted(candidates, key=score_subtitle_for_streaming, reverse=True)
    if strategy is SortStrategy.POPULAR:
        return sorted(candidates, key=lambda candidate: candidate.download_count, reverse=True)
    return list(candidates)


def clamp_index(index: int, count: int) -> int:
    """
    Borne un index demande a [0, count - 1].

    Raises:
        SubtitleUnavailable: Si la liste est vide
    """
    if count <= 0:
        raise SubtitleUnavailable("No subtitles found for this title")
    return min(max(index, 0), count - 1)

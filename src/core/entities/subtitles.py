"""
Subtitle entities.

Candidates returned by the OpenSubtitles REST search and the result handed
back to the player once a candidate has been ranked, chosen and decoded.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from src.core.entities.catalog import CatalogKind


class SortStrategy(Enum):
    """
    Ordering applied to subtitle candidates before selection.

    Values:
        SMART: Release-quality score for streaming sources (default)
        POPULAR: Raw download count, descending
        RECENT: Provider order, assumed newest first
    """

    SMART = "smart"
    POPULAR = "popular"
    RECENT = "recent"


def _parse_count(value: Any) -> int:
    """Download counts arrive string-encoded; anything unparsable counts as 0."""
    try:
        return max(int(str(value).strip()), 0)
    except (TypeError, ValueError):
        return 0


def _parse_optional_int(value: Any) -> Optional[int]:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class SubtitleCandidate:
    """
    One subtitle search result prior to ranking.

    Attributes:
        release_name: Free-text release label (the scoring signal)
        language_name: Language label, e.g. "English"
        format: Subtitle format, e.g. "srt"
        download_count: Popularity
        download_link: Gzip-encoded payload URL
        season: Season number for episodes
        episode: Episode number for episodes
    """

    release_name: str
    language_name: str = ""
    format: str = ""
    download_count: int = 0
    download_link: str = ""
    season: Optional[int] = None
    episode: Optional[int] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "SubtitleCandidate":
        """Build a candidate from an OpenSubtitles search entry."""
        return cls(
            release_name=str(payload.get("MovieReleaseName") or payload.get("MovieName") or ""),
            language_name=str(payload.get("LanguageName") or ""),
            format=str(payload.get("SubFormat") or ""),
            download_count=_parse_count(payload.get("SubDownloadsCnt")),
            download_link=str(payload.get("SubDownloadLink") or ""),
            season=_parse_optional_int(payload.get("SeriesSeason")),
            episode=_parse_optional_int(payload.get("SeriesEpisode")),
        )


@dataclass(frozen=True)
class SubtitleSearchParams:
    """
    What the player asks subtitles for.

    Attributes:
        tmdb_id: TMDB identifier of the movie or series
        language: OpenSubtitles language id, e.g. "eng", "spa", "fre"
        kind: Movie or series
        season: Season number (episodes only)
        episode: Episode number (episodes only)
        sort: Candidate ordering
    """

    tmdb_id: int
    language: str
    kind: CatalogKind = CatalogKind.MOVIE
    season: Optional[int] = None
    episode: Optional[int] = None
    sort: SortStrategy = SortStrategy.SMART


@dataclass(frozen=True)
class SubtitleResult:
    """Tagged success/failure result of the subtitle pipeline."""

    success: bool
    srt_content: Optional[str] = None
    total_available: int = 0
    current_index: int = 0
    release_name: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def succeeded(
        cls,
        srt_content: str,
        total_available: int,
        current_index: int,
        release_name: str,
    ) -> "SubtitleResult":
        return cls(
            success=True,
            srt_content=srt_content,
            total_available=total_available,
            current_index=current_index,
            release_name=release_name,
        )

    @classmethod
    def failed(cls, error: str) -> "SubtitleResult":
        return cls(success=False, error=error)

    def as_payload(self) -> dict[str, Any]:
        """Shape consumed by the player (camelCase keys, failures carry only the error)."""
        if not self.success:
            return {"success": False, "error": self.error}
        return {
            "success": True,
            "srtContent": self.srt_content,
            "totalAvailable": self.total_available,
            "currentIndex": self.current_index,
            "releaseName": self.release_name,
        }

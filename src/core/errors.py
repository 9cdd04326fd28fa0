"""
Taxonomie des erreurs du pipeline LimeTV.

- ProviderError : reponse non-2xx ou echec de transport (TMDB ou OpenSubtitles)
- NotFoundFallback : film introuvable, declenche la recherche en serie (interne)
- AggregationFailure : un membre d'un lot tout-ou-rien a echoue
- SubtitleUnavailable : pas d'ID externe / pas de resultat / pas de lien
- DownloadError : echec de telechargement ou de decompression d'un sous-titre
"""

from typing import Any, Optional


class LimeTVError(Exception):
    """Classe de base des erreurs du pipeline."""


class ProviderError(LimeTVError):
    """
    Erreur levee par un client de fournisseur distant.

    Attributes:
        status_code: Code HTTP, ou None pour un echec de transport
        body: Corps de la reponse (JSON decode si possible), si disponible
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Any = None,
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        """True si le fournisseur a repondu 404."""
        return self.status_code == 404


class NotFoundFallback(LimeTVError):
    """Le film n'existe pas sous cet ID, la resolution bascule sur les series."""

    def __init__(self, item_id: int, cause: Exception) -> None:
        self.item_id = item_id
        self.cause = cause
        super().__init__(f"Movie {item_id} not found, falling back to series: {cause}")


class AggregationFailure(LimeTVError):
    """Un membre d'un lot tout-ou-rien a echoue, le lot entier echoue."""

    def __init__(self, operation: str, cause: Exception) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}")


class SubtitleUnavailable(LimeTVError):
    """Aucun sous-titre exploitable (ID externe, resultats ou lien manquant)."""


class DownloadError(LimeTVError):
    """Echec du telechargement ou de la decompression d'un sous-titre."""

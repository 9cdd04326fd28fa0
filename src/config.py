"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe LIMETV_,
et peut optionnellement être fournie via un fichier .env.

La clé TMDB est optionnelle au chargement ; les commandes qui interrogent TMDB
vérifient tmdb_enabled avant de lancer des requêtes.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.entities.subtitles import SortStrategy

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe LIMETV_.
    Exemple : LIMETV_SUBTITLE_LANGUAGE=fre

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="LIMETV_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Clé API TMDB (v3) ou Read Access Token (v4)
    tmdb_api_key: Optional[str] = Field(default=None)

    # Sous-titres
    subtitles_user_agent: str = Field(default="LimeTV-v1.0")
    subtitle_language: str = Field(default="eng", min_length=2)
    subtitle_sort: SortStrategy = Field(default=SortStrategy.SMART)

    # Stockage "My List"
    saved_items_dir: Path = Field(default=Path("~/.local/share/limetv/store"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/limetv.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5, ge=1)

    @field_validator("saved_items_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible, colorée, niveau réglé par la verbosité de la CLI
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse a posteriori
  (statut HTTP et corps des erreurs fournisseur inclus via logger.bind)
"""

import sys
from pathlib import Path

from loguru import logger

_VERBOSITY_LEVELS = ("WARNING", "INFO", "DEBUG")


def level_for_verbosity(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Niveau console effectif selon les options -v/-q de la CLI.

    Args :
        base_level : Niveau configuré (Settings.log_level)
        verbose : Nombre d'options -v (1 = INFO, 2+ = DEBUG)
        quiet : Mode silencieux (erreurs uniquement)
    """
    if quiet:
        return "ERROR"
    if verbose <= 0:
        return base_level
    return _VERBOSITY_LEVELS[min(verbose, len(_VERBOSITY_LEVELS) - 1)]


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/limetv.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # les lots ecartes et echecs fournisseur sont en DEBUG
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.bind(log_file=str(log_file), rotation=rotation_size).debug("Logging configuré")

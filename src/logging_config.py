"""
Configuration du logging de l'application via loguru.

- Sortie console : coloree, au niveau demande
- Sortie fichier (optionnelle) : capture tout a partir de DEBUG, c'est-a-dire
  les hits/miss du cache et les requetes TMDB, en JSON ou en texte
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level> {extra}"
)
FILE_TEXT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} | {message} {extra}"


def configure_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = Path("logs/moviecache.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
    json_file: bool = True,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console
        log_file : Chemin vers le fichier de log, None pour la console seule
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
        json_file : Serialise les lignes du fichier en JSON (sinon texte)
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        logger.debug("Logging configure (console uniquement)")
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}" if json_file else FILE_TEXT_FORMAT,
        serialize=json_file,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configure", log_file=str(log_file), json=json_file)

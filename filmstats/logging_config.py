"""
Logging de FilmStats via loguru.

Deux destinations :
- stderr : niveau choisi par la CLI (-v / -q ou FILMSTATS_LOG_LEVEL), pour suivre
  l'appel au service Films et un eventuel echec de recuperation du catalogue
- fichier : toujours en DEBUG, une ligne JSON par evenement, avec rotation
"""

import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/filmstats.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Remplace les handlers loguru par la console et le journal JSON de FilmStats.

    Args :
        log_level : Niveau minimum affiche sur stderr
        log_file : Journal JSON (le repertoire parent est cree au besoin)
        rotation_size : Taille declenchant la rotation du journal (ex: "10 MB")
        retention_count : Nombre d'archives zip conservees apres rotation
    """
    logger.remove()

    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    # Le journal garde le GET du catalogue (DEBUG) meme quand stderr est en ERROR
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Journal FilmStats ouvert", log_file=str(log_file), level=log_level)

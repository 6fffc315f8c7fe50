"""
Configuration du logging de l'application via loguru.

- Sortie console : lisible, coloree, sur stderr pour ne pas se meler aux
  rapports affiches sur stdout
- Sortie fichier (optionnelle) : serialisee en JSON, avec rotation
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def configure_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la console (DEBUG, INFO, WARNING, ERROR)
        log_file : Fichier de log JSON, aucun si None
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs a conserver
    """
    # Supprime le handler par defaut
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level="DEBUG",
            format="{message}",
            serialize=True,
            rotation=rotation_size,
            retention=retention_count,
            compression="zip",
        )

    logger.debug("Logging configure", log_file=str(log_file), level=log_level)

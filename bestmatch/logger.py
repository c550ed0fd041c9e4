'''
Module de configuration du logger de la bibliothèque.

Les logs de bestmatch sont désactivés à l'import : les handlers loguru de
l'application hôte ne sont jamais touchés. Pour les voir, appeler
setup_logging(), qui ajoute une sortie console (avec couleurs) et, si
BESTMATCH_LOG_FILE est défini, un fichier rotatif.
'''

import sys
from typing import List, Optional

from loguru import logger

from bestmatch.config import settings

# Formats pour les logs
LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level>{message}</level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)

logger.disable("bestmatch")


def _only_bestmatch(record) -> bool:
    return record["name"].startswith("bestmatch")


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> List[int]:
    """
    Active les logs de bestmatch et ajoute ses sorties.

    Args:
        level: Niveau minimal (par défaut settings.LOG_LEVEL)
        log_file: Fichier de log (par défaut settings.LOG_FILE)

    Returns:
        Les identifiants des handlers ajoutés, pour logger.remove()
    """
    level = level or settings.LOG_LEVEL
    log_file = log_file or settings.LOG_FILE
    logger.enable("bestmatch")

    handler_ids = [
        logger.add(
            sys.stderr,
            level=level,
            format=LOG_FORMAT_CONSOLE,
            filter=_only_bestmatch,
            colorize=True,
            backtrace=True,
            diagnose=False
        )
    ]

    # Rotation journalière, conservation de 30 jours
    if log_file:
        handler_ids.append(logger.add(
            log_file,
            level=level,
            format=LOG_FORMAT_FILE,
            filter=_only_bestmatch,
            rotation="00:00",
            retention="30 days",
            compression="zip",
            encoding="utf-8"
        ))
    return handler_ids

# Exemple d'utilisation :
# from bestmatch.logger import setup_logging
# setup_logging(level="DEBUG")

"""
============================================================
 File: logger.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Logger condiviso dell'applicazione. L'interfaccia da
     terminale occupa la console, quindi i messaggi vanno
     solo su file dopo la chiamata a setup_logging(); fino
     ad allora il logger resta silenzioso.
============================================================
"""

import logging
from pathlib import Path

from config import settings

logger = logging.getLogger(settings.APP_NAME)
logger.addHandler(logging.NullHandler())


def setup_logging(log_file=None, level=settings.LOG_LEVEL):
    """Collega un file handler al logger dell'applicazione.

    Senza log_file il logger resta silenzioso. Restituisce
    l'handler installato, oppure None.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    for handler in logger.handlers[:]:
        if isinstance(handler, logging.FileHandler):
            logger.removeHandler(handler)
            handler.close()

    if not log_file:
        return None

    log_file_path = Path(log_file)
    log_file_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(log_file_path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
    logger.addHandler(handler)
    return handler

"""
============================================================
 File: script_repository.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Individua gli script disponibili per il launcher
     percorrendo ricorsivamente una cartella. Ogni file con
     un bit di esecuzione diventa uno Script; la cartella
     che lo contiene ne diventa la categoria. L'ordine segue
     quello del filesystem e non viene mai riordinato.
============================================================
"""

import os
import stat
from pathlib import Path
from typing import List, Optional

from config import settings
from models.script_model import Script
from utils.file_loader import extract_description
from utils.logger import logger

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _display_name(path: Path) -> str:
    name = path.name
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return settings.UNKNOWN_NAME
    return name or settings.UNKNOWN_NAME


def _read_description(path: Path) -> Optional[str]:
    try:
        return extract_description(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Nessuna descrizione per {path}: {e}")
        return None


def _scan(directory: Path, category, scripts, visited) -> None:
    visited.add(os.path.realpath(directory))

    for entry in directory.iterdir():
        try:
            st = entry.stat()
        except OSError as e:
            logger.warning(f"Elemento ignorato {entry}: {e}")
            continue

        if stat.S_ISDIR(st.st_mode):
            if os.path.realpath(entry) in visited:
                logger.debug(f"Cartella già analizzata, salto {entry}")
                continue
            try:
                _scan(entry, _display_name(entry), scripts, visited)
            except OSError as e:
                logger.warning(f"Impossibile leggere la cartella {entry}: {e}")
            continue

        if not stat.S_ISREG(st.st_mode) or not st.st_mode & EXECUTE_BITS:
            continue

        scripts.append(
            Script(
                path=str(entry),
                name=_display_name(entry),
                description=_read_description(entry),
                category=category,
            )
        )


def scan_directory(directory) -> List[Script]:
    """Restituisce tutti i file eseguibili sotto directory, nell'ordine di scoperta.

    I percorsi sono assoluti, così lo script viene lanciato dalla
    cartella analizzata e mai cercato nel PATH.
    Solleva OSError se la cartella stessa non è leggibile.
    """
    scripts: List[Script] = []
    _scan(Path(directory).absolute(), None, scripts, set())
    return scripts


class ScriptRepository:
    def __init__(self, base_path="scripts"):
        self.base_path = Path(base_path)
        self.scripts = scan_directory(self.base_path)
        logger.info(f"Trovati {len(self.scripts)} script in {self.base_path}")

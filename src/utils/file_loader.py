"""
============================================================
 File: file_loader.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Funzioni di utilità per i file. extract_description()
     legge l'intestazione di uno script e restituisce il
     testo della prima riga di commento non vuota (#, // o
     --), saltando righe vuote e shebang. Vengono lette solo
     le righe necessarie a decidere.
============================================================
"""

from pathlib import Path
from typing import Optional

from config import settings


def _strip_comment_marker(line: str) -> Optional[str]:
    for marker in settings.COMMENT_MARKERS:
        if line.startswith(marker):
            return line[len(marker):]
    return None


def extract_description(path) -> Optional[str]:
    """Restituisce il commento descrittivo in testa a uno script, o None.

    Solleva OSError se il file non può essere aperto o letto, e
    UnicodeDecodeError se una riga da esaminare non è UTF-8.
    """
    with Path(path).open("rb") as f:
        for raw in f:
            # decodifica riga per riga: nulla oltre la riga decisiva viene letto
            trimmed = raw.decode("utf-8").strip()

            if not trimmed or trimmed.startswith(settings.SHEBANG):
                continue

            comment = _strip_comment_marker(trimmed)
            if comment is None:
                break

            comment = comment.strip()
            if comment:
                return comment

    return None

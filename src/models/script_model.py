"""
============================================================
 File: script_model.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Modello dati che rappresenta uno script individuato dal
     launcher. Incapsula percorso, nome, descrizione
     opzionale e categoria opzionale (la cartella padre).
============================================================
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Script:
    path: str
    name: str
    description: Optional[str] = None
    category: Optional[str] = None

    @property
    def label(self) -> str:
        """Nome preceduto dalla categoria, es. 'lib/helper.sh'"""
        if self.category:
            return f"{self.category}/{self.name}"
        return self.name

"""
============================================================
 File: app_state.py
 Author: Internal Systems Automation Team
 Created: 2026-10-18

 Description:
     Stato dell'applicazione per il launcher da terminale:
     lista degli script, cursore, vista attiva e flag di
     uscita. La vista attiva è un unico valore (ListView,
     OutputView o HelpView), quindi una sola vista può
     essere attiva alla volta. Tutte le operazioni sono
     semplici modifiche in memoria, senza I/O.
============================================================
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from models.script_model import Script


@dataclass(frozen=True)
class ListView:
    pass


@dataclass(frozen=True)
class HelpView:
    pass


@dataclass(frozen=True)
class OutputView:
    text: str
    scroll: int = 0


View = Union[ListView, OutputView, HelpView]


class AppState:
    def __init__(self, scripts: Sequence[Script]):
        self.scripts: Tuple[Script, ...] = tuple(scripts)
        self.selected_index = 0
        self.view: View = ListView()
        self.should_quit = False

    # --- accessori derivati ---

    @property
    def selected_script(self) -> Optional[Script]:
        if not self.scripts:
            return None
        return self.scripts[self.selected_index]

    @property
    def viewing_output(self) -> bool:
        return isinstance(self.view, OutputView)

    @property
    def showing_help(self) -> bool:
        return isinstance(self.view, HelpView)

    @property
    def output_text(self) -> str:
        if isinstance(self.view, OutputView):
            return self.view.text
        return ""

    @property
    def output_scroll(self) -> int:
        if isinstance(self.view, OutputView):
            return self.view.scroll
        return 0

    # --- navigazione lista ---

    def move_next(self) -> None:
        if self.selected_index < max(len(self.scripts) - 1, 0):
            self.selected_index += 1

    def move_previous(self) -> None:
        if self.selected_index > 0:
            self.selected_index -= 1

    def quit(self) -> None:
        self.should_quit = True

    # --- help ---

    def show_help(self) -> None:
        self.view = HelpView()

    def hide_help(self) -> None:
        if isinstance(self.view, HelpView):
            self.view = ListView()

    # --- output ---

    def show_output(self, text: str) -> None:
        """Passa alla vista output con il testo dato, dall'inizio."""
        self.view = OutputView(text=text)

    def clamp_scroll(self, max_scroll: int) -> None:
        """Riporta lo scroll entro max_scroll (ad esempio dopo un resize)."""
        limit = max(max_scroll, 0)
        if isinstance(self.view, OutputView) and self.view.scroll > limit:
            self.view = OutputView(self.view.text, limit)

    def scroll_up(self) -> None:
        if isinstance(self.view, OutputView) and self.view.scroll > 0:
            self.view = OutputView(self.view.text, self.view.scroll - 1)

    def scroll_down(self, max_scroll: int) -> None:
        """Scorre di una riga verso il basso, mai oltre max_scroll (dall'altezza della vista)."""
        if isinstance(self.view, OutputView):
            scroll = min(self.view.scroll + 1, max(max_scroll, 0))
            self.view = OutputView(self.view.text, scroll)

    def return_to_list(self) -> None:
        self.view = ListView()

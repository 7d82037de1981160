"""
============================================================
File: tool_menu.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Ciclo di input principale del launcher. A ogni giro
disegna lo stato corrente, attende brevemente un tasto e
lo smista in base alla vista attiva (lista, output o
help). L'esecuzione di uno script blocca il ciclo fino
alla sua terminazione.
============================================================
"""

import readchar

from config import settings
from menu.script_runner import execute_selected, run_script
from models.app_state import HelpView, OutputView
from tui.render import max_output_scroll, render
from utils.logger import logger

UP_KEYS = (readchar.key.UP, "\x1bOA", "k")
DOWN_KEYS = (readchar.key.DOWN, "\x1bOB", "j")
ENTER_KEYS = (readchar.key.ENTER, "\r", "\n")
QUIT_KEYS = ("q", readchar.key.ESC)
HELP_KEY = "?"


class ToolMenu:
    def __init__(self, state, session, poll_interval_ms=settings.POLL_INTERVAL_MS, runner=run_script):
        self.state = state
        self.session = session
        self.poll_interval_ms = poll_interval_ms
        self.runner = runner

    def start(self):
        logger.info(f"Avvio menu con {len(self.state.scripts)} script")
        while not self.state.should_quit:
            self.draw()
            key = self.session.poll_key(self.poll_interval_ms)
            if key is not None:
                self.handle_key(key)
        logger.info("Menu chiuso")

    def draw(self):
        self.session.draw(render(self.state, self.session.height))

    def handle_key(self, key):
        view = self.state.view
        if isinstance(view, HelpView):
            self.state.hide_help()
        elif isinstance(view, OutputView):
            self._handle_output_key(key)
        else:
            self._handle_list_key(key)

    def _handle_list_key(self, key):
        if key == HELP_KEY:
            self.state.show_help()
        elif key in QUIT_KEYS:
            self.state.quit()
        elif key in DOWN_KEYS:
            self.state.move_next()
        elif key in UP_KEYS:
            self.state.move_previous()
        elif key in ENTER_KEYS:
            execute_selected(self.state, redraw=self.draw, runner=self.runner)

    def _handle_output_key(self, key):
        # il limite dipende dall'altezza attuale: dopo un resize lo scroll rientra subito
        max_scroll = max_output_scroll(self.state.output_text, self.session.height)
        self.state.clamp_scroll(max_scroll)

        if key in UP_KEYS:
            self.state.scroll_up()
        elif key in DOWN_KEYS:
            self.state.scroll_down(max_scroll)
        else:
            self.state.return_to_list()

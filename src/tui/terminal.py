"""
============================================================
File: terminal.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Gestione del terminale per il launcher. TerminalSession
mette stdin in modalità cbreak e apre un display rich Live
a schermo intero; all'uscita (su qualunque percorso)
ripristina entrambi. KeyReader legge stdin con timeout e
traduce i byte nei nomi dei tasti di readchar.
============================================================
"""

import os
import select
import sys
import termios
import tty
from collections import deque

import readchar
from rich.console import Console
from rich.live import Live

from config import settings
from utils.logger import logger

ESC = readchar.key.ESC
CSI_PREFIXES = ("[", "O")


def split_keys(data):
    """Divide un blocco di input del terminale nei singoli tasti.

    Le sequenze di escape ("\\x1b[A", "\\x1bOP", ...) restano
    intere; un ESC isolato è un tasto a sé.
    """
    keys = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == ESC and i + 1 < len(data) and data[i + 1] in CSI_PREFIXES:
            j = i + 2
            # parametri e intermedi, poi un byte finale in @..~
            while j < len(data) and not ("@" <= data[j] <= "~"):
                j += 1
            keys.append(data[i:j + 1])
            i = j + 1
        else:
            keys.append(ch)
            i += 1
    return keys


class KeyReader:
    """Sorgente di tasti non bloccante su un file descriptor tty"""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._pending = deque()

    def _ready(self, timeout):
        readable, _, _ = select.select([self.stream], [], [], timeout)
        return bool(readable)

    def _read_chunk(self):
        data = os.read(self.stream.fileno(), 64)
        # una sequenza spezzata tra due letture viene completata se il resto arriva subito
        while data.endswith(ESC.encode()) or data[-2:] in (b"\x1b[", b"\x1bO"):
            if not self._ready(settings.ESCAPE_SEQUENCE_TIMEOUT_S):
                break
            data += os.read(self.stream.fileno(), 64)
        return data.decode("utf-8", errors="replace")

    def poll(self, timeout_ms):
        """Restituisce il prossimo tasto, o None se non arriva nulla entro timeout_ms.

        Solleva EOFError quando l'input è terminato.
        """
        if self._pending:
            return self._pending.popleft()
        if not self._ready(timeout_ms / 1000):
            return None

        data = self._read_chunk()
        if not data:
            raise EOFError("Input del terminale chiuso")
        self._pending.extend(split_keys(data))
        return self._pending.popleft()


class TerminalSession:
    """Terminale a schermo intero: input cbreak più display Live su schermo alternativo"""

    def __init__(self, console=None, stream=None):
        self.console = console or Console(highlight=False)
        self.stream = stream or sys.stdin
        self.keys = KeyReader(self.stream)
        self._saved_attrs = None
        self._live = None

    def enter(self):
        fd = self.stream.fileno()
        self._saved_attrs = termios.tcgetattr(fd)
        tty.setcbreak(fd)

        self._live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            redirect_stdout=False,
            redirect_stderr=False,
        )
        self._live.start()
        logger.debug("Sessione terminale avviata")

    def leave(self):
        try:
            if self._live is not None:
                self._live.stop()
                self._live = None
        finally:
            if self._saved_attrs is not None:
                termios.tcsetattr(self.stream.fileno(), termios.TCSADRAIN, self._saved_attrs)
                self._saved_attrs = None
            logger.debug("Sessione terminale chiusa")

    def __enter__(self):
        try:
            self.enter()
        except BaseException:
            self.leave()
            raise
        return self

    def __exit__(self, exc_type, exc, tb):
        self.leave()
        return False

    @property
    def height(self):
        return self.console.size.height

    def draw(self, renderable):
        self._live.update(renderable, refresh=True)

    def poll_key(self, timeout_ms):
        return self.keys.poll(timeout_ms)

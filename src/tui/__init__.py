"""
============================================================
File: __init__.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Package per l'interfaccia da terminale: gestione della
sessione, input da tastiera e disegno delle viste.
============================================================
"""

from tui.render import render
from tui.terminal import KeyReader, TerminalSession

__all__ = ['render', 'KeyReader', 'TerminalSession']

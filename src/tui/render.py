"""
============================================================
File: render.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Trasforma lo stato dell'applicazione in renderable rich:
la lista degli script, l'output dell'ultima esecuzione e
la schermata di help. Nulla qui modifica lo stato; oltre
allo stato l'unico input è l'altezza dello schermo.
============================================================
"""

from rich.console import Group
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from config import settings
from models.app_state import HelpView, OutputView

HEADER_SIZE = 3
FOOTER_SIZE = 3
PANEL_BORDERS = 2

LIST_FOOTER = "↑/↓: Navigate | Enter: Run | ?: Help | q: Quit"
HELP_TEXT = """\
Script List View:
  ↑/k         - Move selection up
  ↓/j         - Move selection down
  Enter       - Run selected script
  ?           - Show this help
  q/Esc       - Quit application

Output View:
  ↑/k         - Scroll up
  ↓/j         - Scroll down
  Any other   - Return to script list

General:
  All commands are case-sensitive
  Navigation uses vim keys (j/k) or arrows"""


def output_body_height(screen_height):
    """Numero di righe di output visibili per una data altezza dello schermo.

    Usata sia per il disegno sia per il limite di scroll, così i
    due coincidono anche dopo un resize.
    """
    return max(1, screen_height - HEADER_SIZE - FOOTER_SIZE - PANEL_BORDERS)


def max_output_scroll(text, screen_height):
    total = len(text.splitlines())
    return max(0, total - output_body_height(screen_height))


def _line(text, style=""):
    return Text(text, style=style, no_wrap=True, overflow="crop")


def _frame(header, body, footer):
    layout = Layout()
    layout.split_column(
        Layout(header, name="header", size=HEADER_SIZE),
        Layout(body, name="body"),
        Layout(footer, name="footer", size=FOOTER_SIZE),
    )
    return layout


def _script_rows(state):
    """Restituisce (indice, righe) per ogni script della lista."""
    for i, script in enumerate(state.scripts):
        selected = i == state.selected_index
        style = "bold yellow" if selected else "white"
        prefix = "▶" if selected else " "

        name = Text(f"{prefix} {script.name}", style=style, no_wrap=True, overflow="ellipsis")
        if script.category:
            name.append(f"  [{script.category}]", style="dim cyan")

        lines = [name]
        if script.description:
            lines.append(Text(f"    {script.description}", style=style, no_wrap=True, overflow="ellipsis"))
        yield i, lines


def render_list_view(state, height):
    rows = list(_script_rows(state))
    visible = output_body_height(height)

    # mantiene la voce selezionata dentro la finestra
    flat = []
    selected_start = selected_end = 0
    for i, lines in rows:
        if i == state.selected_index:
            selected_start = len(flat)
            selected_end = selected_start + len(lines)
        flat.extend(lines)
    start = min(max(0, selected_end - visible), selected_start)

    count = len(state.scripts)
    noun = "script" if count == 1 else "scripts"
    header = Panel(
        _line(f"{settings.APP_TITLE} - {count} {noun}"),
        title="Scripts",
        title_align="left",
        border_style="cyan",
    )
    body = Panel(
        Group(*flat[start:start + visible]),
        title="Available Scripts",
        title_align="left",
        border_style="cyan",
    )
    footer = Panel(_line(LIST_FOOTER, "bright_black"), border_style="cyan")
    return _frame(header, body, footer)


def _output_color(text):
    if text.startswith(settings.SUCCESS_MARKER):
        return "green"
    if text.startswith(settings.FAILURE_MARKER):
        return "red"
    return "yellow"


def render_output_view(state, height):
    text = state.output_text
    color = _output_color(text)
    script = state.selected_script
    label = script.label if script is not None else ""

    lines = text.splitlines()
    total = len(lines)
    visible = output_body_height(height)
    start = min(state.output_scroll, max(0, total - visible))
    end = min(start + visible, total)

    if total > visible:
        footer_text = f"↑/↓: Scroll | Lines {start + 1}-{end} of {total} | Other: Back"
    else:
        footer_text = "Press any key to go back"

    header = Panel(_line(f"Output: {label}"), title="Script Output", title_align="left", border_style=color)
    body = Panel(Group(*(_line(l) for l in lines[start:end])), border_style=color)
    footer = Panel(_line(footer_text, "bright_black"), border_style=color)
    return _frame(header, body, footer)


def render_help_view():
    header = Panel(_line("Keyboard Shortcuts"), title="Help", title_align="left", border_style="yellow")
    body = Panel(Text(HELP_TEXT), border_style="yellow")
    footer = Panel(_line("Press any key to close", "bright_black"), border_style="yellow")
    return _frame(header, body, footer)


def render(state, height):
    """Sceglie il renderer per la vista attiva"""
    if isinstance(state.view, HelpView):
        return render_help_view()
    if isinstance(state.view, OutputView):
        return render_output_view(state, height)
    return render_list_view(state, height)

"""
============================================================
File: script_runner.py
Author: Internal Systems Automation Team
Created: 2026-10-18

Description:
Esegue lo script selezionato come processo figlio,
attende la sua terminazione e trasforma stdout, stderr e
codice di uscita nel report mostrato nella vista output.
============================================================
"""

import subprocess

from config import settings
from utils.logger import logger


def format_report(exit_code, stdout, stderr):
    """Costruisce il report della vista output per uno script terminato"""
    if exit_code == 0:
        header = f"{settings.SUCCESS_MARKER} Script completed successfully\nExit code: 0"
    else:
        header = f"{settings.FAILURE_MARKER} Script failed\nExit code: {exit_code}"

    return (
        f"{header}\n\n"
        f"=== OUTPUT ===\n{stdout or settings.NO_OUTPUT}\n\n"
        f"=== ERRORS ===\n{stderr or settings.NO_ERRORS}"
    )


def format_launch_error(script, error):
    return f"{settings.FAILURE_MARKER} Failed to launch {script.name}\n\n{error}"


def run_script(script):
    """Esegue uno script senza argomenti e ne restituisce il report.

    Blocca fino alla fine del processo; non ci sono timeout.
    Solleva OSError se il processo non può essere avviato.
    """
    logger.info(f"Esecuzione: {script.path}")
    result = subprocess.run([script.path], capture_output=True)

    stdout = result.stdout.decode("utf-8", errors="replace")
    stderr = result.stderr.decode("utf-8", errors="replace")
    # codice negativo: processo terminato da un segnale
    exit_code = result.returncode if result.returncode >= 0 else -1

    logger.info(f"{script.name} terminato con codice {exit_code}")
    return format_report(exit_code, stdout, stderr)


def execute_selected(state, redraw=None, runner=run_script):
    """Esegue lo script sotto il cursore e ne mostra il risultato.

    Il messaggio di attesa viene mostrato (e ridisegnato) prima
    dell'avvio del processo, così lo schermo riflette l'esecuzione
    in corso mentre il ciclo è bloccato.
    """
    script = state.selected_script
    if script is None:
        return

    state.show_output(settings.RUNNING_PLACEHOLDER)
    if redraw is not None:
        redraw()

    try:
        report = runner(script)
    except OSError as e:
        logger.error(f"Impossibile avviare {script.path}: {e}")
        report = format_launch_error(script, e)

    state.show_output(report)

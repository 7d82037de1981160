"""
============================================================
 File: settings.py
 Author: Internal Systems Automation Team
 Created: 2025-01-10
 Last Updated: 2026-10-18

 Description:
     Impostazioni centralizzate del launcher: attesa input,
     marcatori di commento riconosciuti nell'intestazione
     degli script, default di logging e testi mostrati
     durante l'esecuzione di uno script.
============================================================
"""

APP_NAME = "script-launcher"
APP_TITLE = "Script Runner"

# Ciclo di input
POLL_INTERVAL_MS = 250
ESCAPE_SEQUENCE_TIMEOUT_S = 0.05

# Estrazione descrizione
SHEBANG = "#!"
COMMENT_MARKERS = ("#", "//", "--")
UNKNOWN_NAME = "unknown"

# Logging
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
LOG_LEVEL = "INFO"

# Esecuzione script
RUNNING_PLACEHOLDER = "Running script...\n\nPlease wait..."
NO_OUTPUT = "(no output)"
NO_ERRORS = "(none)"
SUCCESS_MARKER = "✓"
FAILURE_MARKER = "✗"

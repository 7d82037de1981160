"""
============================================================
File: main.py
Author: Internal Systems Automation Team
Created: 2025-01-10
Last Updated: 2026-10-18

Description:
Entry point principale del launcher. Legge la riga di
comando, carica configurazione e logging, analizza la
cartella degli script e avvia il menu interattivo
all'interno di una sessione di terminale.
============================================================
"""

import argparse
import configparser
import sys
from pathlib import Path

from config import settings
from config.config import ConfigManager
from db.script_repository import ScriptRepository
from menu.tool_menu import ToolMenu
from models.app_state import AppState
from tui.terminal import TerminalSession
from utils.logger import logger, setup_logging


def build_parser():
    parser = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Browse and run the executable scripts found in a folder.",
    )
    parser.add_argument("directory", nargs="?", help="Folder to scan for executable scripts")
    parser.add_argument("--config", help="INI file with [APP] and [LOGGING] settings")
    parser.add_argument("--log-file", help="Write a log to this file")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level")
    return parser


def load_config(args):
    config = ConfigManager(args.config)
    if args.log_file:
        config.set("LOGGING", "file", Path(args.log_file).resolve())
    if args.debug:
        config.set("APP", "debug", "true")
    return config


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.directory is None:
        parser.print_help(sys.stdout)
        return 0

    try:
        config = load_config(args)
    except (OSError, configparser.Error) as e:
        print(f"Error: cannot load config: {e}")
        return 1

    setup_logging(config.log_file, config.log_level)
    logger.info("=" * 60)
    logger.info(f"Startup della applicazione, cartella: {args.directory}")

    try:
        repo = ScriptRepository(base_path=args.directory)
    except OSError as e:
        logger.error(f"Impossibile leggere la cartella {args.directory}: {e}")
        print(f"Error: cannot read directory {args.directory}: {e.strerror or e}")
        return 1

    if not repo.scripts:
        print(f"No executable scripts found in {args.directory}")
        return 0

    state = AppState(repo.scripts)
    try:
        with TerminalSession() as session:
            ToolMenu(state, session, poll_interval_ms=config.poll_interval_ms).start()
    except KeyboardInterrupt:
        logger.info("Interrotto dall'utente")
    except EOFError:
        logger.info("Input del terminale terminato, uscita")
    except Exception as e:
        logger.exception(f"Errore del terminale: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
============================================================
File: config.py
Author: Internal Systems Automation Team
Created: 2026-01-12
Last Updated: 2026-10-18

Description:
Gestione centralizzata della configurazione del launcher.
I default interni vengono sempre caricati; un file INI
viene letto sopra di essi solo se passato esplicitamente
(--config).
============================================================
"""

import configparser
from pathlib import Path

from config import settings
from utils.logger import logger


class ConfigManager:
    """Accesso tipizzato alla configurazione del launcher"""

    def __init__(self, config_path=None):
        self._config = configparser.ConfigParser(interpolation=None)
        self._config_path = Path(config_path) if config_path else None
        self._load_defaults()

        if self._config_path is None:
            return

        if not self._config_path.is_file():
            raise FileNotFoundError(f"Config file not found: {self._config_path}")

        logger.info(f"Config trovato: {self._config_path}")
        self._config.read(self._config_path, encoding="utf-8")

    def _load_defaults(self):
        """Carica configurazione di default"""
        self._config["APP"] = {
            "poll_interval_ms": str(settings.POLL_INTERVAL_MS),
            "debug": "false",
        }
        self._config["LOGGING"] = {
            "file": "",
            "level": settings.LOG_LEVEL,
        }

    def get(self, section, key, fallback=None):
        """Ottiene un valore, o fallback se mancante o vuoto"""
        try:
            value = self._config.get(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError):
            return fallback
        return value if value != "" else fallback

    def get_int(self, section, key, fallback=None):
        """Ottiene un valore intero dalla configurazione"""
        try:
            return self._config.getint(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_bool(self, section, key, fallback=False):
        """Ottiene un valore booleano dalla configurazione"""
        try:
            return self._config.getboolean(section, key)
        except (configparser.NoSectionError, configparser.NoOptionError, ValueError):
            return fallback

    def get_path(self, section, key, relative_to=None):
        """Ottiene un percorso, relativo a relative_to (o alla cartella del config)"""
        path_str = self.get(section, key)
        if not path_str:
            return None

        path = Path(path_str).expanduser()
        if path.is_absolute():
            return path

        if relative_to is None and self._config_path is not None:
            relative_to = self._config_path.parent
        if relative_to is not None:
            return (Path(relative_to) / path).resolve()
        return path.resolve()

    def set(self, section, key, value):
        """Sovrascrive un valore a runtime (opzioni da riga di comando)"""
        if not self._config.has_section(section):
            self._config.add_section(section)
        self._config.set(section, key, str(value))

    @property
    def poll_interval_ms(self):
        """Timeout di attesa input in millisecondi"""
        value = self.get_int("APP", "poll_interval_ms", settings.POLL_INTERVAL_MS)
        if value is None or value <= 0:
            return settings.POLL_INTERVAL_MS
        return value

    @property
    def debug(self):
        return self.get_bool("APP", "debug", False)

    @property
    def log_file(self):
        return self.get_path("LOGGING", "file")

    @property
    def log_level(self):
        if self.debug:
            return "DEBUG"
        return self.get("LOGGING", "level", settings.LOG_LEVEL).upper()

    @property
    def config_file(self):
        return self._config_path

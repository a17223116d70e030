"""Implémentation concrète du logger avec fichier."""

import logging
import os
from typing import Any, Dict, Optional, Union

from rust_format.config.settings import LoggingSettings
from rust_format.logging.base import Logger


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier avec option console.

    Caractéristiques:
    - Logger unique par fichier (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Support optionnel de la sortie console
    """

    def __init__(
        self,
        log_file: str,
        config: Optional[Union[LoggingSettings, Dict[str, Any]]] = None,
        console_output: bool = False
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log
            config: LoggingSettings, ou dict contenant une section
                "logging" (clés level et format)
            console_output: Activer la sortie console en plus du fichier
        """
        self.log_file = log_file

        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        settings = self._resolve_settings(config)
        log_level = getattr(logging, settings.level, logging.INFO)

        self.logger = logging.getLogger(f"rust_format.{log_file}")
        self.logger.setLevel(log_level)

        # Éviter les handlers dupliqués
        if not self.logger.handlers:
            formatter = logging.Formatter(settings.format)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)
            self.handler = file_handler

            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        else:
            self.handler = self.logger.handlers[0]

        self.logger.propagate = False

    @staticmethod
    def _resolve_settings(
        config: Optional[Union[LoggingSettings, Dict[str, Any]]]
    ) -> LoggingSettings:
        """Normalise la configuration reçue en LoggingSettings.

        Args:
            config: Modèle déjà validé, dict brut ou None.

        Returns:
            Paramètres de logging validés (défauts si None).
        """
        if config is None:
            return LoggingSettings()
        if isinstance(config, LoggingSettings):
            return config
        return LoggingSettings.model_validate(config.get("logging", {}))

    def _flush(self) -> None:
        """Force l'écriture immédiate sur le disque."""
        self.handler.flush()

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)
        self._flush()

    def log_info(self, message: str) -> None:
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        self.logger.error(message)
        self._flush()

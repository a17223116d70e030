"""Modèles Pydantic de configuration du formateur.

Exemple de fichier TOML accepté par load_settings :

    tool_name = "rustfmt"

    [logging]
    level = "DEBUG"
    format = "%(asctime)s - %(levelname)s - %(message)s"
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from rust_format.config.loader import ConfigLoader, FileConfigLoader

DEFAULT_TOOL_NAME = "rustfmt"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class LoggingSettings(BaseModel):
    """Paramètres du FileLogger."""

    level: str = "INFO"
    format: str = DEFAULT_LOG_FORMAT

    model_config = {"extra": "forbid"}

    @field_validator("level")
    @classmethod
    def must_be_known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Niveau de log inconnu : {v}")
        return level


class FormatterSettings(BaseModel):
    """Configuration d'un RustFormatter.

    Attributes:
        tool_name: Nom du composant de toolchain à invoquer.
        logging: Paramètres de journalisation.
    """

    tool_name: str = Field(default=DEFAULT_TOOL_NAME, min_length=1)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"extra": "forbid"}

    @field_validator("tool_name")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Le nom de l'outil est requis.")
        return v


def load_settings(
    config_path: Union[str, Path],
    config_loader: Optional[ConfigLoader] = None
) -> FormatterSettings:
    """Charge et valide la configuration du formateur.

    Args:
        config_path: Fichier .toml ou .json.
        config_loader: Chargeur injectable (FileConfigLoader par défaut).

    Returns:
        Instance validée de FormatterSettings.

    Raises:
        FileNotFoundError: Si le fichier n'existe pas.
        ValueError: Si l'extension n'est pas supportée.
        pydantic.ValidationError: Si le contenu est invalide.
    """
    loader = config_loader or FileConfigLoader()
    return loader.load(config_path, schema=FormatterSettings)

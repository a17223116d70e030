"""Formatage de fichiers Rust via rustfmt.

RustFormatter résout l'outil sur la toolchain, le lance avec le
chemin cible comme unique argument puis classe l'issue :

    - outil introuvable       -> ToolMissingError (aucun processus lancé)
    - échec du lancement      -> FormatIOError
    - mort par signal         -> NoResultCodeError
    - code de retour non nul  -> ToolExecutionError (code + deux flux)
    - code 0                  -> succès, le fichier a été réécrit en place

Aucune tentative n'est rejouée et aucun délai n'est imposé : un outil
bloqué bloque l'appelant.

Example :

    from rust_format import format_file, ToolExecutionError

    try:
        format_file("src/lib.rs")
    except ToolExecutionError as e:
        print(e.code, e.stderr)
"""

import os
from typing import Optional

from rust_format.commands.base import CommandExecutor
from rust_format.commands.runner import SubprocessCommandExecutor
from rust_format.config.settings import DEFAULT_TOOL_NAME, FormatterSettings
from rust_format.errors.exceptions import (
    FormatError,
    FormatIOError,
    NoResultCodeError,
    ToolExecutionError,
    ToolMissingError,
)
from rust_format.formatter.base import FormatInvoker, PathArg
from rust_format.logging.base import Logger
from rust_format.streams import TextStream
from rust_format.toolchain.base import ToolLocator
from rust_format.toolchain.locator import RustupToolLocator


class RustFormatter(FormatInvoker):
    """Invocation de rustfmt sur un fichier et classement du résultat.

    Chaque appel est indépendant : aucun chemin d'outil n'est mémorisé
    entre deux appels.

    Attributes:
        tool_name: Nom du composant de toolchain invoqué.
    """

    def __init__(
        self,
        tool_name: str = DEFAULT_TOOL_NAME,
        locator: Optional[ToolLocator] = None,
        executor: Optional[CommandExecutor] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le formateur.

        Args:
            tool_name: Nom du composant à résoudre (défaut: rustfmt).
            locator: Locator de toolchain (RustupToolLocator par défaut).
            executor: Exécuteur de processus
                (SubprocessCommandExecutor par défaut, sans timeout).
            logger: Logger optionnel ; rien n'est journalisé sans lui.
        """
        self.tool_name = tool_name
        self._logger = logger
        self._locator = locator or RustupToolLocator(logger=logger)
        self._executor = executor or SubprocessCommandExecutor(logger=logger)

    @classmethod
    def from_settings(
        cls,
        settings: FormatterSettings,
        locator: Optional[ToolLocator] = None,
        executor: Optional[CommandExecutor] = None,
        logger: Optional[Logger] = None,
    ) -> "RustFormatter":
        """Construit un formateur depuis une configuration validée."""
        return cls(
            tool_name=settings.tool_name,
            locator=locator,
            executor=executor,
            logger=logger,
        )

    def _fail(self, error: FormatError) -> FormatError:
        if self._logger:
            self._logger.log_error(
                f"Formatage échoué [{error.kind}] : {error}"
            )
        return error

    def format_file(self, path: PathArg) -> None:
        """Formate le fichier en place avec l'outil de la toolchain.

        Le chemin n'est pas vérifié : un fichier inexistant produit
        l'erreur que rapporte l'outil ou le système.

        Args:
            path: Chemin du fichier cible.

        Raises:
            ToolMissingError: L'outil est absent de la toolchain.
            FormatIOError: Le lancement ou l'attente a échoué.
            NoResultCodeError: Le processus n'a pas rendu de code.
            ToolExecutionError: L'outil a rendu un code non nul.
        """
        tool = self._locator.find_installed_component(self.tool_name)
        if tool is None:
            raise self._fail(ToolMissingError(self.tool_name))

        try:
            result = self._executor.run([tool, path])
        except OSError as e:
            raise self._fail(FormatIOError(e)) from e

        if result.return_code is None:
            raise self._fail(NoResultCodeError())

        if result.return_code != 0:
            raise self._fail(ToolExecutionError(
                code=result.return_code,
                stdout=TextStream.from_bytes(result.stdout),
                stderr=TextStream.from_bytes(result.stderr),
            ))

        if self._logger:
            self._logger.log_info(f"Fichier formaté : {os.fsdecode(path)}")


def format_file(path: PathArg) -> None:
    """Formate un fichier Rust avec le rustfmt de la toolchain active.

    Raccourci pour ``RustFormatter().format_file(path)``.

    Args:
        path: Chemin du fichier cible.

    Raises:
        FormatError: Sous-classe décrivant la sorte d'échec.
    """
    RustFormatter().format_file(path)

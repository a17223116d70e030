"""Interfaces abstraites pour la restitution des erreurs de formatage."""

import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from rust_format.errors.exceptions import (
    FormatError,
    FormatErrorKind,
    ToolExecutionError,
)

# Codes de sortie par défaut, alignés sur les conventions du shell.
EXIT_CODES: dict[FormatErrorKind, int] = {
    FormatErrorKind.TOOL_MISSING: 127,
    FormatErrorKind.IO: 126,
    FormatErrorKind.NO_RESULT_CODE: 1,
}


def exit_code_for(error: Exception) -> int:
    """Détermine le code de sortie d'un programme échouant sur error.

    Une ToolExecutionError reprend le code rendu par l'outil ; les
    autres sortes utilisent EXIT_CODES ; toute autre exception donne 1.

    Args:
        error: L'exception ayant interrompu le programme.

    Returns:
        Code de sortie non nul.
    """
    if isinstance(error, ToolExecutionError):
        return error.code
    if isinstance(error, FormatError):
        return EXIT_CODES.get(error.kind, 1)
    return 1


class ErrorHandler(ABC):
    """Interface de base pour les handlers d'erreurs.

    Chaque implémentation concrète définit une stratégie de
    restitution des erreurs de formatage (console, logs, etc.).
    """

    @abstractmethod
    def handle(self, error: Exception) -> None:
        """Traite une erreur.

        Args:
            error: L'exception à traiter.
        """
        pass


class ErrorHandlerChain:
    """Diffuse les erreurs aux handlers enregistrés.

    Un handler peut être restreint à certaines sortes d'erreurs de
    formatage (ex: n'envoyer en console que les ToolExecutionError).
    Les exceptions qui ne sont pas des FormatError parviennent à tous
    les handlers.
    """

    def __init__(self) -> None:
        self._routes: list[
            tuple[ErrorHandler, Optional[frozenset[FormatErrorKind]]]
        ] = []

    @property
    def handlers(self) -> list[ErrorHandler]:
        """Handlers enregistrés, dans l'ordre d'ajout."""
        return [handler for handler, _ in self._routes]

    def add_handler(
        self,
        handler: ErrorHandler,
        kinds: Optional[Iterable[FormatErrorKind]] = None,
    ) -> "ErrorHandlerChain":
        """Ajoute un handler à la chaîne.

        Args:
            handler: Le handler d'erreurs à ajouter.
            kinds: Sortes d'erreurs de formatage acceptées
                (None : toutes).

        Returns:
            La chaîne courante pour le chaînage.
        """
        accepted = frozenset(kinds) if kinds is not None else None
        self._routes.append((handler, accepted))
        return self

    def handle(self, error: Exception) -> None:
        """Transmet l'erreur aux handlers qui acceptent sa sorte."""
        kind = error.kind if isinstance(error, FormatError) else None
        for handler, accepted in self._routes:
            if accepted is None or kind is None or kind in accepted:
                handler.handle(error)

    def handle_and_exit(
        self, error: Exception, exit_code: Optional[int] = None
    ) -> None:
        """Gère l'erreur et termine le programme.

        Args:
            error: L'exception à traiter avant la sortie.
            exit_code: Code de sortie imposé ; par défaut, celui
                donné par exit_code_for(error).
        """
        self.handle(error)
        sys.exit(exit_code if exit_code is not None else exit_code_for(error))

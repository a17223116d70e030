"""
    ConsoleErrorHandler : affichage des erreurs de formatage en console.
"""
from typing import Optional

from rust_format.errors.base import ErrorHandler
from rust_format.errors.exceptions import (ApplicationError,
                                           FormatErrorKind,
                                           FormatIOError,
                                           ToolExecutionError,
                                           FormatError)

DEFAULT_SOLUTIONS: dict[FormatErrorKind, str] = {
    FormatErrorKind.TOOL_MISSING:
        "Installez le composant avec : rustup component add rustfmt",
    FormatErrorKind.TOOL_EXECUTION:
        "Corrigez le fichier source selon la sortie d'erreur ci-dessus.",
    FormatErrorKind.IO:
        "Vérifiez que l'outil est exécutable et les permissions.",
    FormatErrorKind.NO_RESULT_CODE:
        "Le processus a été interrompu par un signal, relancez le formatage.",
}


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues, et affiche une solution adaptée à la sorte
    d'erreur de formatage.
    """

    def __init__(
        self,
        solutions: Optional[dict[FormatErrorKind, str]] = None
    ) -> None:
        """Initialise le handler console.

        Args:
            solutions: Dictionnaire {FormatErrorKind: "message solution"}
                fusionné par-dessus les solutions par défaut.
        """
        self.solutions = {**DEFAULT_SOLUTIONS, **(solutions or {})}

    def handle(self, error: Exception) -> None:
        if isinstance(error, ApplicationError):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _handle_known_error(self, error: ApplicationError) -> None:
        """Affiche le type, le message et une solution.

        Pour une ToolExecutionError, le message contient déjà les
        deux flux capturés ; pour une FormatIOError, l'erreur système
        d'origine est rappelée.

        Args:
            error: L'exception métier à traiter.
        """
        print(f"\n🛑 {type(error).__name__}: {str(error)}")

        if isinstance(error, FormatIOError):
            print(f"Erreur système : {type(error.os_error).__name__}")
        elif isinstance(error, ToolExecutionError):
            print(f"Code retour : {error.code}")

        if isinstance(error, FormatError):
            print(f"\n🔧 Solution : {self.solutions[error.kind]}")
        else:
            print("\n🔧 Solution : Voir les suggestions ci-dessus.")

    def _handle_unknown_error(self, error: Exception) -> None:
        print(f"\n💥 Erreur inattendue: {str(error)}")
        print(f"Type: {type(error).__name__}")
        print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )

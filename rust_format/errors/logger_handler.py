"""
    LoggerErrorHandler
"""
from rust_format.errors.base import ErrorHandler
from rust_format.errors.exceptions import ApplicationError, FormatError
from rust_format.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    Les erreurs de formatage sont préfixées par leur sorte.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        if isinstance(error, FormatError):
            self.logger.log_error(
                f"[{error.kind}] {type(error).__name__}: {str(error)}"
            )
        elif isinstance(error, ApplicationError):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )

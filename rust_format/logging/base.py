"""Interface abstraite de journalisation des invocations d'outils."""

import shlex
from abc import ABC, abstractmethod
from typing import Optional, Sequence


class Logger(ABC):
    """Interface pour le système de logging.

    Les implémentations fournissent les quatre niveaux ; les messages
    décrivant le cycle de vie d'un processus (lancement, fin) sont
    construits ici pour que l'exécuteur et le locator les formulent
    de la même façon.
    """

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Log un message de diagnostic."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass

    def log_command(self, command: Sequence[str]) -> None:
        """Trace le lancement d'une commande.

        Les arguments sont quotés comme pour un shell, un chemin
        contenant des espaces reste lisible.

        Args:
            command: Programme suivi de ses arguments.
        """
        self.log_info(f"Exécution : {shlex.join(command)}")

    def log_exit(
        self,
        command: Sequence[str],
        return_code: Optional[int],
        duration: float,
        signal_number: Optional[int] = None,
    ) -> None:
        """Trace la fin d'un processus selon son issue.

        Args:
            command: Commande exécutée.
            return_code: Code de retour, None pour une mort par signal.
            duration: Durée d'exécution en secondes.
            signal_number: Signal reçu, si connu.
        """
        cmd_str = shlex.join(command)
        if return_code == 0:
            self.log_debug(f"Terminé en {duration:.3f}s : {cmd_str}")
        elif return_code is None:
            cause = (
                f"le signal {signal_number}"
                if signal_number is not None else "un signal"
            )
            self.log_error(f"Terminé par {cause} : {cmd_str}")
        else:
            self.log_error(f"Code retour {return_code} : {cmd_str}")

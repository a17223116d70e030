"""Interfaces abstraites et structures de données pour l'exécution
de processus externes.

Ce module définit :
    - CommandResult : Résultat immuable d'une exécution de commande.
    - CommandExecutor : Interface abstraite pour les exécuteurs.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

CommandArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


@dataclass(frozen=True)
class CommandResult:
    """Résultat de l'exécution d'une commande.

    Les flux sont conservés en octets bruts : leur décodage relève
    de l'appelant.

    Attributes:
        command: Commande exécutée sous forme de liste.
        return_code: Code de retour du processus, ou None s'il s'est
            terminé sans code (tué par un signal).
        stdout: Sortie standard capturée.
        stderr: Sortie d'erreur capturée.
        duration: Durée d'exécution en secondes.
    """

    command: List[str]
    return_code: Optional[int]
    stdout: bytes
    stderr: bytes
    duration: float

    @property
    def success(self) -> bool:
        """True si la commande a réussi (code 0)."""
        return self.return_code == 0


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de processus.

    Un exécuteur lance la commande telle quelle, sans option ni
    surcharge d'environnement, attend sa fin et capture intégralement
    stdout et stderr. Les échecs du système (lancement, attente) sont
    propagés sous forme d'OSError.
    """

    @abstractmethod
    def run(
        self,
        command: Sequence[CommandArg],
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Args:
            command: Programme suivi de ses arguments (str, bytes ou
                chemins).
            timeout: Timeout en secondes (None : pas de limite).

        Returns:
            Résultat de l'exécution.

        Raises:
            OSError: Si le lancement ou l'attente échoue.
            subprocess.TimeoutExpired: Si le timeout expire.
        """
        pass

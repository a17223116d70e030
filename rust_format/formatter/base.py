"""Interface abstraite d'invocation d'un outil de formatage."""

import os
from abc import ABC, abstractmethod
from typing import Union

PathArg = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


class FormatInvoker(ABC):
    """Interface pour formater un fichier source en place."""

    @abstractmethod
    def format_file(self, path: PathArg) -> None:
        """Formate un fichier en invoquant l'outil externe.

        Args:
            path: Chemin du fichier cible.

        Raises:
            FormatError: Sous-classe décrivant la sorte d'échec.
        """
        pass

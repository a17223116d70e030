"""Interface abstraite de recherche d'un composant de toolchain."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional


class ToolLocator(ABC):
    """Interface pour localiser un exécutable installé.

    L'absence du composant n'est pas une erreur : la recherche
    retourne simplement None.
    """

    @abstractmethod
    def find_installed_component(self, name: str) -> Optional[Path]:
        """Cherche l'exécutable d'un composant par son nom.

        Args:
            name: Nom du composant (ex: "rustfmt").

        Returns:
            Chemin de l'exécutable, ou None s'il est introuvable.
        """
        pass

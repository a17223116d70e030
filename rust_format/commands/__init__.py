"""Module d'exécution de processus externes.

Classes disponibles :
    CommandResult : Résultat immuable d'une exécution.
    CommandExecutor : Interface abstraite pour les exécuteurs.
    SubprocessCommandExecutor : Exécuteur concret via subprocess.
"""

from rust_format.commands.base import (
    CommandResult,
    CommandExecutor,
)
from rust_format.commands.runner import (
    SubprocessCommandExecutor,
)

__all__ = [
    # Structures de données
    "CommandResult",
    # Interface abstraite
    "CommandExecutor",
    # Implémentation subprocess
    "SubprocessCommandExecutor",
]

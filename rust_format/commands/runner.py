"""Exécuteur de commandes via subprocess.

Ce module fournit SubprocessCommandExecutor, une implémentation
concrète de CommandExecutor qui lance le processus avec ses trois
flux standard redirigés vers des pipes et capture la sortie en
octets bruts.

Example :
    Exécution simple avec logs fichier :

        from rust_format.commands import SubprocessCommandExecutor

        executor = SubprocessCommandExecutor(logger=logger)
        result = executor.run(["rustc", "--print", "sysroot"])
        print(result.stdout.decode())
"""

import os
import subprocess  # nosec B404
import time
from typing import List, Optional, Sequence

from rust_format.commands.base import (
    CommandArg,
    CommandExecutor,
    CommandResult,
)
from rust_format.logging.base import Logger


class SubprocessCommandExecutor(CommandExecutor):
    """Exécuteur de commandes via subprocess.Popen.

    stdin est un pipe sur lequel rien n'est écrit ; communicate() le
    ferme dès le début de l'attente. stdout et stderr sont drainés
    complètement avant que le processus ne soit libéré. Le processus
    hérite de l'environnement et du répertoire courant de l'appelant.

    Attributes:
        _logger: Logger optionnel.
        _default_timeout: Timeout par défaut en secondes.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        default_timeout: Optional[float] = None,
    ) -> None:
        """Initialise l'exécuteur de commandes.

        Args:
            logger: Logger optionnel.
            default_timeout: Timeout par défaut en secondes.
        """
        self._logger = logger
        self._default_timeout = default_timeout

    def _resolve_timeout(
        self,
        timeout: Optional[float] = None,
    ) -> Optional[float]:
        if timeout is not None:
            return timeout
        return self._default_timeout

    @staticmethod
    def _exit_code(returncode: int) -> Optional[int]:
        """Traduit le returncode de Popen en code de sortie.

        Sous POSIX, un returncode négatif signale une mort par signal :
        il n'y a alors pas de code de sortie.

        Args:
            returncode: Valeur de Popen.returncode après l'attente.

        Returns:
            Code de sortie, ou None pour une mort par signal.
        """
        if os.name == "posix" and returncode < 0:
            return None
        return returncode

    def run(
        self,
        command: Sequence[CommandArg],
        timeout: Optional[float] = None,
    ) -> CommandResult:
        """Exécute une commande et retourne le résultat.

        Les arguments bytes ou chemins sont décodés avec
        os.fsdecode, qui restitue les mêmes octets au système.

        Args:
            command: Programme suivi de ses arguments.
            timeout: Timeout en secondes (prioritaire).

        Returns:
            CommandResult avec les sorties capturées en octets.

        Raises:
            OSError: Si le lancement ou l'attente échoue.
            subprocess.TimeoutExpired: Si le timeout expire ; le
                processus est alors tué et attendu avant la levée.
        """
        args: List[str] = [os.fsdecode(arg) for arg in command]
        effective_timeout = self._resolve_timeout(timeout)

        if self._logger:
            self._logger.log_command(args)

        start = time.monotonic()
        try:
            with subprocess.Popen(  # nosec B603
                args,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
            ) as proc:
                try:
                    stdout, stderr = proc.communicate(
                        timeout=effective_timeout
                    )
                except subprocess.TimeoutExpired:
                    proc.kill()
                    proc.communicate()
                    if self._logger:
                        self._logger.log_error(
                            f"Timeout après {effective_timeout}s : "
                            f"{args[0]}"
                        )
                    raise
        except OSError as e:
            if self._logger:
                self._logger.log_error(f"Erreur système : {e}")
            raise

        duration = time.monotonic() - start
        return_code = self._exit_code(proc.returncode)
        if self._logger:
            self._logger.log_exit(
                args,
                return_code,
                duration,
                signal_number=(
                    -proc.returncode if return_code is None else None
                ),
            )
        return CommandResult(
            command=args,
            return_code=return_code,
            stdout=stdout,
            stderr=stderr,
            duration=duration,
        )

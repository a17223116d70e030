"""Localisation des composants de la toolchain Rust.

RustupToolLocator interroge la toolchain active pour connaître son
sysroot (``rustc --print sysroot``) puis cherche le composant dans
``<sysroot>/bin``. rustup applique au passage RUSTUP_TOOLCHAIN et les
surcharges par répertoire. Si rustc est absent ou échoue, la recherche
se replie sur le PATH.

Lorsque le sysroot est connu mais ne contient pas le composant, le
repli écarte les proxys rustup de ``$CARGO_HOME/bin`` : invoquer un
proxy pour un composant non installé échouerait avec un message de
rustup au lieu de signaler l'absence de l'outil.

Example :

    from rust_format.toolchain import RustupToolLocator

    locator = RustupToolLocator()
    rustfmt = locator.find_installed_component("rustfmt")
    if rustfmt is None:
        print("rustfmt n'est pas installé")
"""

import os
import shutil
import subprocess  # nosec B404
from pathlib import Path
from typing import Optional

from rust_format.commands.base import CommandExecutor
from rust_format.commands.runner import SubprocessCommandExecutor
from rust_format.logging.base import Logger
from rust_format.toolchain.base import ToolLocator

SYSROOT_COMMAND = ["rustc", "--print", "sysroot"]
SYSROOT_TIMEOUT = 30.0


def _executable_name(name: str) -> str:
    """Ajoute le suffixe .exe sous Windows."""
    if os.name == "nt" and not name.lower().endswith(".exe"):
        return f"{name}.exe"
    return name


def _is_executable(path: Path) -> bool:
    return path.is_file() and os.access(path, os.X_OK)


def cargo_bin_dir() -> Path:
    """Répertoire des proxys rustup ($CARGO_HOME/bin, ~/.cargo/bin)."""
    cargo_home = os.environ.get("CARGO_HOME")
    base = Path(cargo_home) if cargo_home else Path.home() / ".cargo"
    return base / "bin"


def _is_rustup_proxy(path: Path) -> bool:
    return path.parent.resolve() == cargo_bin_dir().resolve()


class PathToolLocator(ToolLocator):
    """Recherche d'un exécutable dans le PATH uniquement."""

    def __init__(self, path: Optional[str] = None) -> None:
        """
        Args:
            path: Valeur de PATH à utiliser (os.environ["PATH"] si None).
        """
        self._path = path

    def find_installed_component(self, name: str) -> Optional[Path]:
        found = shutil.which(name, path=self._path)
        if found is None:
            return None
        return Path(found)


class RustupToolLocator(ToolLocator):
    """Recherche d'un composant dans la toolchain Rust active.

    Aucun chemin n'est mis en cache : chaque appel interroge à
    nouveau la toolchain.

    Attributes:
        _executor: Exécuteur utilisé pour lancer rustc.
        _fallback: Locator utilisé si le sysroot ne fournit rien.
        _logger: Logger optionnel.
    """

    def __init__(
        self,
        executor: Optional[CommandExecutor] = None,
        fallback: Optional[ToolLocator] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialise le locator.

        Args:
            executor: Exécuteur de commandes (SubprocessCommandExecutor
                par défaut).
            fallback: Locator de repli (PathToolLocator par défaut).
            logger: Logger optionnel.
        """
        self._executor = executor or SubprocessCommandExecutor(
            default_timeout=SYSROOT_TIMEOUT
        )
        self._fallback = fallback or PathToolLocator()
        self._logger = logger

    def _log_warning(self, message: str) -> None:
        if self._logger:
            self._logger.log_warning(message)

    def sysroot(self) -> Optional[Path]:
        """Retourne le sysroot de la toolchain active.

        Returns:
            Chemin du sysroot, ou None si rustc est indisponible,
            échoue ou produit une sortie inexploitable.
        """
        try:
            result = self._executor.run(SYSROOT_COMMAND)
        except (OSError, subprocess.TimeoutExpired) as e:
            self._log_warning(f"rustc indisponible : {e}")
            return None

        if not result.success:
            self._log_warning(
                f"rustc --print sysroot a échoué "
                f"(code {result.return_code})"
            )
            return None

        try:
            sysroot = result.stdout.decode("utf-8").strip()
        except UnicodeDecodeError:
            self._log_warning("Sysroot non décodable en UTF-8")
            return None
        if not sysroot:
            return None
        return Path(sysroot)

    def find_installed_component(self, name: str) -> Optional[Path]:
        """Cherche le composant dans le sysroot, puis dans le PATH.

        Si le sysroot est connu, un résultat du PATH situé dans le
        répertoire des proxys rustup est ignoré.

        Args:
            name: Nom du composant (ex: "rustfmt").

        Returns:
            Chemin de l'exécutable, ou None s'il est introuvable.
        """
        sysroot = self.sysroot()
        if sysroot is not None:
            candidate = sysroot / "bin" / _executable_name(name)
            if _is_executable(candidate):
                return candidate

        found = self._fallback.find_installed_component(name)
        if (
            found is not None
            and sysroot is not None
            and _is_rustup_proxy(found)
        ):
            self._log_warning(
                f"{name} absent de {sysroot}, proxy rustup ignoré : {found}"
            )
            return None
        return found

"""Tests pour le module toolchain."""

import os
import subprocess
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from rust_format.commands import CommandExecutor, CommandResult
from rust_format.logging.base import Logger
from rust_format.toolchain import (
    PathToolLocator,
    RustupToolLocator,
    ToolLocator,
)
from rust_format.toolchain.locator import cargo_bin_dir

pytestmark = pytest.mark.skipif(
    os.name != "posix", reason="permissions d'exécution POSIX"
)


def _make_executable(path: Path) -> Path:
    """Crée un script exécutable vide."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


def _sysroot_result(stdout: bytes, return_code=0) -> CommandResult:
    return CommandResult(
        command=["rustc", "--print", "sysroot"],
        return_code=return_code,
        stdout=stdout,
        stderr=b"",
        duration=0.01,
    )


class TestPathToolLocator:
    """Tests pour PathToolLocator."""

    def test_trouve_dans_path(self, tmp_path):
        tool = _make_executable(tmp_path / "rustfmt")
        locator = PathToolLocator(path=str(tmp_path))

        assert isinstance(locator, ToolLocator)
        assert locator.find_installed_component("rustfmt") == tool

    def test_absent(self, tmp_path):
        locator = PathToolLocator(path=str(tmp_path))
        assert locator.find_installed_component("rustfmt") is None


class TestRustupToolLocator:
    """Tests pour RustupToolLocator."""

    def setup_method(self):
        self.executor = MagicMock(spec=CommandExecutor)
        self.fallback = MagicMock(spec=ToolLocator)
        self.fallback.find_installed_component.return_value = None
        self.logger = MagicMock(spec=Logger)
        self.locator = RustupToolLocator(
            executor=self.executor,
            fallback=self.fallback,
            logger=self.logger,
        )

    def test_trouve_dans_sysroot(self, tmp_path):
        tool = _make_executable(tmp_path / "bin" / "rustfmt")
        self.executor.run.return_value = _sysroot_result(
            f"{tmp_path}\n".encode()
        )

        assert self.locator.find_installed_component("rustfmt") == tool
        self.executor.run.assert_called_once_with(
            ["rustc", "--print", "sysroot"]
        )
        self.fallback.find_installed_component.assert_not_called()

    def test_composant_absent_du_sysroot(self, tmp_path, monkeypatch):
        """Sysroot valide sans le composant : repli sur le PATH."""
        monkeypatch.setenv("CARGO_HOME", str(tmp_path / "cargo"))
        (tmp_path / "bin").mkdir()
        self.executor.run.return_value = _sysroot_result(
            str(tmp_path).encode()
        )
        fallback_tool = Path("/usr/bin/rustfmt")
        self.fallback.find_installed_component.return_value = fallback_tool

        assert self.locator.find_installed_component("rustfmt") == fallback_tool
        self.fallback.find_installed_component.assert_called_once_with(
            "rustfmt"
        )

    def test_proxy_rustup_ignore(self, tmp_path, monkeypatch):
        """Un proxy de $CARGO_HOME/bin ne remplace pas le composant."""
        cargo_home = tmp_path / "cargo"
        monkeypatch.setenv("CARGO_HOME", str(cargo_home))
        proxy = _make_executable(cargo_home / "bin" / "rustfmt")
        sysroot = tmp_path / "toolchain"
        (sysroot / "bin").mkdir(parents=True)
        self.executor.run.return_value = _sysroot_result(
            str(sysroot).encode()
        )
        self.fallback.find_installed_component.return_value = proxy

        assert self.locator.find_installed_component("rustfmt") is None
        assert "proxy rustup" in self.logger.log_warning.call_args[0][0]

    def test_proxy_rustup_conserve_sans_sysroot(self, tmp_path, monkeypatch):
        """Sans rustc, le résultat du PATH est rendu tel quel."""
        cargo_home = tmp_path / "cargo"
        monkeypatch.setenv("CARGO_HOME", str(cargo_home))
        proxy = _make_executable(cargo_home / "bin" / "rustfmt")
        self.executor.run.side_effect = FileNotFoundError("rustc")
        self.fallback.find_installed_component.return_value = proxy

        assert self.locator.find_installed_component("rustfmt") == proxy

    def test_cargo_bin_dir(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CARGO_HOME", str(tmp_path))
        assert cargo_bin_dir() == tmp_path / "bin"

        monkeypatch.delenv("CARGO_HOME")
        assert cargo_bin_dir() == Path.home() / ".cargo" / "bin"

    def test_fichier_non_executable_ignore(self, tmp_path):
        tool = tmp_path / "bin" / "rustfmt"
        tool.parent.mkdir()
        tool.write_text("pas un exécutable")
        tool.chmod(0o644)
        self.executor.run.return_value = _sysroot_result(
            str(tmp_path).encode()
        )

        assert self.locator.find_installed_component("rustfmt") is None

    def test_rustc_introuvable(self):
        self.executor.run.side_effect = FileNotFoundError("rustc")

        assert self.locator.find_installed_component("rustfmt") is None
        self.logger.log_warning.assert_called_once()
        self.fallback.find_installed_component.assert_called_once()

    def test_rustc_timeout(self):
        self.executor.run.side_effect = subprocess.TimeoutExpired(
            cmd=["rustc"], timeout=30
        )
        assert self.locator.sysroot() is None
        self.logger.log_warning.assert_called_once()

    def test_rustc_echoue(self):
        self.executor.run.return_value = _sysroot_result(b"", return_code=1)

        assert self.locator.sysroot() is None
        assert "code 1" in self.logger.log_warning.call_args[0][0]

    def test_sortie_vide(self):
        self.executor.run.return_value = _sysroot_result(b"  \n")
        assert self.locator.sysroot() is None

    def test_sortie_non_utf8(self):
        self.executor.run.return_value = _sysroot_result(b"\xff\xfe")
        assert self.locator.sysroot() is None
        self.logger.log_warning.assert_called_once()

    def test_aucun_cache(self, tmp_path):
        """Chaque recherche interroge de nouveau la toolchain."""
        _make_executable(tmp_path / "bin" / "rustfmt")
        self.executor.run.return_value = _sysroot_result(
            str(tmp_path).encode()
        )

        self.locator.find_installed_component("rustfmt")
        self.locator.find_installed_component("rustfmt")

        assert self.executor.run.call_count == 2

    def test_sans_logger(self):
        locator = RustupToolLocator(
            executor=self.executor, fallback=self.fallback
        )
        self.executor.run.side_effect = OSError("boom")
        assert locator.find_installed_component("rustfmt") is None

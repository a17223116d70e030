"""Module de localisation des composants de toolchain."""

from rust_format.toolchain.base import ToolLocator
from rust_format.toolchain.locator import PathToolLocator, RustupToolLocator

__all__ = [
    "ToolLocator",
    "PathToolLocator",
    "RustupToolLocator",
]

"""Module d'invocation de l'outil de formatage."""

from rust_format.formatter.base import FormatInvoker
from rust_format.formatter.rustfmt import RustFormatter, format_file

__all__ = [
    "FormatInvoker",
    "RustFormatter",
    "format_file",
]

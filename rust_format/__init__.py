"""
rust_format - Formatage de fichiers Rust via le rustfmt de la toolchain.

Modules disponibles:
- formatter: Invocation de l'outil et classement du résultat
  (RustFormatter, format_file)
- toolchain: Localisation des composants installés (RustupToolLocator)
- commands: Exécution de processus (SubprocessCommandExecutor)
- streams: Flux de sortie capturés (TextStream)
- errors: Exceptions et handlers d'erreurs
- config: Chargement de configuration (TOML, JSON, Pydantic)
- logging: Gestion des logs (Logger, FileLogger)
"""

__version__ = "1.0.0"

from rust_format.logging import Logger, FileLogger
from rust_format.config import (
    ConfigLoader,
    FileConfigLoader,
    FormatterSettings,
    LoggingSettings,
    load_settings,
)
from rust_format.streams import TextStream
from rust_format.errors import (
    ApplicationError,
    FormatErrorKind,
    FormatError,
    ToolMissingError,
    ToolExecutionError,
    FormatIOError,
    NoResultCodeError,
    ErrorHandler,
    ErrorHandlerChain,
    exit_code_for,
    ConsoleErrorHandler,
    LoggerErrorHandler,
)
from rust_format.commands import (
    CommandResult,
    CommandExecutor,
    SubprocessCommandExecutor,
)
from rust_format.toolchain import (
    ToolLocator,
    PathToolLocator,
    RustupToolLocator,
)
from rust_format.formatter import (
    FormatInvoker,
    RustFormatter,
    format_file,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "FormatterSettings",
    "LoggingSettings",
    "load_settings",
    # Streams
    "TextStream",
    # Errors
    "ApplicationError",
    "FormatErrorKind",
    "FormatError",
    "ToolMissingError",
    "ToolExecutionError",
    "FormatIOError",
    "NoResultCodeError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "exit_code_for",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    # Commands
    "CommandResult",
    "CommandExecutor",
    "SubprocessCommandExecutor",
    # Toolchain
    "ToolLocator",
    "PathToolLocator",
    "RustupToolLocator",
    # Formatter
    "FormatInvoker",
    "RustFormatter",
    "format_file",
]

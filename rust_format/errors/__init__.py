"""Module de gestion des erreurs."""

from rust_format.errors.base import (EXIT_CODES,
                                     ErrorHandler,
                                     ErrorHandlerChain,
                                     exit_code_for)
from rust_format.errors.exceptions import (ApplicationError,
                                           FormatErrorKind,
                                           FormatError,
                                           ToolMissingError,
                                           ToolExecutionError,
                                           FormatIOError,
                                           NoResultCodeError)
from rust_format.errors.console_handler import ConsoleErrorHandler
from rust_format.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "FormatErrorKind",
    "FormatError",
    "ToolMissingError",
    "ToolExecutionError",
    "FormatIOError",
    "NoResultCodeError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
    "EXIT_CODES",
    "exit_code_for",
]

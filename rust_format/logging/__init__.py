"""Module de logging."""

from rust_format.logging.base import Logger
from rust_format.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]

"""Module de logging."""

from nickel_conf.logging.base import Logger
from nickel_conf.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]

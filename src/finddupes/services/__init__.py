"""File removal services: preview or delete the duplicate list."""

from .file_service import FileService
from .disposer import Disposer

__all__ = ["FileService", "Disposer"]

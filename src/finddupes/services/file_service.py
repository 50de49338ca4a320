"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File removal primitives: permanent delete or move to the system trash.
"""
import os
from pathlib import Path
from send2trash import send2trash


class FileService:
    """
    Removes files with readable errors.
    Missing files raise FileNotFoundError, everything else RuntimeError.
    """

    @staticmethod
    def delete_file(file_path: str):
        """Permanently removes a file."""
        path = Path(file_path)

        try:
            if not path.exists() and not path.is_symlink():
                raise FileNotFoundError(f"File not found: {path}")
            os.remove(path)
        except FileNotFoundError:
            raise
        except Exception as e:
            raise RuntimeError(f"Failed to delete: {e}") from e

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        try:
            path = Path(file_path).resolve()
            if not path.exists():
                raise FileNotFoundError(f"File not found: {path}")
            send2trash(str(path))
        except FileNotFoundError:
            raise
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e

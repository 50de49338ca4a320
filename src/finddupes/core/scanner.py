"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Walks a directory tree and feeds every regular file into a SizeBucketStore.
Features:
- Uses os.walk for fast traversal; directory symlinks are never followed,
  so every directory is visited once
- Skips symbolic links and special files (sockets, FIFOs, devices)
- Unreadable subdirectories are logged and skipped, the scan carries on
- Hashing happens inside the store, only when two files share a size
"""

import os
import stat
import time
import logging
from typing import Optional, Callable

logger = logging.getLogger(__name__)

# Local imports
from finddupes.core.models import ScanResult, SizeBucketStore
from finddupes.core.hasher import HasherImpl, XXHash128AlgorithmImpl
from finddupes.core.interfaces import FileScanner, Hasher


class FileScannerImpl(FileScanner):
    """
    Scans directories recursively and inserts each regular file by size.

    Attributes:
        root_dir: Root directory to scan
        hasher: Hasher handed to the SizeBucketStore (xxHash3-128 by default)
    """

    # Update progress every N files to reduce callback overhead
    PROGRESS_INTERVAL = 5000

    def __init__(self, root_dir: str, hasher: Optional[Hasher] = None):
        self.root_dir = root_dir
        self.hasher = hasher or HasherImpl(XXHash128AlgorithmImpl())

    def scan(self,
             progress_callback: Optional[Callable[[str, int, object], None]] = None) -> ScanResult:
        """
        Single-pass scan. Returns the populated store plus the number of regular files seen.

        Raises:
            FileNotFoundError: root does not exist
            NotADirectoryError: root is not a directory
            PermissionError: root itself cannot be listed
            OSError: a file could not be hashed
        """
        logger.debug(f"Root directory: {self.root_dir}")

        if not os.path.exists(self.root_dir):
            error_msg = f"Directory does not exist: {self.root_dir}"
            logger.error(error_msg)
            raise FileNotFoundError(error_msg)
        if not os.path.isdir(self.root_dir):
            error_msg = f"Not a directory: {self.root_dir}"
            logger.error(error_msg)
            raise NotADirectoryError(error_msg)

        result = ScanResult(store=SizeBucketStore(self.hasher))
        root = os.path.normpath(self.root_dir)
        progress_counter = 0

        def on_walk_error(err: OSError) -> None:
            if err.filename is not None and os.path.normpath(err.filename) == root:
                raise err
            logger.warning(f"Skipping unreadable directory {err.filename}: {err.strerror}")
            result.skipped_dirs.append(err.filename)

        start_time = time.time()

        for dirpath, dirs, files in os.walk(root, onerror=on_walk_error, followlinks=False):
            for filename in files:
                path = os.path.join(dirpath, filename)
                try:
                    size = self._regular_file_size(path)
                except OSError as e:
                    # listable but not searchable: names come back, lstat is denied
                    logger.warning(f"Skipping unreadable entry {path}: {e.strerror or e}")
                    if dirpath not in result.skipped_dirs:
                        result.skipped_dirs.append(dirpath)
                    continue
                if size is None:
                    continue

                result.store.insert(path, size)
                result.files_found += 1
                progress_counter += 1

                if progress_callback and progress_counter >= self.PROGRESS_INTERVAL:
                    progress_callback('scanning', result.files_found, None)
                    progress_counter = 0

        # Final update for small datasets
        if progress_callback and progress_counter > 0:
            progress_callback('scanning', result.files_found, None)

        logger.debug(f"Total scan time: {time.time() - start_time:.2f} seconds")
        logger.info(f"Files found: {result.files_found}")
        return result

    @staticmethod
    def _regular_file_size(path: str) -> Optional[int]:
        """
        Returns the size of a regular file, or None for anything else.
        Symlinks are not followed. A file that vanished is skipped here,
        any other lstat error is raised to the caller.
        """
        try:
            st = os.lstat(path)
        except FileNotFoundError:
            logger.warning(f"File vanished before it could be examined: {path}")
            return None

        if stat.S_ISLNK(st.st_mode):
            logger.debug(f"Skipping symbolic link: {path}")
            return None
        if not stat.S_ISREG(st.st_mode):
            logger.debug(f"Skipping special file: {path}")
            return None
        return st.st_size

"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Byte-for-byte comparison used by the paranoid check.
"""

import os
import logging

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024


def files_identical(first: str, second: str, chunk_size: int = CHUNK_SIZE) -> bool:
    """
    Compare two files byte by byte.
    Files of different sizes are never identical; read errors propagate.
    """
    size1 = os.stat(first).st_size
    size2 = os.stat(second).st_size
    if size1 != size2:
        logger.error(f"logic error: files_identical given files with different sizes: {first} {second}")
        return False

    with open(first, 'rb') as f1, open(second, 'rb') as f2:
        while True:
            chunk1 = f1.read(chunk_size)
            chunk2 = f2.read(chunk_size)
            if chunk1 != chunk2:
                return False
            if not chunk1:
                return True

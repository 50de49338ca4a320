"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements whole-file hashing with pluggable 128-bit hash algorithms.

Read errors are not caught here: a file that disappears or shrinks after it was
enumerated aborts the run instead of silently skewing the results.
"""

import hashlib
import os

import xxhash
from finddupes.core.models import Digest
from finddupes.core.interfaces import Hasher, HashAlgorithm


# Use the same way to implement and use any other 128-bit hashing algorithm
class XXHash128AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return xxhash.xxh3_128(data).digest()


class Md5AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def hash(data: bytes) -> bytes:
        return hashlib.md5(data).digest()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Reads the entire file into memory and digests it in one call.
    """

    def __init__(self, algorithm: HashAlgorithm = None):
        self.algorithm = algorithm or XXHash128AlgorithmImpl()

    def compute_full_hash(self, path: str) -> Digest:
        size = os.stat(path).st_size
        with open(path, 'rb') as f:
            data = f.read(size)
        if len(data) != size:
            raise OSError(f"Short read on {path}: expected {size} bytes, got {len(data)}")
        return Digest.from_bytes(self.algorithm.hash(data))

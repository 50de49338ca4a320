"""
Core duplicate-detection engine: hasher, size buckets, scanner, retention policy and resolver.

- FileScannerImpl: recursive directory traversal into a SizeBucketStore
- SizeBucketStore: size -> pending file | digest -> paths, hashing on first size collision
- HasherImpl + XXHash128AlgorithmImpl: 128-bit whole-file digests
- RetentionPolicy: ordered rules choosing which identical copy survives
- DuplicateResolverImpl: paranoid check + retention, produces the duplicate list

No filesystem mutation happens here; deletion lives in finddupes.services.
"""

from .models import (
    Digest, PendingBucket, HashedBucket, SizeBucketStore, ScanResult,
    ResolutionStats, DisposalResult, DeduplicationParams)
from .interfaces import Preference
from .hasher import HasherImpl, XXHash128AlgorithmImpl, Md5AlgorithmImpl
from .comparator import files_identical
from .scanner import FileScannerImpl
from .retention import RetentionPolicy, SubstringRule, LexicographicRule
from .resolver import DuplicateResolverImpl

__all__ = [
    "Digest",
    "PendingBucket",
    "HashedBucket",
    "SizeBucketStore",
    "ScanResult",
    "ResolutionStats",
    "DisposalResult",
    "DeduplicationParams",
    "Preference",
    "HasherImpl",
    "XXHash128AlgorithmImpl",
    "Md5AlgorithmImpl",
    "files_identical",
    "FileScannerImpl",
    "RetentionPolicy",
    "SubstringRule",
    "LexicographicRule",
    "DuplicateResolverImpl",
]

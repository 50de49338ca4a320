"""
FindDupes — byte-for-byte duplicate file finder.

Core features:
- Size buckets with lazy hashing: files with a unique size are never read
- 128-bit xxHash3 digests, optional paranoid byte-for-byte verification
- Deterministic choice of which copy to keep (configurable rule chain)
- Dry run by default; permanent delete or system trash (via send2trash) on request
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("finddupes")
except Exception:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from finddupes.commands import DeduplicationCommand
from finddupes.core import (
    DeduplicationParams, Digest, SizeBucketStore, FileScannerImpl,
    DuplicateResolverImpl, RetentionPolicy,
)
from finddupes.services import Disposer, FileService

__all__ = [
    "DeduplicationCommand",
    "DeduplicationParams",
    "Digest",
    "SizeBucketStore",
    "FileScannerImpl",
    "DuplicateResolverImpl",
    "RetentionPolicy",
    "Disposer",
    "FileService",
    "__version__",
]

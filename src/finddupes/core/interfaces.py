"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate finder.
These protocols enforce structural typing using Python's `typing.Protocol` so
components can be swapped in tests without inheritance.

Key Components:
---------------
- HashAlgorithm: Standardized interface for 128-bit hash functions (xxHash3-128, MD5).
- Hasher: Interface for computing the full-content digest of a file.
- FileScanner: Interface for walking a tree into a SizeBucketStore.
- RetentionRule: One named step of the keep/delete tie-break policy.
- DuplicateResolver: Interface for turning a populated store into a duplicate list.
"""

from enum import Enum
from typing import Protocol, List, Tuple, Optional, Callable
from finddupes.core.models import Digest, ScanResult, SizeBucketStore, ResolutionStats


class Preference(Enum):
    """Verdict of a single retention rule for a candidate/new-file pair."""
    KEEP_CANDIDATE = "keep-candidate"
    KEEP_NEW = "keep-new"
    NO_OPINION = "no-opinion"


class HashAlgorithm(Protocol):
    """
    Interface for generic 128-bit hash algorithms.
    """

    @staticmethod
    def hash(data: bytes) -> bytes:
        """Computes the 16-byte hash of the provided byte data."""
        ...


class Hasher(Protocol):
    """Interface for hashing a whole file."""
    def compute_full_hash(self, path: str) -> Digest: ...


class FileScanner(Protocol):
    def scan(
        self,
        progress_callback: Optional[Callable[[str, int, object], None]] = None
    ) -> ScanResult:
        """
        Scan the configured directory.

        Args:
            progress_callback: Optional callback for reporting progress (stage, current, total).

        Returns:
            ScanResult holding the populated SizeBucketStore.
        """
        ...


class RetentionRule(Protocol):
    """A named predicate deciding which of two identical files to keep."""
    name: str

    def __call__(self, candidate: str, new_file: str) -> Preference: ...


class DuplicateResolver(Protocol):
    def resolve(
        self,
        store: SizeBucketStore,
        paranoid: bool = False,
        report: bool = False,
        report_callback: Optional[Callable[[str, str], None]] = None
    ) -> Tuple[List[str], ResolutionStats]:
        """
        Walk every hashed bucket and pick the files to remove.

        Args:
            store: Store populated by a scanner.
            paranoid: Re-read both files and compare bytes before trusting a digest match.
            report: Emit a "dupe/of" pairing for each duplicate found.
            report_callback: Receives (duplicate, kept) instead of printing.

        Returns:
            Tuple of (duplicate paths in discovery order, statistics)
        """
        ...

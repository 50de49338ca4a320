"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for duplicate detection: digests, size buckets and the run results.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple, Union
import logging

logger = logging.getLogger(__name__)


# ======================
#  Digest
# ======================

class Digest(NamedTuple):
    """
    128-bit content fingerprint stored as two unsigned 64-bit halves.
    Only equality and ordering are meaningful.
    """
    high: int
    low: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> "Digest":
        if len(raw) != 16:
            raise ValueError(f"Digest requires 16 bytes, got {len(raw)}")
        return cls(int.from_bytes(raw[:8], "big"), int.from_bytes(raw[8:], "big"))

    def hex(self) -> str:
        return f"{self.high:016x}{self.low:016x}"

    def __repr__(self):
        return f"<Digest {self.hex()}>"


# ======================
#  Size buckets
# ======================

@dataclass(frozen=True)
class PendingBucket:
    """Exactly one file of this size has been seen; it has not been hashed."""
    path: str


@dataclass
class HashedBucket:
    """
    Two or more files of this size have been seen.
    Maps digest -> paths in first-seen order.
    """
    files: Dict[Digest, List[str]] = field(default_factory=dict)

    def add(self, digest: Digest, path: str) -> None:
        self.files.setdefault(digest, []).append(path)

    @property
    def file_count(self) -> int:
        return sum(len(paths) for paths in self.files.values())


SizeBucket = Union[PendingBucket, HashedBucket]


class SizeBucketStore:
    """
    Maps file size -> SizeBucket.

    Files are hashed lazily: the first file of a size is parked as pending,
    the second one triggers hashing of both, every later one is hashed on arrival.
    Files whose size is unique across the whole tree are never read.
    The hasher is supplied by the caller (FileScannerImpl builds the default one).
    """

    def __init__(self, hasher):
        self.hasher = hasher
        self._buckets: Dict[int, SizeBucket] = {}
        self.file_count = 0
        self.hashed_file_count = 0

    def insert(self, path: str, size: int) -> None:
        if size < 0:
            raise ValueError(f"File size cannot be negative: {size}")

        bucket = self._buckets.get(size)
        if bucket is None:
            self._buckets[size] = PendingBucket(path)
        else:
            if isinstance(bucket, PendingBucket):
                # second file of this size: promote the parked one
                promoted = HashedBucket()
                promoted.add(self._hash(bucket.path), bucket.path)
                self._buckets[size] = promoted
                bucket = promoted
            bucket.add(self._hash(path), path)

        self.file_count += 1

    def _hash(self, path: str) -> Digest:
        self.hashed_file_count += 1
        logger.debug(f"Hashing {path}")
        return self.hasher.compute_full_hash(path)

    def get(self, size: int) -> Optional[SizeBucket]:
        return self._buckets.get(size)

    def items(self) -> Iterator[Tuple[int, SizeBucket]]:
        """Yields (size, bucket) pairs in ascending size order."""
        for size in sorted(self._buckets):
            yield size, self._buckets[size]

    def __iter__(self):
        return self.items()

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, size: int) -> bool:
        return size in self._buckets

    def __repr__(self):
        return f"<SizeBucketStore buckets={len(self._buckets)}, files={self.file_count}>"


# ======================
#  Results
# ======================

@dataclass
class ScanResult:
    """Outcome of a directory scan."""
    store: SizeBucketStore
    files_found: int = 0
    skipped_dirs: List[str] = field(default_factory=list)


@dataclass
class ResolutionStats:
    """Counters collected while resolving duplicates."""
    uniquely_sized_files: int = 0
    filesize_savings: int = 0  # in bytes
    hash_collisions: int = 0
    duplicate_count: int = 0


@dataclass
class DisposalResult:
    """Outcome of deleting (or previewing) a duplicate list."""
    committed: bool
    processed: List[str] = field(default_factory=list)
    failed: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.processed)


"""
DTO for a deduplication run, filled in by the CLI.
"""

@dataclass
class DeduplicationParams:
    """Parameters for a deduplication run with validation."""
    root_dir: str
    do_delete: bool = False
    paranoid_check: bool = False
    report_dupes: bool = False
    use_trash: bool = False
    delete_markers: List[str] = field(default_factory=list)

    def __post_init__(self):
        if not self.root_dir:
            raise ValueError("Root directory cannot be empty")

        markers = []
        for marker in self.delete_markers:
            marker = marker.strip()
            if marker and marker not in markers:
                markers.append(marker)
        self.delete_markers = markers

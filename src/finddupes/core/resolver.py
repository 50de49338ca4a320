"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Turns a populated SizeBucketStore into the list of files to remove.

For every digest list with more than one file, a single "keep" candidate is
carried through the list. Each later file is optionally re-verified byte by
byte against it, then the retention policy decides which of the two loses.
For sets of three or more, the outcome depends on insertion order past the
first two members.
"""

import logging
from typing import Callable, List, Optional, Tuple

from finddupes.core.comparator import files_identical
from finddupes.core.interfaces import DuplicateResolver
from finddupes.core.models import PendingBucket, ResolutionStats, SizeBucketStore
from finddupes.core.retention import RetentionPolicy
from finddupes.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)


def print_pairing(duplicate: str, kept: str) -> None:
    print(f"dupe: {duplicate}\n  of: {kept}")


class DuplicateResolverImpl(DuplicateResolver):

    def __init__(self,
                 policy: Optional[RetentionPolicy] = None,
                 comparator: Callable[[str, str], bool] = files_identical):
        self.policy = policy or RetentionPolicy.default()
        self.comparator = comparator

    def resolve(
        self,
        store: SizeBucketStore,
        paranoid: bool = False,
        report: bool = False,
        report_callback: Optional[Callable[[str, str], None]] = None
    ) -> Tuple[List[str], ResolutionStats]:
        duplicates: List[str] = []
        stats = ResolutionStats()
        emit = report_callback or print_pairing

        for size, bucket in store.items():
            if isinstance(bucket, PendingBucket):
                stats.uniquely_sized_files += 1
                continue

            for paths in bucket.files.values():
                keep = None
                for path in paths:
                    if keep is None:
                        keep = path
                        continue

                    if paranoid and not self.comparator(keep, path):
                        logger.warning(f"Hash collision: {keep} {path}")
                        stats.hash_collisions += 1
                        continue

                    stats.filesize_savings += size
                    keep, duplicate = self.policy.choose(keep, path)
                    duplicates.append(duplicate)

                    if report:
                        emit(duplicate, keep)

        stats.duplicate_count = len(duplicates)

        logger.info(f"Files with unique sizes: {stats.uniquely_sized_files}")
        if not duplicates:
            logger.info("No duplicates found")
        else:
            logger.info(
                f"Duplicates ready to delete: {len(duplicates)} "
                f"for savings of {ConvertUtils.bytes_to_human(stats.filesize_savings)}"
            )
        return duplicates, stats

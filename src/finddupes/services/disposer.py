"""
Disposer: last stage of the pipeline, the only one that touches the filesystem.
Either previews the duplicate list or removes each entry; one failed removal
never stops the rest.
"""
import logging
from typing import Iterable, Optional, Callable

from finddupes.core.models import DisposalResult
from finddupes.services.file_service import FileService

logger = logging.getLogger(__name__)


class Disposer:

    def __init__(self,
                 file_service=FileService,
                 use_trash: bool = False,
                 output: Optional[Callable[[str], None]] = None):
        self.file_service = file_service
        self.use_trash = use_trash
        self.output = output or print

    def dispose(self, duplicates: Iterable[str], commit: bool) -> DisposalResult:
        result = DisposalResult(committed=commit)

        for path in duplicates:
            if not commit:
                self.output(f"delete preview: {path}")
                result.processed.append(path)
                continue

            self.output(f"deleting: {path}")
            try:
                if self.use_trash:
                    self.file_service.move_to_trash(path)
                else:
                    self.file_service.delete_file(path)
            except (OSError, RuntimeError) as e:
                logger.error(f"error: delete failed: {path}: {e}")
                result.failed.append((path, str(e)))
                continue

            result.processed.append(path)

        if result.failed:
            logger.warning(f"{len(result.failed)} of {len(result.failed) + result.success_count} deletions failed")
        return result

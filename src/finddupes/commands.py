"""
Unified command orchestrator for duplicate detection.
This is the SINGLE source of truth for the pipeline; the CLI only parses
arguments and prints summaries around it.
"""
from typing import List, Optional, Callable, Tuple
from finddupes.core.models import DeduplicationParams, DisposalResult, ResolutionStats, ScanResult
from finddupes.core.scanner import FileScannerImpl
from finddupes.core.resolver import DuplicateResolverImpl
from finddupes.core.retention import RetentionPolicy
from finddupes.services.disposer import Disposer
from finddupes.utils.convert_utils import ConvertUtils
from finddupes.utils.timing import LogElapsedTime


class DeduplicationCommand:
    """
    Orchestrates the whole run:
    1. Scan the tree into a SizeBucketStore (hashing only on size collisions)
    2. Resolve duplicates (optional paranoid compare + retention policy)
    3. Preview or delete the duplicates

    Usage:
        params = DeduplicationParams(root_dir="/photos", paranoid_check=True)
        command = DeduplicationCommand()
        disposal, stats = command.execute(params)
    """

    STEP_DONE_LABEL = "  step completed in "

    def __init__(self, output: Optional[Callable[[str], None]] = None):
        self.output = output or print
        self._scan_result: Optional[ScanResult] = None
        self._duplicates: List[str] = []

    def execute(
            self,
            params: DeduplicationParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None,
            report_callback: Optional[Callable[[str, str], None]] = None
    ) -> Tuple[Optional[DisposalResult], ResolutionStats]:
        """
        Run scan -> resolve -> dispose with per-stage timing.

        Args:
            params: Validated run parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None
            report_callback: (duplicate: str, kept: str) -> None, used when report_dupes is set

        Returns:
            Tuple of (disposal result or None when nothing was found, statistics)

        Raises:
            FileNotFoundError / NotADirectoryError: invalid root directory
            OSError: a file could not be read during hashing or comparison
        """
        with LogElapsedTime("Total operation time ", self.output):
            self.output("Processing files...")
            with LogElapsedTime(self.STEP_DONE_LABEL, self.output):
                scanner = FileScannerImpl(root_dir=params.root_dir)
                self._scan_result = scanner.scan(progress_callback=progress_callback)
                self.output(f"Files found: {self._scan_result.files_found}")

            self.output("Finding duplicates...")
            with LogElapsedTime(self.STEP_DONE_LABEL, self.output):
                resolver = DuplicateResolverImpl(RetentionPolicy.default(params.delete_markers))
                self._duplicates, stats = resolver.resolve(
                    self._scan_result.store,
                    paranoid=params.paranoid_check,
                    report=params.report_dupes,
                    report_callback=report_callback
                )
                self._print_resolution_summary(stats)

            disposal = None
            if self._duplicates:
                self.output("Deleting duplicates..." if params.do_delete else "Reviewing duplicates...")
                with LogElapsedTime(self.STEP_DONE_LABEL, self.output):
                    disposer = Disposer(use_trash=params.use_trash, output=self.output)
                    disposal = disposer.dispose(self._duplicates, commit=params.do_delete)

        return disposal, stats

    def _print_resolution_summary(self, stats: ResolutionStats) -> None:
        self.output(f"Files with unique sizes: {stats.uniquely_sized_files}")
        if not self._duplicates:
            self.output("No duplicates found")
        else:
            savings_mb = ConvertUtils.bytes_to_megabytes(stats.filesize_savings)
            self.output(f"Duplicates ready to delete: {len(self._duplicates)} for savings of {savings_mb} MB")

    def get_duplicates(self) -> List[str]:
        """Get the duplicate list after execution."""
        return self._duplicates.copy()  # Return copy to prevent external mutation

    def get_scan_result(self) -> Optional[ScanResult]:
        return self._scan_result

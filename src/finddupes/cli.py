#!/usr/bin/env python3
"""
FindDupes CLI — find byte-for-byte duplicate files under a directory and
optionally delete them.
Without -d nothing is touched: every duplicate is listed as a delete preview.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, NoReturn

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    from send2trash import send2trash
except ImportError:
    _MISSING_DEPS.append("send2trash")

try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from finddupes.core.models import DeduplicationParams
from finddupes.commands import DeduplicationCommand

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

# Legacy switches from the Windows tool, accepted after the directory
SLASH_FLAGS = {"/d": "-d", "/p": "-p", "/r": "-r"}

EPILOG_TEXT = """
Examples:
  List what would be deleted (dry run)
  %(prog)s ~/Pictures

  Same, printing each duplicate next to the copy that is kept
  %(prog)s ~/Pictures -r

  Verify every match byte by byte, then delete
  %(prog)s ~/Pictures -p -d

  Delete to the system trash instead of removing permanently
  %(prog)s ~/Pictures -d --trash

Which copy is kept:
  paths containing 'unfiltered' are deleted first, then paths containing
  'preferDelete' (then any --delete-marker), otherwise the file name that sorts
  first is kept (report_2017.csv over report_2019.csv).
"""


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="finddupes",
            description="FindDupes — find byte-for-byte duplicate files",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "directory",
            type=str,
            help="Directory to scan recursively"
        )

        # Actions
        parser.add_argument(
            "-d", "--delete",
            action="store_true",
            dest="do_delete",
            help="Delete identified duplicates (default: preview only)"
        )
        parser.add_argument(
            "-p", "--paranoid",
            action="store_true",
            dest="paranoid_check",
            help="Paranoid content check: compare bytes before trusting a size + 128-bit hash match"
        )
        parser.add_argument(
            "-r", "--report",
            action="store_true",
            dest="report_dupes",
            help="Print each duplicate together with the file that is kept"
        )
        parser.add_argument(
            "--trash",
            action="store_true",
            dest="use_trash",
            help="With -d, move duplicates to the system trash instead of deleting them"
        )
        parser.add_argument(
            "--delete-marker",
            action="append",
            default=[],
            metavar="TEXT",
            dest="delete_markers",
            help="Extra path substring marking copies to delete first (repeatable)"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only log errors"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Log per-file decisions and progress"
        )
        return parser

    @staticmethod
    def normalize_argv(argv: List[str]) -> List[str]:
        """Translate /d, /p, /r into their dash forms, except in the directory position."""
        normalized = []
        for index, token in enumerate(argv):
            if index > 0 and token in SLASH_FLAGS:
                normalized.append(SLASH_FLAGS[token])
            else:
                normalized.append(token)
        return normalized

    def parse_args(self, args: Optional[List[str]] = None) -> argparse.Namespace:
        """Parse command-line arguments. With no arguments at all, show help and exit 0."""
        parser = self.build_parser()
        if args is None:
            args = sys.argv[1:]
        if not args:
            parser.print_help()
            sys.exit(0)
        return parser.parse_args(self.normalize_argv(args))

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        root_path = Path(args.directory)
        if not root_path.is_dir():
            self.error_exit(f"invalid directory specified: {args.directory}")

        if args.use_trash and not args.do_delete:
            self.warning("--trash has no effect without -d")

    @staticmethod
    def create_params(args: argparse.Namespace) -> DeduplicationParams:
        """Create DeduplicationParams from CLI arguments."""
        return DeduplicationParams(
            root_dir=os.path.abspath(args.directory),
            do_delete=args.do_delete,
            paranoid_check=args.paranoid_check,
            report_dupes=args.report_dupes,
            use_trash=args.use_trash,
            delete_markers=args.delete_markers
        )

    def configure_logging(self) -> None:
        if self.verbose:
            level = logging.DEBUG
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.basicConfig(level=level, format=LOG_FORMAT)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.verbose:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files processed...")
        sys.stderr.flush()

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit code."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.configure_logging()

        self.validate_args(args)
        params = self.create_params(args)

        command = DeduplicationCommand()
        disposal, _ = command.execute(
            params,
            progress_callback=self.progress_callback if self.verbose else None
        )
        if self.verbose:
            sys.stderr.write("\n")

        if disposal is not None and disposal.failed:
            self.warning(f"Failed to delete {len(disposal.failed)} file(s)")
        return 0


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except OSError as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

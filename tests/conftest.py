"""
Shared fixtures for duplicate-finder tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List
import sys

# Add src/ to sys.path so 'finddupes' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from finddupes.core.models import Digest


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files:
    - a.txt / b.txt: identical 1-byte files ("X")
    - c.txt: same size, different content ("Y")
    - dup1_a / dup1_b / subdir/dup_in_subdir: three identical 1KB files
    - unique1 / unique2: sizes nobody else shares
    """
    files = {}

    files["a"] = temp_dir / "a.txt"
    files["b"] = temp_dir / "b.txt"
    files["c"] = temp_dir / "c.txt"
    files["a"].write_bytes(b"X")
    files["b"].write_bytes(b"X")
    files["c"].write_bytes(b"Y")

    content = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.bin"
    files["dup1_b"] = temp_dir / "dup1_b.bin"
    files["dup1_a"].write_bytes(content)
    files["dup1_b"].write_bytes(content)

    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.bin"
    files["sub_dup"].write_bytes(content)

    files["unique1"] = temp_dir / "unique1.bin"
    files["unique1"].write_bytes(b"C" * 1500)
    files["unique2"] = temp_dir / "unique2.bin"
    files["unique2"].write_bytes(b"D" * 2500)

    return files


def snapshot(root: Path) -> Dict[str, bytes]:
    """Relative path -> content for every file under root."""
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob("*")) if p.is_file()
    }


class RecordingHasher:
    """
    Hasher stand-in: digest comes from a lookup table (or the file content
    when missing) and every call is recorded.
    """

    def __init__(self, digests: Dict[str, Digest] = None):
        self.digests = digests or {}
        self.calls: List[str] = []

    def compute_full_hash(self, path: str) -> Digest:
        self.calls.append(path)
        if path in self.digests:
            return self.digests[path]
        from finddupes.core.hasher import HasherImpl
        return HasherImpl().compute_full_hash(path)


@pytest.fixture
def recording_hasher():
    return RecordingHasher()

"""
Unit tests for HasherImpl and the 128-bit algorithms.
Verifies whole-file hashing returns 128-bit digests and that read errors propagate.
"""
import hashlib
import pytest
import xxhash
from pathlib import Path
from finddupes.core.hasher import HasherImpl, XXHash128AlgorithmImpl, Md5AlgorithmImpl
from finddupes.core.models import Digest


class TestAlgorithms:

    def test_xxhash_algorithm_returns_16_bytes(self):
        result = XXHash128AlgorithmImpl.hash(b"hello")
        assert isinstance(result, bytes)
        assert len(result) == 16
        assert result == xxhash.xxh3_128(b"hello").digest()

    def test_md5_algorithm_matches_hashlib(self):
        assert Md5AlgorithmImpl.hash(b"hello") == hashlib.md5(b"hello").digest()


class TestHasherImpl:
    """Whole-file digests."""

    def test_same_content_produces_same_digest(self, tmp_path):
        content = b"test content " * 1000
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(content)
        f2.write_bytes(content)

        hasher = HasherImpl(XXHash128AlgorithmImpl())
        d1 = hasher.compute_full_hash(str(f1))
        d2 = hasher.compute_full_hash(str(f2))

        assert d1 == d2
        assert isinstance(d1, Digest)

    def test_different_content_produces_different_digests(self, tmp_path):
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(b"A" * 1024)
        f2.write_bytes(b"B" * 1024)

        hasher = HasherImpl()
        assert hasher.compute_full_hash(str(f1)) != hasher.compute_full_hash(str(f2))

    def test_digest_covers_entire_content(self, tmp_path):
        """Files that only differ in their last byte must not collide."""
        f1 = tmp_path / "one.bin"
        f2 = tmp_path / "two.bin"
        f1.write_bytes(b"Z" * 100_000 + b"1")
        f2.write_bytes(b"Z" * 100_000 + b"2")

        hasher = HasherImpl()
        assert hasher.compute_full_hash(str(f1)) != hasher.compute_full_hash(str(f2))

    def test_digest_matches_algorithm_over_whole_buffer(self, tmp_path):
        content = bytes(range(256)) * 50
        f = tmp_path / "data.bin"
        f.write_bytes(content)

        digest = HasherImpl(Md5AlgorithmImpl()).compute_full_hash(str(f))
        assert digest == Digest.from_bytes(hashlib.md5(content).digest())

    def test_empty_file_has_a_digest(self, tmp_path):
        f = tmp_path / "empty"
        f.write_bytes(b"")
        digest = HasherImpl().compute_full_hash(str(f))
        assert digest == Digest.from_bytes(xxhash.xxh3_128(b"").digest())

    def test_missing_file_raises(self, tmp_path):
        """
        A file that vanished after enumeration must abort the run,
        not quietly hash to some placeholder value.
        """
        missing = tmp_path / "deleted.txt"
        missing.write_bytes(b"content")
        missing.unlink()

        with pytest.raises(OSError):
            HasherImpl().compute_full_hash(str(missing))


class TestDigest:

    def test_from_bytes_splits_into_two_64_bit_halves(self):
        raw = bytes(range(16))
        digest = Digest.from_bytes(raw)
        assert digest.high == int.from_bytes(raw[:8], "big")
        assert digest.low == int.from_bytes(raw[8:], "big")
        assert digest.hex() == raw.hex()

    def test_from_bytes_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            Digest.from_bytes(b"short")

    def test_digests_are_ordered(self):
        assert Digest(1, 5) < Digest(2, 0)
        assert Digest(1, 5) < Digest(1, 6)
        assert Digest(3, 3) == Digest(3, 3)

"""
Integration tests for DeduplicationCommand: scan -> resolve -> dispose wiring.
"""
import pytest
from pathlib import Path
from finddupes import DeduplicationCommand, DeduplicationParams
from conftest import snapshot


def run(params):
    lines = []
    command = DeduplicationCommand(output=lines.append)
    disposal, stats = command.execute(params)
    return command, disposal, stats, lines


class TestDeduplicationCommand:

    def test_dry_run_lists_duplicates_and_changes_nothing(self, test_files, temp_dir):
        before = snapshot(temp_dir)

        command, disposal, stats, lines = run(DeduplicationParams(root_dir=str(temp_dir)))

        assert snapshot(temp_dir) == before
        duplicates = command.get_duplicates()
        assert str(test_files["b"]) in duplicates
        assert str(test_files["c"]) not in duplicates
        assert str(test_files["a"]) not in duplicates
        assert len(duplicates) == 3
        assert disposal.committed is False
        assert stats.uniquely_sized_files == 2
        assert stats.filesize_savings == 1 + 1024 * 2

    def test_commit_deletes_duplicates_only(self, test_files, temp_dir):
        command, disposal, _, _ = run(DeduplicationParams(root_dir=str(temp_dir), do_delete=True))

        assert not test_files["b"].exists()
        assert test_files["a"].exists()
        assert test_files["c"].exists()
        assert test_files["unique1"].exists()
        assert disposal.failed == []
        # exactly one of the three identical 1KB files survives
        survivors = [k for k in ("dup1_a", "dup1_b", "sub_dup") if test_files[k].exists()]
        assert len(survivors) == 1

    def test_stage_messages_and_timings(self, test_files, temp_dir):
        _, _, _, lines = run(DeduplicationParams(root_dir=str(temp_dir)))

        assert lines[0] == "Processing files..."
        assert f"Files found: {len(test_files)}" in lines
        assert "Finding duplicates..." in lines
        assert "Reviewing duplicates..." in lines
        assert "Files with unique sizes: 2" in lines
        assert "Duplicates ready to delete: 3 for savings of 0 MB" in lines
        assert sum(1 for line in lines if line.startswith("  step completed in ")) == 3
        assert lines[-1].startswith("Total operation time ")

    def test_no_duplicates_skips_disposal(self, temp_dir):
        (temp_dir / "one").write_bytes(b"1")
        (temp_dir / "two").write_bytes(b"22")

        command, disposal, stats, lines = run(DeduplicationParams(root_dir=str(temp_dir), do_delete=True))

        assert disposal is None
        assert command.get_duplicates() == []
        assert "No duplicates found" in lines
        assert "Deleting duplicates..." not in lines

    def test_report_callback_wired_through(self, test_files, temp_dir):
        pairs = []
        command = DeduplicationCommand(output=lambda line: None)
        command.execute(
            DeduplicationParams(root_dir=str(temp_dir), report_dupes=True),
            report_callback=lambda dup, kept: pairs.append((dup, kept))
        )
        assert (str(test_files["b"]), str(test_files["a"])) in pairs

    def test_delete_markers_change_the_survivor(self, temp_dir):
        keep = temp_dir / "z_original.txt"
        drop = temp_dir / "a_copy.txt"
        keep.write_bytes(b"same")
        drop.write_bytes(b"same")

        command, _, _, _ = run(DeduplicationParams(root_dir=str(temp_dir), delete_markers=["copy"]))
        assert command.get_duplicates() == [str(drop)]

    def test_scan_result_exposed(self, test_files, temp_dir):
        command, _, _, _ = run(DeduplicationParams(root_dir=str(temp_dir)))
        assert command.get_scan_result().files_found == len(test_files)

    def test_invalid_root_raises(self, temp_dir):
        with pytest.raises(FileNotFoundError):
            run(DeduplicationParams(root_dir=str(temp_dir / "missing")))


class TestDeduplicationParams:

    def test_empty_root_rejected(self):
        with pytest.raises(ValueError, match="Root directory cannot be empty"):
            DeduplicationParams(root_dir="")

    def test_markers_normalized(self):
        params = DeduplicationParams(root_dir="/x", delete_markers=[" tmp ", "", "tmp", "old"])
        assert params.delete_markers == ["tmp", "old"]

    def test_defaults_are_safe(self):
        params = DeduplicationParams(root_dir="/x")
        assert params.do_delete is False
        assert params.paranoid_check is False
        assert params.report_dupes is False
        assert params.use_trash is False

"""Tests for high score persistence."""

import logging

import pytest

from gridsnake.highscore import HighScoreStore, MemoryHighScoreStore


class TestHighScoreStore:
    def test_missing_file_reads_zero(self, tmp_path):
        assert HighScoreStore(tmp_path / "best").read() == 0

    def test_write_then_read(self, tmp_path):
        store = HighScoreStore(tmp_path / "nested" / "best")
        store.write(42)
        assert store.read() == 42
        assert HighScoreStore(tmp_path / "nested" / "best").read() == 42

    def test_no_temp_files_left(self, tmp_path):
        store = HighScoreStore(tmp_path / "best")
        store.write(3)
        store.write(4)
        assert [p.name for p in tmp_path.iterdir()] == ["best"]

    def test_corrupt_file_reads_zero(self, tmp_path, caplog):
        path = tmp_path / "best"
        path.write_text("lots\n")
        with caplog.at_level(logging.WARNING, logger="gridsnake.highscore"):
            assert HighScoreStore(path).read() == 0
        assert "corrupt" in caplog.text

    def test_negative_value_clamped(self, tmp_path):
        path = tmp_path / "best"
        path.write_text("-7")
        assert HighScoreStore(path).read() == 0

    def test_unreadable_path_raises(self, tmp_path):
        """A directory where the file should be is reported to the caller."""
        with pytest.raises(OSError):
            HighScoreStore(tmp_path).read()

    def test_unwritable_path_raises(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        store = HighScoreStore(blocker / "best")
        with pytest.raises(OSError):
            store.write(10)
        assert blocker.read_text() == "x"


class TestMemoryStore:
    def test_records_writes(self):
        store = MemoryHighScoreStore(1)
        store.write(5)
        assert store.read() == 5
        assert store.writes == [5]

"""Tests for high score persistence."""

import logging

from grid_snake.highscore import HighScoreStore, MemoryHighScoreStore


class TestHighScoreStore:
    def test_missing_file_reads_zero(self, tmp_path):
        store = HighScoreStore(tmp_path / "nope" / "highscore.txt")
        assert store.load() == 0

    def test_round_trip_creates_parent(self, tmp_path):
        path = tmp_path / "data" / "highscore.txt"
        store = HighScoreStore(path)
        store.save(37)
        assert path.read_text(encoding="utf-8") == "37"
        assert HighScoreStore(path).load() == 37

    def test_garbage_reads_zero_with_warning(self, tmp_path, caplog):
        path = tmp_path / "highscore.txt"
        path.write_text("not a number", encoding="utf-8")
        with caplog.at_level(logging.WARNING, logger="grid_snake.highscore"):
            assert HighScoreStore(path).load() == 0
        assert "Could not read high score" in caplog.text

    def test_blank_file_reads_zero(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("  \n", encoding="utf-8")
        assert HighScoreStore(path).load() == 0

    def test_unwritable_location_logs_and_continues(self, tmp_path, caplog):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        store = HighScoreStore(blocker / "highscore.txt")
        with caplog.at_level(logging.WARNING, logger="grid_snake.highscore"):
            store.save(5)
        assert "Could not save high score" in caplog.text


def test_memory_store():
    store = MemoryHighScoreStore(4)
    assert store.load() == 4
    store.save(9)
    assert store.load() == 9

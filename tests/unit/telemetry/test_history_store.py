"""Tests for the history CSV files."""

from __future__ import annotations

import pytest

from padcoach.telemetry.history import HistoryStore


def test_save_and_load(tmp_path):
    store = HistoryStore(tmp_path / "data")
    assert store.save_match(250.0, 41.5)
    assert store.save_match(100.0, 12.25)
    assert store.history_path.read_text().splitlines()[0] == "0,250.0,41.5"
    assert store.load() == [41.5, 12.25]


def test_load_missing_is_empty(tmp_path):
    assert HistoryStore(tmp_path).load() == []


def test_load_skips_bad_rows(tmp_path):
    store = HistoryStore(tmp_path)
    store.history_path.write_text("0,1,2\nbroken\n0,1,abc\n0,5,6\n")
    assert store.load() == [2.0, 6.0]


def test_export_import_round_trip(tmp_path):
    store = HistoryStore(tmp_path / "out")
    values = [0.1, 2.0 / 3.0, 1e-7, 12345.678, 0.0]
    assert store.export_history(values)
    assert store.import_history() == pytest.approx(values)


def test_import_skips_malformed_lines(tmp_path):
    store = HistoryStore(tmp_path)
    store.export_path.write_text("1.5\n\nnope\n2.5\n")
    assert store.import_history() == [1.5, 2.5]


def test_import_missing_is_empty(tmp_path):
    assert HistoryStore(tmp_path / "nowhere").import_history() == []


def test_write_failure_returns_false(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    store = HistoryStore(blocker / "data")
    assert not store.save_match(1.0, 2.0)
    assert not store.export_history([1.0])

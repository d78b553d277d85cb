"""Tests for the training drill library."""

from __future__ import annotations

import json

from padcoach.drills import DrillLibrary, DrillSnapshot


def make_drill(name: str = "kickoff") -> DrillSnapshot:
    return DrillSnapshot(
        name=name,
        car_location=(0.0, -4608.0, 17.0),
        car_rotation=(0.0, 90.0, 0.0),
        ball_location=(0.0, 0.0, 93.0),
        ball_velocity=(0.0, 0.0, 0.0),
    )


def test_save_and_reload(tmp_path):
    path = tmp_path / "drills.json"
    lib = DrillLibrary(path)
    assert lib.save(make_drill())
    assert lib.save(make_drill("aerial"))

    reloaded = DrillLibrary(path)
    assert reloaded.names() == ["aerial", "kickoff"]
    assert reloaded.get("kickoff") == make_drill()


def test_overwrite_same_name(tmp_path):
    lib = DrillLibrary(tmp_path / "drills.json")
    lib.save(make_drill())
    moved = DrillSnapshot("kickoff", (1.0, 2.0, 3.0), (0.0, 0.0, 0.0), (0.0, 0.0, 93.0), (0.0, 0.0, 0.0))
    lib.save(moved)
    assert lib.names() == ["kickoff"]
    assert lib.get("kickoff").car_location == (1.0, 2.0, 3.0)


def test_delete(tmp_path):
    path = tmp_path / "drills.json"
    lib = DrillLibrary(path)
    lib.save(make_drill())
    assert lib.delete("kickoff")
    assert not lib.delete("kickoff")
    assert DrillLibrary(path).names() == []


def test_missing_drill(tmp_path):
    assert DrillLibrary(tmp_path / "drills.json").get("nope") is None


def test_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "drills.json"
    path.write_text("{not json")
    assert DrillLibrary(path).names() == []


def test_malformed_entry_skipped(tmp_path):
    path = tmp_path / "drills.json"
    good = make_drill().to_dict()
    path.write_text(json.dumps({"good": good, "bad": {"car_location": [1, 2]}}))
    assert DrillLibrary(path).names() == ["good"]


def test_file_format(tmp_path):
    path = tmp_path / "drills.json"
    DrillLibrary(path).save(make_drill())
    raw = json.loads(path.read_text())
    assert raw["kickoff"]["ball_location"] == [0.0, 0.0, 93.0]


def test_delete_reports_write_failure(tmp_path):
    lib = DrillLibrary(tmp_path / "drills.json")
    lib.save(make_drill())
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    lib.path = blocker / "drills.json"
    assert not lib.delete("kickoff")

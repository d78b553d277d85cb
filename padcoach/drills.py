"""Saved car/ball setups for repeatable practice."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class DrillSnapshot:
    """Car and ball state captured from the host."""

    name: str
    car_location: Vec3
    car_rotation: Vec3  # pitch, yaw, roll
    ball_location: Vec3
    ball_velocity: Vec3

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for JSON storage."""
        return {
            "car_location": list(self.car_location),
            "car_rotation": list(self.car_rotation),
            "ball_location": list(self.ball_location),
            "ball_velocity": list(self.ball_velocity),
        }

    @classmethod
    def from_dict(cls, name: str, d: dict[str, Any]) -> DrillSnapshot:
        """Deserialize from dict."""

        def vec(key: str) -> Vec3:
            x, y, z = (float(v) for v in d[key])
            return (x, y, z)

        return cls(
            name=name,
            car_location=vec("car_location"),
            car_rotation=vec("car_rotation"),
            ball_location=vec("ball_location"),
            ball_velocity=vec("ball_velocity"),
        )


class DrillLibrary:
    """Named drills kept in a single JSON file.

    The file is rewritten after every change. A missing or unreadable file
    starts an empty library.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self.drills: dict[str, DrillSnapshot] = {}
        self.load()

    def load(self) -> None:
        self.drills = {}
        if not self.path.exists():
            return
        try:
            with open(self.path) as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Failed to read drills from {self.path}: {e}")
            return
        if not isinstance(raw, dict):
            logger.warning(f"Ignoring {self.path}: expected an object of drills")
            return
        for name, entry in raw.items():
            try:
                self.drills[name] = DrillSnapshot.from_dict(name, entry)
            except (KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed drill {name!r}: {e}")

    def _save(self) -> bool:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump({name: d.to_dict() for name, d in self.drills.items()}, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write drills to {self.path}: {e}")
            return False
        return True

    def save(self, drill: DrillSnapshot) -> bool:
        self.drills[drill.name] = drill
        ok = self._save()
        if ok:
            logger.info(f"Saved drill: {drill.name}")
        return ok

    def get(self, name: str) -> DrillSnapshot | None:
        drill = self.drills.get(name)
        if drill is None:
            logger.info(f"Drill not found: {name}")
        return drill

    def delete(self, name: str) -> bool:
        if self.drills.pop(name, None) is None:
            logger.info(f"Drill not found: {name}")
            return False
        ok = self._save()
        if ok:
            logger.info(f"Deleted drill: {name}")
        return ok

    def names(self) -> list[str]:
        return sorted(self.drills)

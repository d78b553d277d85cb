"""Spatial data accumulation for heatmap export."""

from __future__ import annotations

import io
import logging
import time
from dataclasses import dataclass
from pathlib import Path

import numpy as np

from ..config import FieldBounds
from ..constants import (
    CONSUMPTION_LOG_CAP,
    CONSUMPTION_LOG_EVICT,
    DEFAULT_GRID_SIZE,
    PRESENCE_LOG_CAP,
    PRESENCE_LOG_EVICT,
)

logger = logging.getLogger(__name__)

Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class Sample:
    pos: Vec3
    intensity: float
    timestamp: float


class SpatialAggregator:
    """Accumulates 2D spatial events on a fixed grid over the playable field.

    Tracks two independent densities: where the player spends time
    (presence) and where boost is burned (consumption). Each record call also
    appends to a sample log; the logs are capped and trimmed oldest-first in
    one batch once they pass their ceiling. The grids are the running total
    and are never trimmed.

    Attributes:
        grid_size: Number of cells along each axis.
        bounds: Playable rectangle the grid covers.
        presence: 2D array (indexed [gy, gx]) of summed presence intensity.
        consumption: 2D array (indexed [gy, gx]) of summed boost consumed.
        presence_log: Presence samples, oldest first.
        consumption_log: Consumption samples, oldest first.
    """

    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE, bounds: FieldBounds | None = None) -> None:
        """Initialize aggregator with given grid resolution.

        Args:
            grid_size: Number of cells in each dimension.
            bounds: Field extents; defaults to the standard arena.
        """
        if grid_size <= 0:
            raise ValueError(f"grid_size must be positive, got {grid_size}")
        self.grid_size = grid_size
        self.bounds = bounds or FieldBounds()
        self.presence = np.zeros((grid_size, grid_size), dtype=np.float64)
        self.consumption = np.zeros((grid_size, grid_size), dtype=np.float64)
        self.presence_log: list[Sample] = []
        self.consumption_log: list[Sample] = []

    def to_grid(self, x: float, y: float) -> tuple[int, int] | None:
        """Convert world coordinates to grid indices.

        Args:
            x: World x-coordinate.
            y: World y-coordinate.

        Returns:
            (gx, gy) grid indices, or None when the point lies outside the grid.
        """
        b = self.bounds
        fx = (x - b.min_x) / b.width * self.grid_size
        fy = (y - b.min_y) / b.height * self.grid_size
        # Reject before truncating so that -0.5 does not land in cell 0.
        if not (0.0 <= fx < self.grid_size and 0.0 <= fy < self.grid_size):
            return None
        return int(fx), int(fy)

    def record_presence(self, pos: Vec3, intensity: float = 1.0, timestamp: float | None = None) -> None:
        """Record a player position sample.

        Args:
            pos: World position.
            intensity: Weight added to the cell.
            timestamp: Sample time; defaults to the monotonic clock.
        """
        self._record(self.presence, self.presence_log, pos, intensity, timestamp)
        if len(self.presence_log) > PRESENCE_LOG_CAP:
            del self.presence_log[:PRESENCE_LOG_EVICT]

    def record_consumption(self, pos: Vec3, amount: float, timestamp: float | None = None) -> None:
        """Record boost consumed at a position.

        Args:
            pos: World position.
            amount: Boost consumed.
            timestamp: Sample time; defaults to the monotonic clock.
        """
        self._record(self.consumption, self.consumption_log, pos, amount, timestamp)
        if len(self.consumption_log) > CONSUMPTION_LOG_CAP:
            del self.consumption_log[:CONSUMPTION_LOG_EVICT]

    def _record(
        self,
        grid: np.ndarray,
        log: list[Sample],
        pos: Vec3,
        value: float,
        timestamp: float | None,
    ) -> None:
        ts = time.monotonic() if timestamp is None else timestamp
        log.append(Sample((float(pos[0]), float(pos[1]), float(pos[2])), float(value), ts))
        cell = self.to_grid(pos[0], pos[1])
        if cell is not None:
            gx, gy = cell
            grid[gy, gx] += value

    def clear(self) -> None:
        """Clear all accumulated data."""
        self.presence.fill(0.0)
        self.consumption.fill(0.0)
        self.presence_log.clear()
        self.consumption_log.clear()
        logger.info("Cleared all heatmap data")

    def summary(self) -> dict[str, int]:
        return {
            "presence_samples": len(self.presence_log),
            "consumption_samples": len(self.consumption_log),
        }

    def to_csv(self) -> str:
        """Both grids as comma-separated tables, separated by a blank line.

        One line per grid row (Y), one value per column (X).
        """
        buf = io.StringIO()
        np.savetxt(buf, self.presence, delimiter=",", fmt="%.17g")
        buf.write("\n")
        np.savetxt(buf, self.consumption, delimiter=",", fmt="%.17g")
        return buf.getvalue()

    def export_csv(self, path: Path) -> Path | None:
        """Write both grids to ``path``.

        Returns:
            The written path, or None if the file could not be written.
        """
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.to_csv())
        except OSError as e:
            logger.error(f"Failed to export heatmap to {path}: {e}")
            return None
        logger.info(f"Exported heatmap to {path}")
        return path

    @staticmethod
    def load_csv(path: Path) -> tuple[np.ndarray, np.ndarray] | None:
        """Read the (presence, consumption) grids written by export_csv.

        Returns:
            The two grids, or None if the file is missing or malformed.
        """
        path = Path(path)
        try:
            text = path.read_text()
        except OSError as e:
            logger.error(f"Failed to read heatmap {path}: {e}")
            return None

        blocks = [b for b in text.split("\n\n") if b.strip()]
        if len(blocks) != 2:
            logger.warning(f"Heatmap {path} has {len(blocks)} tables, expected 2")
            return None
        try:
            grids = tuple(np.loadtxt(io.StringIO(b), delimiter=",", ndmin=2) for b in blocks)
        except ValueError as e:
            logger.warning(f"Heatmap {path} is malformed: {e}")
            return None
        if grids[0].shape != grids[1].shape:
            logger.warning(f"Heatmap {path} tables differ in shape: {grids[0].shape} vs {grids[1].shape}")
            return None
        return grids[0], grids[1]

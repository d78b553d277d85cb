from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_GRID_SIZE, FIELD_HALF_LENGTH, FIELD_HALF_WIDTH

Color = tuple[float, float, float, float]


@dataclass(frozen=True)
class FieldBounds:
    min_x: float = -FIELD_HALF_WIDTH
    max_x: float = FIELD_HALF_WIDTH
    min_y: float = -FIELD_HALF_LENGTH
    max_y: float = FIELD_HALF_LENGTH

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass(frozen=True)
class CoachConfig:
    # Coaching thresholds
    low_boost_threshold: float = 20.0  # percent below which boost counts as low
    low_boost_time: float = 3.0  # seconds low before warning
    max_boost_time: float = 5.0  # seconds full before warning
    high_efficiency_threshold: float = 60.0  # boost used per 100s of session

    # Routing
    use_astar: bool = False

    # Heatmap
    grid_size: int = DEFAULT_GRID_SIZE
    bounds: FieldBounds = FieldBounds()

    # Overlay
    overlay_color: Color = (1.0, 1.0, 0.0, 1.0)  # yellow
    overlay_thickness: float = 1.0


# Names accepted by the config command, mapped to CoachConfig fields and
# their allowed range.
CONFIG_OPTIONS: dict[str, tuple[str, float, float]] = {
    "lowthreshold": ("low_boost_threshold", 0.0, 100.0),
    "lowtime": ("low_boost_time", 0.1, 30.0),
    "maxtime": ("max_boost_time", 0.1, 30.0),
    "efficiency": ("high_efficiency_threshold", 0.0, 1000.0),
    "overlaysize": ("overlay_thickness", 0.5, 3.0),
}

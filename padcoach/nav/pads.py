"""Static boost pad layouts, keyed by map name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..constants import MAJOR_PAD_YIELD, MINOR_PAD_YIELD, PAD_HEIGHT

Vec3 = tuple[float, float, float]


class PadType(Enum):
    MAJOR = "major"
    MINOR = "minor"

    @property
    def yield_amount(self) -> float:
        return MAJOR_PAD_YIELD if self is PadType.MAJOR else MINOR_PAD_YIELD


@dataclass(frozen=True)
class PadNode:
    index: int
    pos: Vec3
    pad_type: PadType

    @property
    def amount(self) -> float:
        return self.pad_type.yield_amount


# (x, y, type) in world units; z is always PAD_HEIGHT.
_STANDARD_LAYOUT: tuple[tuple[float, float, PadType], ...] = (
    (-3584.0, 0.0, PadType.MAJOR),
    (3584.0, 0.0, PadType.MAJOR),
    (0.0, 5120.0, PadType.MAJOR),
    (0.0, -5120.0, PadType.MAJOR),
    (-2048.0, 2560.0, PadType.MAJOR),
    (2048.0, 2560.0, PadType.MAJOR),
    (-2048.0, -2560.0, PadType.MAJOR),
    (2048.0, -2560.0, PadType.MAJOR),
    (-2816.0, 2816.0, PadType.MINOR),
    (0.0, 2816.0, PadType.MINOR),
    (2816.0, 2816.0, PadType.MINOR),
    (-2816.0, 0.0, PadType.MINOR),
    (2816.0, 0.0, PadType.MINOR),
    (-2816.0, -2816.0, PadType.MINOR),
    (0.0, -2816.0, PadType.MINOR),
    (2816.0, -2816.0, PadType.MINOR),
)

_HOOPS_LAYOUT: tuple[tuple[float, float, PadType], ...] = (
    (-2048.0, 0.0, PadType.MAJOR),
    (2048.0, 0.0, PadType.MAJOR),
    (0.0, 2560.0, PadType.MAJOR),
    (0.0, -2560.0, PadType.MAJOR),
    (-1024.0, 1280.0, PadType.MINOR),
    (1024.0, 1280.0, PadType.MINOR),
    (-1024.0, -1280.0, PadType.MINOR),
    (1024.0, -1280.0, PadType.MINOR),
)

STANDARD_MAPS = frozenset(
    {
        "stadium_p",
        "stadium_p_day",
        "stadium_p_stormy",
        "stadium_p_night",
        "championsfield_p",
        "championsfield_p_night",
        "eurostadium_p",
        "eurostadium_p_night",
        "eurostadium_p_snowy",
        "trainstation_p",
        "trainstation_p_night",
        "trainstation_p_dawn",
        "utopiastadium_p",
        "utopiastadium_p_dusk",
        "utopiastadium_p_snowy",
        "beach_p",
        "beach_p_night",
        "beach_p_sunset",
        "neotokyo_standard_p",
        "neotokyo_standard_p_night",
        "haunted_trainstation_p",
        "chn_stadium_p",
        "chn_stadium_p_dusk",
        "arc_p",
        "arc_p_day",
        "wasteland_p",
        "wasteland_p_night",
        "farm_p",
        "farm_p_night",
        "farm_p_snowy",
        "aquadome_p",
        "deadeyecanyon_p",
        "deadeyecanyon_p_night",
        "sovereignheights_p",
        "estadiovida_p",
        "tokyounderpass_p",
        "pillars_p",
        "cosmic_p",
        "doublegoal_p",
        "octagon_p",
        "underpass_p",
        "utopiaretro_p",
        "rally_p",
        "rallynight_p",
        "rallyday_p",
        "rallysnowy_p",
    }
)
HOOPS_MAPS = frozenset({"hoopsstadium_p", "dunkhouse_p"})
DROPSHOT_MAPS = frozenset({"dropshot_p", "dropshot_doublegoal_p"})
# Snow day arenas share the standard layout.
SNOWDAY_MAPS = frozenset({"throwbackstadium_p", "snowystadium_p"})


def _materialize(layout: tuple[tuple[float, float, PadType], ...]) -> tuple[PadNode, ...]:
    return tuple(PadNode(i, (x, y, PAD_HEIGHT), t) for i, (x, y, t) in enumerate(layout))


STANDARD_PADS = _materialize(_STANDARD_LAYOUT)
HOOPS_PADS = _materialize(_HOOPS_LAYOUT)

_MAP_LAYOUTS: dict[str, tuple[PadNode, ...]] = {
    **{name: STANDARD_PADS for name in STANDARD_MAPS | SNOWDAY_MAPS},
    **{name: HOOPS_PADS for name in HOOPS_MAPS},
    **{name: () for name in DROPSHOT_MAPS},
}


def pads_for_map(map_id: str) -> tuple[PadNode, ...]:
    """Return the pad layout for a map name (case-insensitive).

    Unknown maps and pad-less modes return an empty tuple.
    """
    return _MAP_LAYOUTS.get(map_id.lower(), ())

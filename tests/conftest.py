import pytest

from padcoach.coach import BoostCoach
from padcoach.nav.graph import NavGraph
from padcoach.nav.pads import PadNode, PadType


@pytest.fixture
def square_pads() -> list[PadNode]:
    """Four pads on the corners of a 100x100 square, counter-clockwise from the origin."""
    corners = [(0.0, 0.0, 0.0), (100.0, 0.0, 0.0), (100.0, 100.0, 0.0), (0.0, 100.0, 0.0)]
    return [PadNode(i, pos, PadType.MAJOR if i % 2 == 0 else PadType.MINOR) for i, pos in enumerate(corners)]


@pytest.fixture
def square_ring(square_pads) -> NavGraph:
    """Square with edges only along its sides."""
    return NavGraph.from_edges(square_pads, [(0, 1), (1, 2), (2, 3), (3, 0)])


@pytest.fixture
def coach(tmp_path) -> BoostCoach:
    return BoostCoach(data_dir=tmp_path / "data")

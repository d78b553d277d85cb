from .coach import BoostCoach
from .config import CoachConfig, FieldBounds

__all__ = ["BoostCoach", "CoachConfig", "FieldBounds"]

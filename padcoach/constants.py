from __future__ import annotations

# ==============================================================================
# Boost Pads
# ==============================================================================

# Boost granted by each pad category (percent of a full tank).
MAJOR_PAD_YIELD = 100.0
MINOR_PAD_YIELD = 12.0

# Full tank. Boost is reported by the host on a 0-100 scale.
MAX_BOOST = 100.0

# Pads sit slightly above the pitch surface.
PAD_HEIGHT = 70.0

# ==============================================================================
# Field Geometry
# ==============================================================================

# Standard arena extents in world units (Unreal units).
FIELD_HALF_WIDTH = 4096.0  # X
FIELD_HALF_LENGTH = 5120.0  # Y

DEFAULT_GRID_SIZE = 50

# ==============================================================================
# Capacities
# ==============================================================================

# Sample logs are trimmed in one batch once they pass their ceiling.
PRESENCE_LOG_CAP = 50_000
PRESENCE_LOG_EVICT = 10_000  # 20%
CONSUMPTION_LOG_CAP = 20_000
CONSUMPTION_LOG_EVICT = 5_000  # 25%

TIMING_SERIES_CAP = 1000

EFFICIENCY_LOG_CAP = 10_000
EFFICIENCY_LOG_EVICT = 2_000  # 20%
# Per-match averages kept in memory; older matches stay on disk only.
HISTORY_LOG_CAP = 1_000

MAX_NOTIFICATIONS = 5
NOTIFICATION_LIFETIME_S = 3.0

# ==============================================================================
# Caching
# ==============================================================================

EFFICIENCY_TTL_S = 1.0

# High-usage coaching only kicks in once the session has run this long.
MIN_EFFICIENCY_WINDOW_S = 10.0

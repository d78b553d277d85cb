"""Session orchestrator.

BoostCoach owns one instance of every engine and wires them together: the
host calls tick() once per frame and the command methods on demand. The
engines never reference each other; all data moves through this class.
"""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from .coaching.notifications import Notification, NotificationKind, NotificationScheduler
from .coaching.triggers import EdgeTrigger
from .config import CONFIG_OPTIONS, CoachConfig
from .constants import MIN_EFFICIENCY_WINDOW_S
from .drills import DrillLibrary, DrillSnapshot
from .nav.cache import NavGraphCache
from .nav.graph import NavGraph
from .nav.pads import PadType, Vec3
from .nav.planner import Planner
from .perf.profiler import PerformanceProfiler
from .render import Primitive, Projector, Vec2, notification_panel, pad_markers, route_overlay
from .telemetry.efficiency import EfficiencyCache
from .telemetry.history import HistoryStore
from .telemetry.session import KinematicSample, SessionMetrics, SessionTracker
from .telemetry.spatial import SpatialAggregator

logger = logging.getLogger(__name__)

DRILLS_FILE = "training_drills.json"
HEATMAP_DIR = "heatmaps"

LOW_BOOST_NOTIFICATION = Notification(
    NotificationKind.LOW_RESOURCE,
    "Low boost! Grab a pad on your way back.",
    color=(1.0, 0.3, 0.3, 1.0),
)
FULL_BOOST_NOTIFICATION = Notification(
    NotificationKind.POSITIONING_HINT,
    "Full tank and not using it. Push up or take a shot.",
    color=(0.3, 0.6, 1.0, 1.0),
)
HIGH_USAGE_NOTIFICATION = Notification(
    NotificationKind.HIGH_EFFICIENCY,
    "Heavy boost burn. Chain small pads to keep your tank up.",
    color=(1.0, 0.8, 0.2, 1.0),
)


class BoostCoach:
    """Boost routing and coaching for one player session.

    Args:
        config: Thresholds and display options.
        data_dir: Where history, heatmaps and drills are written.
        load_history: Read saved match history on construction.
    """

    def __init__(self, config: CoachConfig | None = None, data_dir: Path = Path("data"), load_history: bool = True):
        self.config = config or CoachConfig()
        self.data_dir = Path(data_dir)

        self.graphs = NavGraphCache()
        self.aggregator = SpatialAggregator(self.config.grid_size, self.config.bounds)
        self.efficiency = EfficiencyCache()
        self.tracker = SessionTracker(
            low_boost_threshold=self.config.low_boost_threshold,
            low_boost_time=self.config.low_boost_time,
            max_boost_time=self.config.max_boost_time,
        )
        self.notifications = NotificationScheduler()
        self.profiler = PerformanceProfiler()
        self.history = HistoryStore(self.data_dir)
        self.drills = DrillLibrary(self.data_dir / DRILLS_FILE)

        self.map_id: str | None = None
        self.last_path: list[int] = []
        self.last_efficiency = 0.0
        self.show_pads = True
        self.pad_filter: PadType | None = None

        self.notifications.register_trigger(EdgeTrigger(self._low_boost_too_long), LOW_BOOST_NOTIFICATION)
        self.notifications.register_trigger(EdgeTrigger(self._full_boost_too_long), FULL_BOOST_NOTIFICATION)
        self.notifications.register_trigger(EdgeTrigger(self._burning_fast), HIGH_USAGE_NOTIFICATION)

        if load_history and self.history.history_path.exists():
            self.metrics.add_history(self.history.load())

    @property
    def metrics(self) -> SessionMetrics:
        return self.tracker.metrics

    # --- Triggers ---

    def _low_boost_too_long(self) -> bool:
        return self.metrics.low_boost_streak >= self.config.low_boost_time

    def _full_boost_too_long(self) -> bool:
        return self.metrics.max_boost_streak >= self.config.max_boost_time

    def _burning_fast(self) -> bool:
        return (
            self.metrics.total_time >= MIN_EFFICIENCY_WINDOW_S
            and self.last_efficiency >= self.config.high_efficiency_threshold
        )

    # --- Per-frame ---

    def tick(self, sample: KinematicSample, dt: float) -> float:
        """Fold one frame of player state into the session.

        Args:
            sample: Player state; ``sample.timestamp`` is the session clock.
            dt: Seconds since the previous frame.

        Returns:
            Current boost efficiency (boost used per 100 seconds).
        """
        with self.profiler.timer("tick"):
            delta = self.tracker.ingest(sample, dt)
            self.aggregator.record_presence(sample.pos, 1.0, sample.timestamp)
            if delta.consumed > 0:
                self.aggregator.record_consumption(sample.pos, delta.consumed, sample.timestamp)

            m = self.metrics
            previous = self.efficiency.computed_at
            self.last_efficiency = self.efficiency.get(m.total_boost_used, m.total_time, sample.timestamp)
            if self.efficiency.computed_at != previous:
                m.record_efficiency(self.last_efficiency)

            self.notifications.update(dt)
        return self.last_efficiency

    def record_ball_touch(self) -> None:
        self.tracker.record_ball_touch()

    def record_demolition(self) -> None:
        self.tracker.record_demolition()

    def render_frame(self, project: Projector, screen_size: Vec2) -> list[Primitive]:
        """Primitives for the route overlay, pad markers and notifications."""
        prims: list[Primitive] = []
        graph = self.current_graph()
        if graph is not None:
            if self.show_pads:
                prims.extend(pad_markers(graph, project, self.pad_filter))
            if self.last_path:
                prims.extend(
                    route_overlay(
                        graph,
                        self.last_path,
                        project,
                        self.config.overlay_color,
                        self.config.overlay_thickness,
                    )
                )
        prims.extend(notification_panel(self.notifications.active, screen_size))
        return prims

    # --- Routing ---

    def set_map(self, map_id: str) -> NavGraph:
        if map_id != self.map_id:
            self.last_path = []
        self.map_id = map_id
        return self.graphs.get(map_id)

    def current_graph(self) -> NavGraph | None:
        if self.map_id is None:
            return None
        return self.graphs.get(self.map_id)

    def request_route(
        self,
        map_id: str,
        player_pos: Vec3,
        ball_pos: Vec3,
        use_heuristic: bool | None = None,
    ) -> list[int]:
        """Route from the pad nearest the player to the pad nearest the ball.

        Returns:
            Pad indices, start first. Empty when the map has no pads.
        """
        if use_heuristic is None:
            use_heuristic = self.config.use_astar
        with self.profiler.timer("request_route"):
            graph = self.set_map(map_id)
            if graph.empty:
                logger.info(f"No boost pads found for map {map_id!r}")
                self.last_path = []
                return []

            start = graph.nearest(player_pos)
            goal = graph.nearest(ball_pos)
            path, stats = Planner(graph).find_path(start, goal, use_heuristic=use_heuristic)
            self.last_path = path

        if not path:
            logger.info("No path found between car and ball")
            return []
        hops = " -> ".join(f"({graph.nodes[i].amount:g})" for i in path)
        logger.info(f"Pad path: {hops} (cost {stats.cost:.0f}, visited {stats.visited_count})")
        return path

    def toggle_pad_display(self) -> bool:
        self.show_pads = not self.show_pads
        return self.show_pads

    def set_pad_filter(self, pad_filter: PadType | None) -> None:
        self.pad_filter = pad_filter

    # --- Session ---

    def reset_session(self) -> None:
        self.tracker.reset()
        self.efficiency.invalidate()
        self.notifications.clear()
        self.last_path = []
        self.last_efficiency = 0.0
        logger.info("Stats have been reset")

    def save_match(self) -> bool:
        m = self.metrics
        avg = m.avg_boost_per_minute
        ok = self.history.save_match(m.total_boost_used, avg)
        if ok:
            m.add_history([avg])
        return ok

    def export_history(self) -> bool:
        return self.history.export_history(self.metrics.history_log)

    def import_history(self) -> int:
        """Append the exported history to the in-memory log. Returns the count loaded."""
        values = self.history.import_history()
        self.metrics.add_history(values)
        return len(values)

    # --- Heatmap ---

    def export_heatmap(self, name: str) -> Path | None:
        if not name or Path(name).name != name or name in (".", ".."):
            logger.warning(f"Refusing heatmap name {name!r}")
            return None
        with self.profiler.timer("export_heatmap"):
            return self.aggregator.export_csv(self.data_dir / HEATMAP_DIR / f"{name}.csv")

    def clear_heatmap(self) -> None:
        self.aggregator.clear()

    # --- Reports ---

    def generate_report(self) -> list[str]:
        m = self.metrics
        counts = self.aggregator.summary()
        lines = [
            f"Session time: {m.total_time:.1f}s",
            f"Total boost used: {m.total_boost_used:.1f}",
            f"Avg boost/min: {m.avg_boost_per_minute:.1f}",
            f"Efficiency: {self.last_efficiency:.1f}",
            f"Big pads: {m.big_pads}  Small pads: {m.small_pads}",
            f"Distance: {m.distance:.0f}  Avg speed: {m.avg_speed:.0f}",
            f"Ball touches: {m.ball_touches}  Demolitions: {m.demolitions}",
            f"Time at low boost: {m.time_at_low_boost:.1f}s  at full: {m.time_at_max_boost:.1f}s"
            f"  empty: {m.time_with_no_boost:.1f}s",
            f"Behavior: {m.behavior}",
            f"Position heatmap: {counts['presence_samples']} data points",
            f"Boost usage heatmap: {counts['consumption_samples']} data points",
        ]
        for line in lines:
            logger.info(line)
        return lines

    def show_performance_report(self) -> list[str]:
        return self.profiler.report()

    # --- Config ---

    def set_option(self, name: str, value: str | float) -> bool:
        """Apply a config command. Returns False for unknown or invalid input."""
        if name == "pathalgo":
            algo = str(value).lower()
            if algo not in ("dijkstra", "astar"):
                logger.warning(f"Unknown path algorithm: {value}")
                return False
            self.config = dataclasses.replace(self.config, use_astar=algo == "astar")
            logger.info(f"Set pathalgo to {algo}")
            return True

        option = CONFIG_OPTIONS.get(name)
        if option is None:
            logger.warning(f"Unknown config option: {name}")
            return False
        field_name, lo, hi = option
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.warning(f"Config option {name} needs a number, got {value!r}")
            return False
        if not lo <= number <= hi:
            logger.warning(f"Config option {name}={number} outside [{lo}, {hi}]")
            return False

        self.config = dataclasses.replace(self.config, **{field_name: number})
        self.tracker.low_boost_threshold = self.config.low_boost_threshold
        self.tracker.low_boost_time = self.config.low_boost_time
        self.tracker.max_boost_time = self.config.max_boost_time
        logger.info(f"Set {name} to {number:g}")
        return True

    def describe_config(self) -> list[str]:
        lines = [f"{name} = {getattr(self.config, field):g}" for name, (field, _, _) in CONFIG_OPTIONS.items()]
        lines.append(f"pathalgo = {'astar' if self.config.use_astar else 'dijkstra'}")
        return lines

    # --- Drills ---

    def save_drill(self, drill: DrillSnapshot) -> bool:
        return self.drills.save(drill)

    def load_drill(self, name: str) -> DrillSnapshot | None:
        """Look up a drill for the host to apply to the car and ball."""
        return self.drills.get(name)

    def delete_drill(self, name: str) -> bool:
        return self.drills.delete(name)

    def list_drills(self) -> list[str]:
        return self.drills.names()

"""Cross-session boost history, stored as plain CSV files."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

HISTORY_FILE = "boost_history.csv"
EXPORT_FILE = "boost_history_export.csv"


class HistoryStore:
    """File-based storage for per-match boost summaries.

    ``boost_history.csv`` gets one ``0,<total used>,<avg per minute>`` row
    appended per match. The history export is a single column of numbers
    meant for spreadsheets and for moving history between installs.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    @property
    def history_path(self) -> Path:
        return self.directory / HISTORY_FILE

    @property
    def export_path(self) -> Path:
        return self.directory / EXPORT_FILE

    def save_match(self, total_used: float, avg_per_minute: float) -> bool:
        """Append one match summary. Returns False if the file could not be written."""
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(self.history_path, "a", newline="") as f:
                csv.writer(f).writerow([0, repr(float(total_used)), repr(float(avg_per_minute))])
        except OSError as e:
            logger.error(f"File write error saving match: {e}")
            return False
        logger.info("Match stats saved")
        return True

    def load(self) -> list[float]:
        """Average boost per minute of every saved match, oldest first."""
        values: list[float] = []
        try:
            with open(self.history_path, newline="") as f:
                for lineno, row in enumerate(csv.reader(f), start=1):
                    if len(row) < 3:
                        logger.warning(f"{self.history_path}:{lineno}: expected 3 columns, got {len(row)}")
                        continue
                    try:
                        values.append(float(row[2]))
                    except ValueError:
                        logger.warning(f"{self.history_path}:{lineno}: not a number: {row[2]!r}")
        except OSError as e:
            logger.error(f"File read error loading history: {e}")
            return []
        logger.info(f"History loaded ({len(values)} matches)")
        return values

    def export_history(self, values: Iterable[float]) -> bool:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(self.export_path, "w") as f:
                for v in values:
                    f.write(f"{float(v)!r}\n")
        except OSError as e:
            logger.error(f"Failed to export history: {e}")
            return False
        return True

    def import_history(self) -> list[float]:
        """Read the history export back. Unparseable lines are skipped."""
        values: list[float] = []
        try:
            with open(self.export_path) as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        values.append(float(line))
                    except ValueError:
                        logger.debug(f"Skipping malformed history line {line!r}")
        except OSError as e:
            logger.error(f"Failed to import history: {e}")
            return []
        return values

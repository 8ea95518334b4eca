"""Append-only ratings log and the cache policy built on top of it.

Every successful fetch appends one line ``Platform rating unixTimestamp`` to
``ratings.log``. A later run reuses the most recent line for a platform as
long as it is younger than two days and was fetched after the platform's
username was last set up.
"""

from __future__ import annotations

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union


logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".cp_ratings"

# Explicit log location; None means <data dir>/ratings.log
LOG_PATH: Optional[Path] = None

# Maximum age of a cached rating: 2 days
CACHE_THRESHOLD = 2 * 24 * 60 * 60


@dataclass(frozen=True)
class RatingRecord:
    platform: str
    rating: int
    fetched_at: int

    def to_line(self) -> str:
        return f"{self.platform} {self.rating} {self.fetched_at}"

    @classmethod
    def from_line(cls, line: str) -> "RatingRecord":
        platform, rating, fetched_at = line.split()
        return cls(platform, int(rating), int(fetched_at))


def _now() -> int:
    return int(time.time())


def data_dir() -> Path:
    """Directory holding both flat files, read from CPR_HOME on every call."""

    return Path(os.getenv("CPR_HOME", str(DEFAULT_DATA_DIR))).expanduser()


def _resolve(path: Optional[Union[str, Path]]) -> Path:
    if path is not None:
        return Path(path)
    return LOG_PATH if LOG_PATH is not None else data_dir() / "ratings.log"


def load_records(path: Optional[Union[str, Path]] = None) -> List[RatingRecord]:
    """Return every record in file order ([] if the log is missing)."""

    log_path = _resolve(path)
    if not log_path.exists():
        return []

    records: List[RatingRecord] = []
    for lineno, line in enumerate(log_path.read_text(encoding="utf-8").splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(RatingRecord.from_line(line))
        except ValueError:
            logger.debug("Skipping malformed log line %d: %r", lineno, line)
    return records


def latest_record(platform: str, path: Optional[Union[str, Path]] = None) -> Optional[RatingRecord]:
    """Return the last logged record for *platform* (or *None*)."""

    latest = None
    for record in load_records(path):
        if record.platform == platform:
            latest = record
    return latest


def append_record(
    platform: str,
    rating: int,
    now: Optional[int] = None,
    path: Optional[Union[str, Path]] = None,
) -> RatingRecord:
    """Append a freshly fetched *rating* for *platform* to the log."""

    record = RatingRecord(platform, int(rating), _now() if now is None else now)
    log_path = _resolve(path)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write(record.to_line() + "\n")
    logger.debug("Logged %s", record.to_line())
    return record


def clear_log(path: Optional[Union[str, Path]] = None) -> None:
    """Remove all rating history."""

    log_path = _resolve(path)
    if log_path.exists():
        log_path.write_text("", encoding="utf-8")
    logger.info("Cleared ratings log %s", log_path)


def is_cache_valid(record: Optional[RatingRecord], setup_time: int, now: Optional[int] = None) -> bool:
    """Decide whether *record* may be shown instead of fetching again.

    The record has to be younger than ``CACHE_THRESHOLD`` and must not
    predate the last setup of the platform's username.
    """

    if record is None:
        return False
    now = _now() if now is None else now
    return now - record.fetched_at < CACHE_THRESHOLD and setup_time <= record.fetched_at


def cached_rating(
    platform: str,
    setup_time: int,
    now: Optional[int] = None,
    force_update: bool = False,
    path: Optional[Union[str, Path]] = None,
) -> Optional[int]:
    """Return the usable cached rating for *platform*, or *None* to force a fetch."""

    if force_update:
        return None

    record = latest_record(platform, path)
    if is_cache_valid(record, setup_time, now):
        logger.debug("Using cached %s rating from %d", platform, record.fetched_at)
        return record.rating
    return None


__all__ = [
    "CACHE_THRESHOLD",
    "RatingRecord",
    "append_record",
    "cached_rating",
    "clear_log",
    "data_dir",
    "is_cache_valid",
    "latest_record",
    "load_records",
]

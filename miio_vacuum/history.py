"""Cleaning history models and parsers."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from .state import map_area


class CleaningHistory(BaseModel):
    """Summary of every cleaning run the device remembers."""

    count: int
    days: list[datetime]
    total_duration: int | None = None
    total_area: float | None = None


class CleaningRecord(BaseModel):
    """A single cleaning run."""

    start: datetime
    end: datetime
    duration: int
    area: float
    complete: bool


class HistoryDay(BaseModel):
    """Cleaning runs recorded on one day."""

    day: datetime
    history: list[CleaningRecord]


def from_timestamp(value: int | float) -> datetime:
    """Convert epoch seconds to an aware UTC datetime."""

    return datetime.fromtimestamp(value, tz=timezone.utc)


def to_timestamp(day: datetime | int | float) -> int:
    """Convert ``day`` to whole epoch seconds."""

    if isinstance(day, datetime):
        return math.floor(day.timestamp())
    return math.floor(day)


def parse_clean_summary(result: Sequence[Any]) -> CleaningHistory:
    """Parse a ``get_clean_summary`` reply.

    The reply is ``[total_seconds, total_area, run_count, [day, ...]]``.
    """

    return CleaningHistory(
        count=result[2],
        days=[from_timestamp(ts) for ts in result[3]],
        total_duration=result[0],
        total_area=map_area(result[1]),
    )


def parse_clean_record(data: Sequence[Any]) -> CleaningRecord:
    """Parse one ``[start, end, duration, area, _, complete]`` entry."""

    return CleaningRecord(
        start=from_timestamp(data[0]),
        end=from_timestamp(data[1]),
        duration=data[2],
        area=map_area(data[3]),
        complete=data[5] == 1,
    )


def parse_history_day(
    day: datetime | int | float, result: Sequence[Sequence[Any]]
) -> HistoryDay:
    """Build the history for ``day`` from a ``get_clean_record`` reply."""

    return HistoryDay(
        day=from_timestamp(to_timestamp(day)),
        history=[parse_clean_record(data) for data in result],
    )

# src/smart_todo/core/clock.py

from __future__ import annotations

from datetime import date, datetime


class SystemClock:
    """Local wall clock (naive datetimes, seconds precision)."""

    def now(self) -> datetime:
        return datetime.now().replace(microsecond=0)

    def today(self) -> date:
        return date.today()

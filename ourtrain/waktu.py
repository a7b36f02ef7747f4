"""Clock times and full timestamps used for schedules and booking history."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass, replace

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def is_leap_year(tahun: int) -> bool:
    """Return True if the year is a Gregorian leap year."""
    return (tahun % 4 == 0 and tahun % 100 != 0) or tahun % 400 == 0


def _days_in_month(bulan: int, tahun: int) -> int:
    if bulan in (4, 6, 9, 11):
        return 30
    if bulan == 2:
        return 29 if is_leap_year(tahun) else 28
    return 31


def is_time_valid(jam: int, menit: int, detik: int) -> bool:
    """Return True if the hour, minute and second form a valid clock time."""
    return 0 <= jam < 24 and 0 <= menit < 60 and 0 <= detik < 60


def is_date_valid(hari: int, bulan: int, tahun: int) -> bool:
    """Return True if the day, month and year form a valid calendar date."""
    if not 1 <= bulan <= 12 or hari < 1:
        return False
    return hari <= _days_in_month(bulan, tahun)


@dataclass(frozen=True, order=True)
class WaktuSingkat:
    """A time of day without a date."""

    jam: int = 0
    menit: int = 0
    detik: int = 0

    @classmethod
    def now(cls) -> WaktuSingkat:
        current = _dt.datetime.now()
        return cls(current.hour, current.minute, current.second)

    @classmethod
    def from_seconds(cls, total: int) -> WaktuSingkat:
        """Build a time of day from seconds, wrapping around midnight."""
        total %= SECONDS_PER_DAY
        jam, rest = divmod(total, SECONDS_PER_HOUR)
        menit, detik = divmod(rest, SECONDS_PER_MINUTE)
        return cls(jam, menit, detik)

    def to_seconds(self) -> int:
        return self.detik + self.menit * SECONDS_PER_MINUTE + self.jam * SECONDS_PER_HOUR

    def seconds_until(self, other: WaktuSingkat) -> int:
        """Seconds from this time to ``other`` (negative if ``other`` is earlier)."""
        return other.to_seconds() - self.to_seconds()

    def add_seconds(self, detik: int) -> WaktuSingkat:
        return WaktuSingkat.from_seconds(self.to_seconds() + detik)

    def add_minutes(self, menit: int) -> WaktuSingkat:
        return self.add_seconds(menit * SECONDS_PER_MINUTE)

    def add_hours(self, jam: int) -> WaktuSingkat:
        return self.add_seconds(jam * SECONDS_PER_HOUR)

    def subtract_seconds(self, detik: int) -> WaktuSingkat:
        return self.add_seconds(-detik)

    def __str__(self) -> str:
        return f"{self.jam:02d}:{self.menit:02d}:{self.detik:02d}"


@dataclass(frozen=True, order=True)
class Waktu:
    """A full timestamp; fields are ordered so comparison is chronological."""

    tahun: int = 0
    bulan: int = 0
    hari: int = 0
    jam: int = 0
    menit: int = 0
    detik: int = 0

    @classmethod
    def of_time(cls, jam: int, menit: int, detik: int) -> Waktu:
        """A timestamp holding only a time of day; the date fields are zero."""
        return cls(jam=jam, menit=menit, detik=detik)

    @classmethod
    def now(cls) -> Waktu:
        current = _dt.datetime.now()
        return cls._from_datetime(current)

    @classmethod
    def from_short(cls, short: WaktuSingkat) -> Waktu:
        return cls.of_time(short.jam, short.menit, short.detik)

    @classmethod
    def from_seconds(cls, total: int) -> Waktu:
        """Split seconds into hours, minutes and seconds; the date fields are zero."""
        jam = _trunc_div(total, SECONDS_PER_HOUR)
        rest = total - jam * SECONDS_PER_HOUR
        menit = _trunc_div(rest, SECONDS_PER_MINUTE)
        detik = rest - menit * SECONDS_PER_MINUTE
        return cls.of_time(jam, menit, detik)

    @classmethod
    def _from_datetime(cls, value: _dt.datetime) -> Waktu:
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)

    def _to_datetime(self) -> _dt.datetime:
        # Missing date parts fall back to 1 January 1900; other fields normalise.
        tahun = self.tahun if self.tahun > 0 else 1900
        bulan = self.bulan if self.bulan > 0 else 1
        hari = self.hari if self.hari > 0 else 1
        year_shift, month_index = divmod(bulan - 1, 12)
        base = _dt.datetime(tahun + year_shift, month_index + 1, 1)
        return base + _dt.timedelta(
            days=hari - 1, hours=self.jam, minutes=self.menit, seconds=self.detik
        )

    def to_short(self) -> WaktuSingkat:
        return WaktuSingkat(self.jam, self.menit, self.detik)

    def time_of_day_seconds(self) -> int:
        """Seconds of the time-of-day part only."""
        return self.detik + self.menit * SECONDS_PER_MINUTE + self.jam * SECONDS_PER_HOUR

    def seconds_until(self, other: Waktu) -> int:
        delta = other._to_datetime() - self._to_datetime()
        return int(delta.total_seconds())

    def minutes_until(self, other: Waktu) -> int:
        return _trunc_div(self.seconds_until(other), SECONDS_PER_MINUTE)

    def hours_until(self, other: Waktu) -> int:
        return _trunc_div(self.seconds_until(other), SECONDS_PER_HOUR)

    def days_until(self, other: Waktu) -> int:
        return _trunc_div(self.seconds_until(other), SECONDS_PER_DAY)

    def add_seconds(self, detik: int) -> Waktu:
        return Waktu._from_datetime(self._to_datetime() + _dt.timedelta(seconds=detik))

    def add_minutes(self, menit: int) -> Waktu:
        return self.add_seconds(menit * SECONDS_PER_MINUTE)

    def add_hours(self, jam: int) -> Waktu:
        return self.add_seconds(jam * SECONDS_PER_HOUR)

    def add_days(self, hari: int) -> Waktu:
        return self.add_seconds(hari * SECONDS_PER_DAY)

    def add_months(self, bulan: int) -> Waktu:
        """Advance the month, rolling into later years and clamping the day."""
        new_bulan = self.bulan + bulan
        new_tahun = self.tahun
        while new_bulan > 12:
            new_bulan -= 12
            new_tahun += 1
        new_hari = min(self.hari, _days_in_month(new_bulan, new_tahun))
        return replace(self, tahun=new_tahun, bulan=new_bulan, hari=new_hari)

    def add_years(self, tahun: int) -> Waktu:
        """Advance the year, moving 29 February to the 28th in common years."""
        new_tahun = self.tahun + tahun
        new_hari = self.hari
        if self.bulan == 2 and self.hari == 29 and not is_leap_year(new_tahun):
            new_hari = 28
        return replace(self, tahun=new_tahun, hari=new_hari)

    def subtract_seconds(self, detik: int) -> Waktu:
        return self.add_seconds(-detik)

    def subtract_minutes(self, menit: int) -> Waktu:
        return self.add_minutes(-menit)

    def subtract_hours(self, jam: int) -> Waktu:
        return self.add_hours(-jam)

    def subtract_days(self, hari: int) -> Waktu:
        return self.add_days(-hari)

    def format_time(self) -> str:
        return f"{self.jam:02d}:{self.menit:02d}:{self.detik:02d}"

    def format_full(self) -> str:
        return (
            f"{self.hari:02d}/{self.bulan:02d}/{self.tahun:04d} "
            f"{self.jam:02d}:{self.menit:02d}:{self.detik:02d}"
        )

    def __str__(self) -> str:
        return self.format_full()
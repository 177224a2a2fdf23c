"""A wall-clock time of day that can advance one second at a time."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Time:
    """Hour, minute and second of a day."""

    hour: int = 0
    minute: int = 0
    second: int = 0

    def next_second(self) -> None:
        """Advance by one second, rolling over minutes, hours and midnight."""
        self.second += 1
        if self.second >= 60:
            self.second = 0
            self.minute += 1
        if self.minute >= 60:
            self.minute = 0
            self.hour += 1
        if self.hour >= 24:
            self.hour = 0

    def __str__(self) -> str:
        return f"{self.hour}:{self.minute}:{self.second}"
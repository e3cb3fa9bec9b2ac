# src/errors.py
# Exceptions raised by the scraper and the schedule resolver.

from typing import Optional


class ScheduleScraperError(Exception):
    """Base exception for all application errors."""

    pass


class MalformedScheduleError(ScheduleScraperError):
    """Raised when a seat sequence cannot be split into whole tables and games."""

    pass


class PageFetchError(ScheduleScraperError):
    """Raised when the tournament page cannot be downloaded."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SeatSelectionError(ScheduleScraperError):
    """Raised when the seat selector matches nothing on the page."""

    pass

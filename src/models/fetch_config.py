# src/models/fetch_config.py

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

from config import (
    IMAFIA_URL_BASE,
    IMAFIA_URL_TAIL,
    REQUEST_TIMEOUT,
    SCRAPE_SEAT_SELECTOR,
    SCRAPE_TOURNAMENT_ID,
    SEATS_PER_TABLE,
)


@dataclass(frozen=True)
class FetchConfig:
    tournament_id:          str = SCRAPE_TOURNAMENT_ID      # imafia.org tournament ID
    seat_selector:          str = SCRAPE_SEAT_SELECTOR      # CSS selector matching one element per seat
    seats_per_table:        int = SEATS_PER_TABLE           # Players per table
    url_base:               str = IMAFIA_URL_BASE           # Page URL without the tournament ID
    url_tail:               str = IMAFIA_URL_TAIL           # Anchor appended after the tournament ID
    timeout:                float = REQUEST_TIMEOUT         # Seconds per HTTP request

    @property
    def url(self) -> str:
        return f"{self.url_base.rstrip('/')}/{self.tournament_id}{self.url_tail}"

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FetchConfig":
        """Build a config from a dict, falling back to defaults for missing or None keys."""
        return cls(**{k: d[k] for k in {f.name for f in fields(cls)} if d.get(k) is not None})

    def validate(self) -> Tuple[bool, str]:
        missing = []
        if not str(self.tournament_id).strip():
            missing.append("tournament_id")
        if not self.seat_selector:
            missing.append("seat_selector")
        if missing:
            return False, f"Missing fields: {', '.join(missing)}"
        if isinstance(self.seats_per_table, bool) or not isinstance(self.seats_per_table, int) or self.seats_per_table <= 0:
            return False, f"seats_per_table must be a positive integer, got {self.seats_per_table!r}"
        if isinstance(self.timeout, bool) or not isinstance(self.timeout, (int, float)) or self.timeout <= 0:
            return False, f"timeout must be positive, got {self.timeout!r}"
        return True, ""

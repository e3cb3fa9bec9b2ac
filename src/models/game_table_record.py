# src/models/game_table_record.py

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class GameTableRecord:
    game:               int                         # 1-based game (round) number
    table:              int                         # 1-based table number within the game
    players:            Tuple[str, ...] = ()        # Seat order as listed on the results page

    def to_dict(self) -> Dict[str, Any]:
        return {"game": self.game, "table": self.table, "players": list(self.players)}

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GameTableRecord":
        return cls(
            game    = d.get("game"),
            table   = d.get("table"),
            players = tuple(d.get("players") or ()),
        )

    def has_player(self, player: str) -> bool:
        return player in self.players

    def validate(self) -> Tuple[bool, str]:
        missing = [f.name for f in fields(self) if getattr(self, f.name) in (None, ())]
        if missing:
            return False, f"Missing fields: {', '.join(missing)}"
        if self.game < 1 or self.table < 1:
            return False, f"Game and table numbers start at 1, got game {self.game}, table {self.table}"
        repeated = sorted({p for p in self.players if self.players.count(p) > 1})
        if repeated:
            return False, f"Game {self.game}, table {self.table}: repeated player(s): {', '.join(repeated)}"
        return True, ""


@dataclass(frozen=True)
class PlayerGame:
    game:               int
    table:              int

    def to_dict(self) -> Dict[str, Any]:
        return {"game": self.game, "table": self.table}

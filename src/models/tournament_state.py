# src/models/tournament_state.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import pandas as pd

from models.game_table_record import GameTableRecord


@dataclass(frozen=True)
class TournamentState:
    players_count:      int                                 # Distinct players on the page
    tables_count:       int                                 # Tables played concurrently in each game
    games_count:        int                                 # Games (rounds) in the tournament
    participants:       Tuple[str, ...] = ()                # Roster, sorted for display
    games:              Tuple[GameTableRecord, ...] = ()    # One record per (game, table), in page order

    def to_dict(self) -> Dict[str, Any]:
        """Output shape shared with the command line JSON dump."""
        return {
            "playersCount":     self.players_count,
            "tablesCount":      self.tables_count,
            "gamesCount":       self.games_count,
            "participants":     list(self.participants),
            "games":            [record.to_dict() for record in self.games],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> TournamentState:
        return cls(
            players_count   = d.get("playersCount"),
            tables_count    = d.get("tablesCount"),
            games_count     = d.get("gamesCount"),
            participants    = tuple(d.get("participants") or ()),
            games           = tuple(GameTableRecord.from_dict(g) for g in d.get("games") or ()),
        )

    def tables_for_game(self, game: int) -> List[GameTableRecord]:
        return [record for record in self.games if record.game == game]

    def to_dataframe(self) -> pd.DataFrame:
        """
        Long-form seating table, one row per seat:
            game | table | seat | player
        Rows follow the record order of `games`; seats are 1-based.
        """
        rows = [
            {"game": record.game, "table": record.table, "seat": seat, "player": player}
            for record in self.games
            for seat, player in enumerate(record.players, 1)
        ]
        return pd.DataFrame(rows, columns=["game", "table", "seat", "player"])

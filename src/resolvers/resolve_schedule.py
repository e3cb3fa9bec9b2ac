# src/resolvers/resolve_schedule.py

import logging
import math
from collections import Counter
from typing import List, Sequence, Tuple

from errors import MalformedScheduleError
from models.game_table_record import GameTableRecord
from models.tournament_state import TournamentState
from utils import collation_key


def build_schedule(seat_sequence: Sequence[str], seats_per_table: int) -> TournamentState:
    """
    Rebuild the tournament schedule from the flat list of seat labels on the results page.

    The page lists every table of every game as a contiguous run of `seats_per_table` names,
    tables cycling fastest. From that list we derive:
      - players_count:  distinct names (exact string match, first occurrence wins)
      - tables_count:   players_count / seats_per_table
      - games_count:    len(seat_sequence) / seats_per_table / tables_count
      - games:          one GameTableRecord per (game, table), in page order

    Raises:
      ValueError              if seats_per_table is not a positive integer
      MalformedScheduleError  if the sequence does not split into whole tables and games
    """
    if isinstance(seats_per_table, bool) or not isinstance(seats_per_table, int) or seats_per_table <= 0:
        raise ValueError(f"seats_per_table must be a positive integer, got {seats_per_table!r}")

    seats = list(seat_sequence)
    if len(seats) < seats_per_table:
        raise MalformedScheduleError(
            f"Expected at least {seats_per_table} seats, got {len(seats)}"
        )
    if len(seats) % seats_per_table:
        raise MalformedScheduleError(
            f"{len(seats)} seats do not split into tables of {seats_per_table}"
        )

    # dict keeps first-occurrence order
    roster = list(dict.fromkeys(seats))
    players_count = len(roster)

    if players_count % seats_per_table:
        raise MalformedScheduleError(
            f"{players_count} distinct players do not fill whole tables of {seats_per_table}"
        )
    tables_count = players_count // seats_per_table

    seats_per_game = seats_per_table * tables_count
    if len(seats) % seats_per_game:
        raise MalformedScheduleError(
            f"{len(seats)} seats do not split into games of {tables_count} tables"
        )
    games_count = len(seats) // seats_per_game

    logging.debug(
        f"Resolved {players_count} players into {tables_count} tables over {games_count} games"
    )

    games = tuple(
        _record_at(idx, seats, seats_per_table, tables_count, games_count)
        for idx in range(games_count * tables_count)
    )

    return TournamentState(
        players_count   = players_count,
        tables_count    = tables_count,
        games_count     = games_count,
        participants    = tuple(sorted(roster, key=collation_key)),
        games           = games,
    )


def _record_at(idx: int, seats: List[str], seats_per_table: int, tables_count: int, games_count: int) -> GameTableRecord:
    start = idx * seats_per_table
    # Real division then modulo, matching the ordering imafia.org renders.
    game = math.floor((idx / tables_count) % games_count) + 1
    table = (idx % tables_count) + 1
    return GameTableRecord(game=game, table=table, players=tuple(seats[start:start + seats_per_table]))


def validate_schedule(state: TournamentState) -> Tuple[bool, str]:
    """
    Check that every participant sits exactly once in every game and that no table repeats a name.
    Returns (is_valid, error_message); never raises.
    """
    for record in state.games:
        is_valid, message = record.validate()
        if not is_valid:
            return False, message

    for game in range(1, state.games_count + 1):
        seated = Counter(p for record in state.tables_for_game(game) for p in record.players)
        repeated = sorted((p for p, n in seated.items() if n > 1), key=collation_key)
        if repeated:
            return False, f"Game {game}: seated more than once: {', '.join(repeated)}"
        missing = sorted(set(state.participants) - set(seated), key=collation_key)
        if missing:
            return False, f"Game {game}: not seated: {', '.join(missing)}"

    return True, ""

# src/resolvers/resolve_player_games.py

from typing import List

from models.game_table_record import PlayerGame
from models.tournament_state import TournamentState


def find_player_games(state: TournamentState, player: str) -> List[PlayerGame]:
    """
    Games and tables a player sat at, in schedule order.
    Matching is exact; an unknown player yields an empty list.
    """
    return [
        PlayerGame(game=record.game, table=record.table)
        for record in state.games
        if record.has_player(player)
    ]

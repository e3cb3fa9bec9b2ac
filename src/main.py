# src/main.py

import argparse
import json
import logging
import sys
import uuid

from config import SCRAPE_SEAT_SELECTOR, SCRAPE_TOURNAMENT_ID, SEATS_PER_TABLE
from errors import ScheduleScraperError
from models.fetch_config import FetchConfig
from resolvers.resolve_player_games import find_player_games
from upd_tournament_schedule import upd_tournament_schedule
from utils import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rebuild the game/table schedule of an imafia.org tournament.")
    parser.add_argument("--tournament-id", default=SCRAPE_TOURNAMENT_ID, help="imafia.org tournament ID")
    parser.add_argument("--player", help="Only list the games and tables of this player (exact name)")
    parser.add_argument("--seats-per-table", type=int, default=SEATS_PER_TABLE, help="Players per table")
    parser.add_argument("--selector", default=SCRAPE_SEAT_SELECTOR, help="CSS selector for seat elements")
    parser.add_argument("--format", choices=["json", "table"], default="json", help="Output format for the full schedule")
    return parser.parse_args(argv)


def main(argv=None) -> int:

    args = parse_args(argv)
    setup_logging()

    pipeline_run_id = str(uuid.uuid4())
    logging.info(f"Starting new run with ID: {pipeline_run_id}")

    config = FetchConfig(
        tournament_id       = args.tournament_id,
        seat_selector       = args.selector,
        seats_per_table     = args.seats_per_table,
    )

    try:
        state = upd_tournament_schedule(config, run_id=pipeline_run_id)
    except (ScheduleScraperError, ValueError) as e:
        logging.error(f"Error: {e}", exc_info=True)
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    if args.player:
        player_games = [pg.to_dict() for pg in find_player_games(state, args.player)]
        print(json.dumps(player_games, ensure_ascii=False, indent=2))
    elif args.format == "table":
        print(f"Players: {state.players_count}, tables: {state.tables_count}, games: {state.games_count}")
        print(state.to_dataframe().to_string(index=False))
    else:
        print(json.dumps(state.to_dict(), ensure_ascii=False, indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())

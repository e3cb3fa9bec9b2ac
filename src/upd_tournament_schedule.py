# src/upd_tournament_schedule.py

import time
from typing import Optional

import requests

from errors import MalformedScheduleError, PageFetchError, SeatSelectionError
from models.fetch_config import FetchConfig
from models.tournament_state import TournamentState
from resolvers.resolve_schedule import build_schedule, validate_schedule
from scrapers.scrape_tournament_page_imafia import extract_seat_labels, fetch_tournament_html
from utils import OperationLogger


def upd_tournament_schedule(
        config:     Optional[FetchConfig] = None,
        session:    Optional[requests.Session] = None,
        logger:     Optional[OperationLogger] = None,
        run_id:     Optional[str] = None
    ) -> TournamentState:
    """
    Run the full chain for one tournament: fetch page → extract seats → build schedule.
    Every step is reported through the OperationLogger; errors are logged and re-raised.
    """
    config = config or FetchConfig()
    is_valid, message = config.validate()
    if not is_valid:
        raise ValueError(f"Invalid fetch config: {message}")

    own_logger = logger is None
    if own_logger:
        logger = OperationLogger(
            verbosity       = 2,
            print_output    = False,
            run_id          = run_id
        )

    logger_keys = {
        "tournament_id":    config.tournament_id,
        "url":              config.url,
    }
    start_time = time.time()
    logger.info(logger_keys.copy(), "Building tournament schedule...")

    try:
        html = fetch_tournament_html(config, session=session)
        logger.success(logger_keys.copy(), "Page fetched")

        seats = extract_seat_labels(html, config.seat_selector)
        logger.inc_processed(len(seats))
        logger.success(logger_keys.copy(), "Seats extracted")

        state = build_schedule(seats, config.seats_per_table)
        logger.success(logger_keys.copy(), "Schedule built")

        is_valid, message = validate_schedule(state)
        if not is_valid:
            logger.warning(logger_keys.copy(), message)

        logger.info(
            logger_keys.copy(),
            f"Finished in {time.time() - start_time:.1f}s "
            f"(players: {state.players_count}, tables: {state.tables_count}, games: {state.games_count})"
        )
        return state

    except PageFetchError as e:
        logger.failed({**logger_keys, "status_code": e.status_code}, "Page fetch failed")
        raise
    except SeatSelectionError:
        logger.failed(logger_keys.copy(), "No seats found on page, site structure may have changed")
        raise
    except MalformedScheduleError as e:
        logger.failed(logger_keys.copy(), f"Malformed schedule: {e}")
        raise
    except ValueError as e:
        logger.failed(logger_keys.copy(), f"Invalid input: {e}")
        raise
    finally:
        if own_logger:
            logger.summarize()

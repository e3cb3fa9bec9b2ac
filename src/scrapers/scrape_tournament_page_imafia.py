# src/scrapers/scrape_tournament_page_imafia.py
#
# Downloads an imafia.org tournament page and pulls out the seat labels.
# Uses plain requests/BeautifulSoup (the results block is server-rendered).

"""
Context (from manual page walk):
  - Tournament pages live at https://imafia.org/tournament/<id>#tournament-info.
  - The results block (#tournament-results) repeats one .games_item_content per table per game.
  - Each seat is an <a> linking to the player profile; empty anchors mark unused seats and are skipped.
  - Tables are listed fastest, games slower, so the flat seat list is ordered game by game.
"""

import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3 import Retry

from config import REQUEST_BACKOFF, REQUEST_RETRIES
from errors import PageFetchError, SeatSelectionError
from models.fetch_config import FetchConfig


HEADERS = {
    "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
                  "(KHTML, like Gecko) Chrome/120.0 Safari/537.36",
    "Accept-Language": "ru-RU,ru;q=0.9,en;q=0.8",
}


def init_session() -> requests.Session:
    """Session with browser-like headers and retry on transient server errors."""
    session = requests.Session()
    session.headers.update(HEADERS)
    retry_strategy = Retry(
        total=REQUEST_RETRIES,
        backoff_factor=REQUEST_BACKOFF,  # Wait 1s, 2s, 4s between retries
        status_forcelist=[500, 502, 503, 504, 429],
        allowed_methods=["GET"],
        raise_on_status=False,  # Hand the last response back so its status can be reported
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def fetch_tournament_html(config: FetchConfig, session: Optional[requests.Session] = None) -> str:
    """
    Fetch the raw HTML of the tournament results page.

    A caller-supplied session is used as is and left open; otherwise a
    retrying session is created and closed here.

    Raises:
      PageFetchError on transport failure or a non-2xx response.
    """
    own_session = session is None
    if own_session:
        session = init_session()

    url = config.url
    try:
        logging.info(f"Fetching tournament page {url}")
        resp = session.get(url, timeout=config.timeout)
    except requests.RequestException as e:
        raise PageFetchError(f"Fetch error: {e}") from e
    finally:
        if own_session:
            session.close()

    if not resp.ok:
        raise PageFetchError(f"Fetch error: {resp.status_code}", status_code=resp.status_code)

    logging.debug(f"Fetched {len(resp.text)} characters from {url}")
    return resp.text


def extract_seat_labels(html: str, selector: str) -> List[str]:
    """
    Return the text of every element matching `selector`, in document order.
    Text is taken as is (no stripping), so names compare exactly as rendered.

    Raises:
      SeatSelectionError if nothing matches.
    """
    soup = BeautifulSoup(html, "html.parser")
    seats = [element.get_text() for element in soup.select(selector)]
    if not seats:
        raise SeatSelectionError(f"No seats matched selector: {selector}")

    logging.debug(f"Extracted {len(seats)} seat labels")
    return seats

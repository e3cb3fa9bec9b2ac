"""Tests for downloading the tournament page and extracting seat labels."""
from __future__ import annotations

import pytest
import requests

from config import SCRAPE_SEAT_SELECTOR
from conftest import FakeSession, make_names, make_response, results_page
from errors import PageFetchError, SeatSelectionError
from models.fetch_config import FetchConfig
from scrapers.scrape_tournament_page_imafia import (
    HEADERS,
    extract_seat_labels,
    fetch_tournament_html,
    init_session,
)


def test_extract_seat_labels_in_document_order() -> None:
    names = make_names(20)
    html = results_page([names[:10], names[10:]])

    assert extract_seat_labels(html, SCRAPE_SEAT_SELECTOR) == names


def test_extract_skips_empty_anchors_and_links_outside_results() -> None:
    html = results_page([["Medved", "Lis"]], empty_seats=3)

    # The "Home" link in #tournament-info must not be picked up.
    assert extract_seat_labels(html, SCRAPE_SEAT_SELECTOR) == ["Medved", "Lis"]


def test_extract_keeps_text_unstripped() -> None:
    html = results_page([[" Medved ", "Лис"]])

    assert extract_seat_labels(html, SCRAPE_SEAT_SELECTOR) == [" Medved ", "Лис"]


def test_extract_raises_when_nothing_matches() -> None:
    with pytest.raises(SeatSelectionError):
        extract_seat_labels("<html><body><p>Turnir</p></body></html>", SCRAPE_SEAT_SELECTOR)


def test_fetch_returns_page_text() -> None:
    session = FakeSession(make_response(200, "<html>ok</html>"))
    config = FetchConfig(tournament_id="740", timeout=5)

    assert fetch_tournament_html(config, session=session) == "<html>ok</html>"
    assert session.calls == [{"url": "https://imafia.org/tournament/740#tournament-info", "timeout": 5}]
    assert session.closed is False


def test_fetch_non_2xx_raises_with_status() -> None:
    session = FakeSession(make_response(404, "not found"))

    with pytest.raises(PageFetchError) as exc_info:
        fetch_tournament_html(FetchConfig(), session=session)

    assert exc_info.value.status_code == 404
    assert str(exc_info.value) == "Fetch error: 404"


def test_fetch_transport_error_raises_without_status() -> None:
    session = FakeSession(error=requests.ConnectionError("connection refused"))

    with pytest.raises(PageFetchError) as exc_info:
        fetch_tournament_html(FetchConfig(), session=session)

    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_fetch_creates_and_closes_its_own_session(monkeypatch) -> None:
    session = FakeSession(make_response(200, "<html></html>"))
    monkeypatch.setattr(
        "scrapers.scrape_tournament_page_imafia.init_session", lambda: session
    )

    fetch_tournament_html(FetchConfig())

    assert session.closed is True


def test_init_session_sets_headers_and_retries() -> None:
    session = init_session()
    try:
        assert session.headers["User-Agent"] == HEADERS["User-Agent"]
        retries = session.get_adapter("https://imafia.org").max_retries
        assert retries.total == 3
        assert 503 in retries.status_forcelist
    finally:
        session.close()

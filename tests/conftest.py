"""Shared helpers for building seat sequences and fake imafia.org pages."""
from __future__ import annotations

from typing import List, Optional

import pytest
import requests


def make_names(count: int, prefix: str = "p") -> List[str]:
    return [f"{prefix}{i:02d}" for i in range(count)]


def rotating_schedule(players: List[str], games: int, shift: int = 3) -> List[str]:
    """Flat seat list where every player sits once per game, rotated between games."""
    seats: List[str] = []
    for game in range(games):
        offset = (game * shift) % len(players)
        seats.extend(players[offset:] + players[:offset])
    return seats


def results_page(tables: List[List[str]], empty_seats: int = 1) -> str:
    """Render seat runs the way imafia.org nests its tournament results block."""
    items = []
    for table in tables:
        anchors = "".join(f'<a href="/player/{name}">{name}</a>' for name in table)
        anchors += '<a href="#"></a>' * empty_seats
        items.append(
            "<div><div><div><div>"
            f'<div class="games_item_content"><div><div>{anchors}</div></div></div>'
            "</div></div></div></div>"
        )
    return (
        "<html><body>"
        '<div id="tournament-info"><a href="/">Home</a></div>'
        f'<div id="tournament-results">{"".join(items)}</div>'
        "</body></html>"
    )


def make_response(status_code: int = 200, text: str = "") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = text.encode("utf-8")
    response.encoding = "utf-8"
    return response


class FakeSession:
    """Stands in for requests.Session: records calls and replays a canned response."""

    def __init__(self, response: Optional[requests.Response] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None, **kwargs):
        self.calls.append({"url": url, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def twenty_players() -> List[str]:
    return make_names(20)

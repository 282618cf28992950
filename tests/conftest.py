import os
import sys
from typing import Dict, List, Optional

import pytest

# Ensure repo root is on sys.path so tests can import the app package
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from puppy_bowl.components.widgets import NewPlayerFormWidget, RosterWidget, WidgetConfig  # noqa: E402
from puppy_bowl.core.api_client import ApiResult  # noqa: E402
from puppy_bowl.core.models import NewPlayer, Player, Team  # noqa: E402

DEFAULT_IMAGE = (
    "https://learndotresources.s3.amazonaws.com/workshop/"
    "60ad725bbe74cd0004a6cba0/puppybowl-default-dog.png"
)


class FakePuppyBowlClient:
    """In-memory stand-in for PuppyBowlClient with the same result contract."""

    def __init__(self, players: Optional[List[Player]] = None):
        self.players: Dict[int, Player] = {p.id: p for p in players or []}
        self.calls: List[tuple] = []
        self.fail_on: set = set()
        self._next_id = max(self.players, default=0) + 1

    def fetch_all_players(self):
        self.calls.append(("fetch_all_players",))
        if "fetch_all_players" in self.fail_on:
            return ApiResult.failure("Trouble fetching players: boom")
        return ApiResult.success(list(self.players.values()))

    def fetch_single_player(self, player_id):
        self.calls.append(("fetch_single_player", player_id))
        if "fetch_single_player" in self.fail_on or player_id not in self.players:
            return ApiResult.failure(f"Trouble fetching player #{player_id}: boom")
        return ApiResult.success(self.players[player_id])

    def add_new_player(self, new_player: NewPlayer):
        self.calls.append(("add_new_player", new_player))
        if "add_new_player" in self.fail_on:
            return ApiResult.failure(f"Could not add {new_player.name!r}: boom")
        player = Player(
            id=self._next_id,
            name=new_player.name,
            breed=new_player.breed,
            image_url=new_player.image_url,
            status=new_player.status,
        )
        self.players[player.id] = player
        self._next_id += 1
        return ApiResult.success(player)

    def remove_player(self, player_id):
        self.calls.append(("remove_player", player_id))
        if "remove_player" in self.fail_on:
            return ApiResult.failure(f"Trouble removing player #{player_id}: boom")
        self.players.pop(player_id, None)
        return ApiResult.success()


@pytest.fixture
def rex():
    return Player(id=1, name="Rex", breed="Boxer", image_url=DEFAULT_IMAGE, status="bench")


@pytest.fixture
def bella():
    return Player(
        id=2,
        name="Bella",
        breed="Beagle",
        image_url=DEFAULT_IMAGE,
        status="field",
        team=Team(id=7, name="Ruff"),
        team_id=7,
    )


@pytest.fixture
def fake_client(rex, bella):
    return FakePuppyBowlClient([rex, bella])


@pytest.fixture
def roster():
    return RosterWidget(WidgetConfig(id="roster", title="Roster", widget_type="roster"))


@pytest.fixture
def form():
    return NewPlayerFormWidget(
        WidgetConfig(id="new-player-form", title="Add a new puppy", widget_type="form")
    )


def walk(node):
    """Yield `node` and every component below it."""
    if isinstance(node, (list, tuple)):
        for child in node:
            yield from walk(child)
        return
    if node is None or isinstance(node, (str, int, float)):
        return
    yield node
    yield from walk(getattr(node, "children", None))


def find_all(node, component_type=None, class_name=None):
    """Components under `node` matching a type and/or a CSS class."""
    matches = []
    for component in walk(node):
        if component_type is not None and not isinstance(component, component_type):
            continue
        if class_name is not None and class_name not in (getattr(component, "className", None) or "").split():
            continue
        matches.append(component)
    return matches


def text_of(node):
    """All string children under `node`, in order."""
    texts = []
    if isinstance(node, (list, tuple)):
        for child in node:
            texts.extend(text_of(child))
    elif isinstance(node, str):
        texts.append(node)
    elif node is not None and not isinstance(node, (int, float)):
        texts.extend(text_of(getattr(node, "children", None)))
    return texts


def button_by_type(node, button_type):
    """Buttons whose pattern-matching id has the given type."""
    return [
        component
        for component in walk(node)
        if isinstance(getattr(component, "id", None), dict) and component.id.get("type") == button_type
    ]

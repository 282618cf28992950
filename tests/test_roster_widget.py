"""Tests for the roster widget."""
import dataclasses

import dash_bootstrap_components as dbc
from dash import html

from puppy_bowl.components.widgets import RosterWidget, WidgetConfig
from puppy_bowl.components.widgets.roster import (
    BACK_TO_ALL_BUTTON,
    EMPTY_ROSTER_MESSAGE,
    REMOVE_PLAYER_BUTTON,
    SEE_DETAILS_BUTTON,
)

from .conftest import button_by_type, find_all, text_of


def test_render_is_main_container(roster):
    container = roster.render()

    assert isinstance(container, html.Main)
    assert container.id == "roster"
    assert container.children == []


def test_empty_roster_shows_single_placeholder(roster):
    children = roster.render_all_players([])

    assert len(children) == 1
    assert isinstance(children[0], html.P)
    assert children[0].children == EMPTY_ROSTER_MESSAGE
    assert find_all(children, class_name="player-card") == []


def test_one_card_per_player(roster, rex, bella):
    children = roster.render_all_players([rex, bella])

    cards = find_all(children, class_name="player-card")
    assert len(cards) == 2
    assert len(children) == 2


def test_card_shows_name_id_and_image_alt(roster, rex, bella):
    children = roster.render_all_players([rex, bella])

    for card, player in zip(children, [rex, bella]):
        texts = text_of(card)
        assert player.name in texts
        assert f"ID: {player.id}" in texts

        (image,) = find_all(card, html.Img)
        assert image.alt == player.name
        assert image.src == player.image_url


def test_card_buttons_are_bound_to_their_player(roster, rex, bella):
    children = roster.render_all_players([rex, bella])

    details = button_by_type(children, SEE_DETAILS_BUTTON)
    removes = button_by_type(children, REMOVE_PLAYER_BUTTON)

    assert [b.id["index"] for b in details] == [1, 2]
    assert [b.id["index"] for b in removes] == [1, 2]
    assert [b.children for b in details] == ["See details", "See details"]
    assert [b.children for b in removes] == ["Remove from roster", "Remove from roster"]


def test_render_replaces_previous_contents(roster, rex, bella):
    roster.render_all_players([rex, bella])

    children = roster.render_all_players([rex])

    assert len(find_all(children, class_name="player-card")) == 1


def test_single_player_card(roster, bella):
    children = roster.render_single_player(bella)

    assert len(children) == 1
    texts = text_of(children)
    assert "Bella" in texts
    assert "ID: 2" in texts
    assert "Breed: Beagle" in texts
    assert "Team: Ruff" in texts
    (image,) = find_all(children, html.Img)
    assert image.alt == "Bella"


def test_single_player_without_team_is_unassigned(roster, rex):
    texts = text_of(roster.render_single_player(rex))

    assert "Team: Unassigned" in texts


def test_single_player_has_back_button(roster, rex):
    children = roster.render_single_player(rex)

    (back,) = button_by_type(children, BACK_TO_ALL_BUTTON)
    assert back.children == "Back to all players"
    assert button_by_type(children, SEE_DETAILS_BUTTON) == []


def test_error_view_has_alert_and_retry(roster):
    children = roster.render_error("Trouble fetching players: boom")

    (alert,) = find_all(children, dbc.Alert)
    assert "Trouble fetching players: boom" in text_of(alert)
    (retry,) = button_by_type(children, BACK_TO_ALL_BUTTON)
    assert retry.id["index"] == "retry"


def test_widget_config_only_names_the_container():
    config = WidgetConfig(id="lineup", title="Lineup", widget_type="roster")
    widget = RosterWidget(config)

    assert [f.name for f in dataclasses.fields(WidgetConfig)] == ["id", "title", "widget_type"]
    assert widget.container_id == "lineup"
    assert widget.component_id("error") == "lineup-error"

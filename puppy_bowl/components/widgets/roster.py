"""
Roster widget: renders players as cards inside the `<main>` container.

Every render method returns the complete new children of the container,
so assigning the result replaces whatever was shown before.
"""
import logging
from typing import List, Sequence

import dash_bootstrap_components as dbc
from dash import html
from dash.development.base_component import Component

from puppy_bowl.core.models import STATUS_FIELD, Player

from .base import BaseWidget, WidgetConfig

# Get module logger
logger = logging.getLogger(__name__)

SEE_DETAILS_BUTTON = "see-details-btn"
REMOVE_PLAYER_BUTTON = "remove-player-btn"
BACK_TO_ALL_BUTTON = "back-to-all-btn"

EMPTY_ROSTER_MESSAGE = "No players available!"


class RosterWidget(BaseWidget):
    """
    Widget listing the roster or showing one player's details.

    Features:
    - One card per player with picture, name, id and status
    - "See details" / "Remove from roster" buttons on each card
    - Detail card with breed and team, plus a "Back to all players" button
    - Error alert with a retry button when the API call failed

    Card buttons use pattern-matching ids whose `index` is the card's
    player id, so a click identifies its player without any closure.
    """

    def __init__(self, config: WidgetConfig):
        """
        Initialize the roster widget.

        Args:
            config: Widget configuration; `config.id` is the container id
        """
        super().__init__(config)
        logger.info(f"[RosterWidget] Initialized '{config.id}'")

    def render(self, children: Sequence[Component] = ()) -> html.Main:
        """
        Render the `<main>` container.

        Args:
            children: Initial content, usually from `render_all_players`
        """
        return html.Main(list(children), id=self.container_id, className="roster")

    def render_all_players(self, players: Sequence[Player]) -> List[Component]:
        """
        Build the roster view.

        Args:
            players: Players to show, in display order

        Returns:
            List[Component]: A placeholder message when there are no
            players, otherwise one card per player
        """
        if not players:
            logger.info(f"[RosterWidget] '{self.container_id}': empty roster")
            return [html.P(EMPTY_ROSTER_MESSAGE, className="roster-empty")]

        logger.info(f"[RosterWidget] '{self.container_id}': rendering {len(players)} players")
        return [self._build_list_card(player) for player in players]

    def render_single_player(self, player: Player) -> List[Component]:
        """
        Build the detail view for one player.

        Args:
            player: Player to show

        Returns:
            List[Component]: A single detail card
        """
        logger.info(f"[RosterWidget] '{self.container_id}': showing player #{player.id}")

        card = html.Div(
            [
                *self._build_card_header(player),
                html.P(f"Breed: {player.breed}", className="player-breed"),
                html.P(f"Team: {player.team_name}", className="player-team"),
                html.Button(
                    "Back to all players",
                    id=self.pattern_id(BACK_TO_ALL_BUTTON, player.id),
                    className="btn btn-secondary",
                    n_clicks=0,
                ),
            ],
            className="player-card player-card-detail",
        )
        return [card]

    def render_error(self, message: str) -> List[Component]:
        """
        Build the failure view.

        Args:
            message: Failure message from the API client

        Returns:
            List[Component]: An alert and a button that reloads the roster
        """
        logger.warning(f"[RosterWidget] '{self.container_id}': {message}")

        return [
            dbc.Alert(
                [
                    html.P(message, className="mb-2"),
                    html.Button(
                        "Try again",
                        id=self.pattern_id(BACK_TO_ALL_BUTTON, "retry"),
                        className="btn btn-outline-danger btn-sm",
                        n_clicks=0,
                    ),
                ],
                id=self.component_id("error"),
                color="danger",
                class_name="roster-error",
            )
        ]

    def _build_card_header(self, player: Player) -> List[Component]:
        """Picture, name, id and status shared by both card kinds."""
        badge_color = "success" if player.status == STATUS_FIELD else "secondary"
        return [
            html.Img(src=player.image_url, alt=player.name, className="player-image"),
            html.H2(player.name, className="player-name"),
            html.P(f"ID: {player.id}", className="player-id"),
            dbc.Badge(player.status, color=badge_color, class_name="player-status"),
        ]

    def _build_list_card(self, player: Player) -> html.Div:
        player_id = player.id

        return html.Div(
            [
                *self._build_card_header(player),
                html.Div(
                    [
                        html.Button(
                            "See details",
                            id=self.pattern_id(SEE_DETAILS_BUTTON, player_id),
                            className="btn btn-primary btn-sm",
                            n_clicks=0,
                        ),
                        html.Button(
                            "Remove from roster",
                            id=self.pattern_id(REMOVE_PLAYER_BUTTON, player_id),
                            className="btn btn-outline-danger btn-sm",
                            n_clicks=0,
                        ),
                    ],
                    className="player-card-actions",
                ),
            ],
            id=self.component_id(f"player-{player_id}"),
            className="player-card",
        )

"""Roster and form callbacks."""
import logging
from typing import Any, Dict, List, Optional, Tuple

import dash
from dash import ALL, Input, Output, State, ctx
from dash.development.base_component import Component
from dash.exceptions import PreventUpdate

from puppy_bowl.components.widgets.new_player_form import NewPlayerFormWidget
from puppy_bowl.components.widgets.roster import (
    BACK_TO_ALL_BUTTON,
    REMOVE_PLAYER_BUTTON,
    SEE_DETAILS_BUTTON,
    RosterWidget,
)
from puppy_bowl.core.api_client import PuppyBowlClient

# Get module logger
logger = logging.getLogger(__name__)


def render_roster(client: PuppyBowlClient, roster: RosterWidget) -> List[Component]:
    """Fetch the full roster and render it, or render the failure."""
    result = client.fetch_all_players()
    if not result.ok:
        return roster.render_error(result.error)
    return roster.render_all_players(result.value)


def dispatch_roster_action(
    trigger: Dict[str, Any], client: PuppyBowlClient, roster: RosterWidget
) -> List[Component]:
    """
    Handle a click on one of the roster card buttons.

    Args:
        trigger: Pattern-matching id of the clicked button
        client: API client
        roster: Roster widget rendering the result

    Returns:
        List[Component]: New children of the roster container

    Raises:
        PreventUpdate: If the trigger isn't a roster button
    """
    action = trigger.get("type")
    player_id = trigger.get("index")
    logger.info(f"[RosterCallbacks] {action} (index={player_id})")

    if action == SEE_DETAILS_BUTTON:
        result = client.fetch_single_player(player_id)
        if not result.ok:
            return roster.render_error(result.error)
        return roster.render_single_player(result.value)

    if action == REMOVE_PLAYER_BUTTON:
        # Best-effort: a failed delete is already logged by the client
        client.remove_player(player_id)
        return render_roster(client, roster)

    if action == BACK_TO_ALL_BUTTON:
        return render_roster(client, roster)

    logger.warning(f"[RosterCallbacks] Unknown trigger: {trigger}")
    raise PreventUpdate


def submit_new_player(
    client: PuppyBowlClient,
    roster: RosterWidget,
    form: NewPlayerFormWidget,
    name: Optional[str],
    breed: Optional[str],
    image_url: Optional[str],
    status: Optional[str],
) -> Tuple[Any, ...]:
    """
    Handle a submit of the new player form.

    Returns:
        Tuple: (roster children, name, breed, image url, status). The inputs
        are reset after a successful create and kept as typed otherwise.
    """
    new_player = form.build_new_player(name, breed, image_url, status)
    result = client.add_new_player(new_player)

    if not result.ok:
        return (roster.render_error(result.error),) + (dash.no_update,) * 4

    return (render_roster(client, roster),) + form.reset_values()


def register_callbacks(
    app: dash.Dash,
    client: PuppyBowlClient,
    roster: RosterWidget,
    form: NewPlayerFormWidget,
):
    """Register roster and form callbacks."""

    @app.callback(
        Output(roster.container_id, "children"),
        Input({"type": SEE_DETAILS_BUTTON, "index": ALL}, "n_clicks"),
        Input({"type": REMOVE_PLAYER_BUTTON, "index": ALL}, "n_clicks"),
        Input({"type": BACK_TO_ALL_BUTTON, "index": ALL}, "n_clicks"),
        prevent_initial_call=True,
    )
    def on_roster_click(_details_clicks, _remove_clicks, _back_clicks):
        # Buttons inserted by a re-render fire with n_clicks == 0
        if not isinstance(ctx.triggered_id, dict) or not ctx.triggered[0].get("value"):
            raise PreventUpdate
        return dispatch_roster_action(dict(ctx.triggered_id), client, roster)

    @app.callback(
        [
            Output(roster.container_id, "children", allow_duplicate=True),
            *[Output(input_id, "value") for input_id in form.input_ids],
        ],
        [Input(form.container_id, "n_submit")],
        [State(input_id, "value") for input_id in form.input_ids],
        prevent_initial_call=True,
    )
    def on_new_player_submit(n_submit, name, breed, image_url, status):
        if not n_submit:
            raise PreventUpdate
        return submit_new_player(client, roster, form, name, breed, image_url, status)

    logger.info("✅ Roster callbacks registered")

"""Dash application and page bootstrap for the Puppy Bowl roster."""
from typing import Optional

import dash
import dash_bootstrap_components as dbc
from dash import html

from puppy_bowl.callbacks import register_all_callbacks
from puppy_bowl.components.widgets import NewPlayerFormWidget, RosterWidget, WidgetConfig
from puppy_bowl.core.api_client import PuppyBowlClient
from puppy_bowl.core.config import NEW_PLAYER_FORM_ID, ROSTER_CONTAINER_ID
from puppy_bowl.core.logging_config import logger

external_stylesheets = [dbc.themes.BOOTSTRAP]


# ----------------------
# Header
# ----------------------
header = html.Header(
    html.Div(
        [
            html.H1("Puppy Bowl", className="header-title"),
            html.P("Roster manager", className="header-subtitle text-muted"),
        ],
        className="header-inner",
    ),
    className="header mb-4",
)


def init(
    client: PuppyBowlClient, roster: RosterWidget, form: NewPlayerFormWidget
) -> html.Div:
    """
    Build the page for one load: fetch the roster, render it, set up the form.

    Args:
        client: API client
        roster: Roster widget owning the `<main>` container
        form: Form widget owning the `new-player-form` form

    Returns:
        html.Div: Complete page layout
    """
    result = client.fetch_all_players()
    if result.ok:
        children = roster.render_all_players(result.value)
    else:
        children = roster.render_error(result.error)

    new_player_form = form.render_new_player_form(form.render())

    return html.Div(
        [
            header,
            html.Section(
                [html.H2(form.config.title, className="h5"), new_player_form],
                className="new-player-section mb-4",
            ),
            roster.render(children),
        ],
        className="app-root container",
    )


def create_app(client: Optional[PuppyBowlClient] = None) -> dash.Dash:
    """
    Create the Dash application.

    The layout is a function, so every page load fetches the roster again.

    Args:
        client: API client (a configured one by default)

    Returns:
        dash.Dash: Application with layout and callbacks
    """
    logger.info("🚀 Initialization of application...")

    client = client or PuppyBowlClient()
    roster = RosterWidget(
        WidgetConfig(id=ROSTER_CONTAINER_ID, title="Roster", widget_type="roster")
    )
    form = NewPlayerFormWidget(
        WidgetConfig(id=NEW_PLAYER_FORM_ID, title="Add a new puppy", widget_type="form")
    )

    app = dash.Dash(
        __name__,
        title="Puppy Bowl",
        external_stylesheets=external_stylesheets,
        suppress_callback_exceptions=True,
    )

    def serve_layout():
        return init(client, roster, form)

    app.layout = serve_layout

    register_all_callbacks(app, client, roster, form)

    logger.info("✅ Application initialized successfully")
    return app

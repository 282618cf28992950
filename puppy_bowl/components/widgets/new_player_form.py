"""
New player form widget.

Fills the pre-existing `new-player-form` form with its inputs. The submit
handler lives in `puppy_bowl.callbacks.callbacks.submit_new_player`.
"""
import logging
from typing import Optional, Tuple

import dash_bootstrap_components as dbc

from puppy_bowl.core.models import STATUS_BENCH, STATUS_OPTIONS, NewPlayer

from .base import BaseWidget, WidgetConfig

# Get module logger
logger = logging.getLogger(__name__)

NAME_INPUT_ID = "player-name"
BREED_INPUT_ID = "player-breed"
IMAGE_URL_INPUT_ID = "player-image-url"
STATUS_SELECT_ID = "player-status"
SUBMIT_BUTTON_ID = "player-submit"


class NewPlayerFormWidget(BaseWidget):
    """
    Widget owning the "add a player" form.

    Only browser-native constraints apply: every text field is `required`
    and the image field is `type="url"`. The server validates the rest.
    """

    def __init__(self, config: WidgetConfig):
        """
        Initialize the form widget.

        Args:
            config: Widget configuration; `config.id` is the form id
        """
        super().__init__(config)
        self.input_ids = (NAME_INPUT_ID, BREED_INPUT_ID, IMAGE_URL_INPUT_ID, STATUS_SELECT_ID)
        logger.info(f"[NewPlayerFormWidget] Initialized '{config.id}'")

    def render(self) -> dbc.Form:
        """Render the empty form element."""
        return dbc.Form(
            [],
            id=self.container_id,
            class_name="new-player-form",
            prevent_default_on_submit=True,
        )

    def render_new_player_form(self, form: dbc.Form) -> dbc.Form:
        """
        Append the inputs and the submit button to `form`.

        The form is populated once; calling this again on a populated
        form leaves it unchanged.

        Args:
            form: The form element, usually from `render()`

        Returns:
            dbc.Form: The same form, populated
        """
        children = list(getattr(form, "children", None) or [])
        if children:
            logger.warning(
                f"[NewPlayerFormWidget] '{self.container_id}' already has "
                f"{len(children)} children, not adding inputs again"
            )
            return form

        children.extend(
            [
                dbc.Input(
                    id=NAME_INPUT_ID,
                    type="text",
                    placeholder="Puppy Name",
                    required=True,
                    value="",
                    class_name="mb-2",
                ),
                dbc.Input(
                    id=BREED_INPUT_ID,
                    type="text",
                    placeholder="Breed",
                    required=True,
                    value="",
                    class_name="mb-2",
                ),
                dbc.Input(
                    id=IMAGE_URL_INPUT_ID,
                    type="url",
                    placeholder="Image URL",
                    required=True,
                    value="",
                    class_name="mb-2",
                ),
                dbc.Select(
                    id=STATUS_SELECT_ID,
                    options=STATUS_OPTIONS,
                    value=STATUS_BENCH,
                    class_name="mb-2",
                ),
                dbc.Button("Add Player", id=SUBMIT_BUTTON_ID, type="submit", color="primary"),
            ]
        )
        form.children = children

        logger.debug(f"[NewPlayerFormWidget] Populated '{self.container_id}'")
        return form

    @staticmethod
    def build_new_player(
        name: Optional[str],
        breed: Optional[str],
        image_url: Optional[str],
        status: Optional[str],
    ) -> NewPlayer:
        """Read the current input values into a create payload."""
        return NewPlayer(
            name=name or "",
            breed=breed or "",
            image_url=image_url or "",
            status=status or STATUS_BENCH,
        )

    @staticmethod
    def reset_values() -> Tuple[str, str, str, str]:
        """Values for (name, breed, image url, status) after a submit."""
        return "", "", "", STATUS_BENCH

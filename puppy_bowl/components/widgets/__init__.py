"""
Widget components package for the Puppy Bowl roster.

This package provides the roster (player cards) and new player form
widgets, both built on the `BaseWidget` interface.
"""
import logging

from .base import BaseWidget, WidgetConfig
from .new_player_form import NewPlayerFormWidget
from .roster import RosterWidget

# Get module logger
logger = logging.getLogger("puppy_bowl.widgets")


# Define what's available when using "from puppy_bowl.components.widgets import *"
__all__ = [
    # Base classes
    "BaseWidget",
    "WidgetConfig",
    # Widget implementations
    "RosterWidget",
    "NewPlayerFormWidget",
]

logger.debug(f"Available classes: {__all__}")

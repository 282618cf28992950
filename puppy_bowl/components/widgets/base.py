"""
Base widget classes and configuration models.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Union

from dash.development.base_component import Component

# Get module logger
logger = logging.getLogger(__name__)


@dataclass
class WidgetConfig:
    """
    Configuration model for a page widget.

    Attributes:
        id: Id of the component the widget renders into
        title: Display title for the widget
        widget_type: Type of widget ('roster', 'form', ...)
    """

    id: str
    title: str
    widget_type: str


class BaseWidget(ABC):
    """
    Abstract base class for all page widgets.

    A widget owns one container component, identified by `config.id`, and
    knows how to build the components that go inside it.
    """

    def __init__(self, config: WidgetConfig):
        """
        Initialize the widget with configuration.

        Args:
            config: Widget configuration object
        """
        self.config = config
        logger.debug(f"Initialized BaseWidget: id='{config.id}'")

    @property
    def container_id(self) -> str:
        return self.config.id

    def component_id(self, suffix: str) -> str:
        """Id for a child component, namespaced by the widget id."""
        return f"{self.config.id}-{suffix}"

    @staticmethod
    def pattern_id(component_type: str, index: Union[int, str]) -> Dict[str, Any]:
        """
        Pattern-matching id for one of several similar components.

        Args:
            component_type: Kind of component (e.g. a button role)
            index: Identifier of the item the component belongs to
        """
        return {"type": component_type, "index": index}

    @abstractmethod
    def render(self) -> Component:
        """
        Render the widget container as a Dash component.

        Returns:
            Component: Container ready to be placed in the page layout
        """
        pass

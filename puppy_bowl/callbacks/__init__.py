"""Registration of all callbacks."""
import logging

# Get module logger
logger = logging.getLogger(__name__)


def register_all_callbacks(app, client, roster, form):
    """Register all callbacks from different modules."""

    # Import and registration of each module
    from . import callbacks

    # Registration
    callbacks.register_callbacks(app, client, roster, form)

    logger.info("✅ All callbacks registered successfully")

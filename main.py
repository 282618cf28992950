"""Web application entry point for the Puppy Bowl roster."""
from puppy_bowl.app import create_app
from puppy_bowl.core.config import settings

app = create_app()
server = app.server


# Run
if __name__ == "__main__":
    app.run(
        debug=settings.debug,
        host=settings.host,
        port=settings.port,
        dev_tools_ui=settings.debug,
        dev_tools_props_check=settings.debug,
    )

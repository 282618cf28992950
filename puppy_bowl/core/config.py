"""
Application settings.

Settings are read from the YAML file shipped next to the package
(`puppy_bowl/config.yaml`) and can be overridden from the environment:

- PUPPY_BOWL_CONFIG: alternate YAML file
- PUPPY_BOWL_COHORT / PUPPY_BOWL_API_BASE / PUPPY_BOWL_TIMEOUT: API access
- HOST / PORT / DEBUG: Dash server
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

# Get module logger
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.yaml"

DEFAULT_API_BASE = "https://fsa-puppy-bowl.herokuapp.com/api"
DEFAULT_COHORT = "2109-UNF-HY-WEB-PT"

# Component ids shared by the layout, the widgets and the callbacks
ROSTER_CONTAINER_ID = "roster"
NEW_PLAYER_FORM_ID = "new-player-form"


@dataclass(frozen=True)
class Settings:
    """
    Resolved application settings.

    Attributes:
        api_base: Root of the Puppy Bowl API (without cohort)
        cohort: Cohort name substituted into the API URL
        timeout: Request timeout in seconds, None to wait indefinitely
        host: Interface the Dash server listens on
        port: Port the Dash server listens on
        debug: Dash debug mode
    """

    api_base: str = DEFAULT_API_BASE
    cohort: str = DEFAULT_COHORT
    timeout: Optional[float] = None
    host: str = "0.0.0.0"
    port: int = 8050
    debug: bool = False

    @property
    def api_url(self) -> str:
        """Cohort-scoped base URL for every API call."""
        return build_api_url(self.api_base, self.cohort)


def build_api_url(api_base: str, cohort: str) -> str:
    return f"{api_base.rstrip('/')}/{cohort.strip('/')}"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def _as_timeout(value: Any) -> Optional[float]:
    if value is None or str(value).strip() == "":
        return None
    return float(value)


def _load_yaml(path: Path) -> Dict[str, Any]:
    """
    Load the settings file.

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        ValueError: If the file isn't a YAML mapping
    """
    logger.info(f"[Config] Loading configuration from: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.error(f"[Config] Configuration file not found: {path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"[Config] Invalid YAML in configuration: {e}")
        raise

    if not isinstance(config, dict):
        raise ValueError(f"Configuration in {path} must be a mapping")

    return config


def load_settings(
    config_path: Optional[str] = None, environ: Optional[Mapping[str, str]] = None
) -> Settings:
    """
    Build settings from the YAML file and environment overrides.

    Args:
        config_path: Path to the YAML file (defaults to PUPPY_BOWL_CONFIG,
            then to the packaged config.yaml)
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Settings: Resolved settings
    """
    env = os.environ if environ is None else environ
    path = Path(config_path or env.get("PUPPY_BOWL_CONFIG") or DEFAULT_CONFIG_PATH)

    config = _load_yaml(path)
    api = config.get("api") or {}
    server = config.get("server") or {}

    settings = Settings(
        api_base=env.get("PUPPY_BOWL_API_BASE") or api.get("base_url") or DEFAULT_API_BASE,
        cohort=env.get("PUPPY_BOWL_COHORT") or api.get("cohort") or DEFAULT_COHORT,
        timeout=_as_timeout(env.get("PUPPY_BOWL_TIMEOUT", api.get("timeout"))),
        host=env.get("HOST") or server.get("host") or "0.0.0.0",
        port=int(env.get("PORT") or server.get("port") or 8050),
        debug=_as_bool(env.get("DEBUG", server.get("debug", False))),
    )

    logger.info(f"[Config] API URL: {settings.api_url}")
    return settings


settings = load_settings()

"""
Client for the Puppy Bowl REST API.

Each operation issues exactly one HTTP request, unwraps the JSON envelope
and returns an `ApiResult`. Failures are logged where they happen and come
back as `ApiResult.failure(...)`; nothing is raised to the caller and
nothing is retried.
"""
import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar

import requests

from .config import settings
from .models import NewPlayer, Player

# Get module logger
logger = logging.getLogger(__name__)

T = TypeVar("T")


class PuppyBowlApiError(Exception):
    """Raised internally when a response doesn't match the expected envelope."""


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """
    Outcome of one API call.

    Exactly one of `value` / `error` is meaningful: check `ok` first.
    """

    value: Optional[T] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "ApiResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ApiResult[T]":
        return cls(error=error)


def _unwrap(payload: Any, key: str) -> Any:
    """
    Extract `payload["data"][key]` from an API envelope.

    Raises:
        PuppyBowlApiError: If the envelope reports an error or lacks the key
    """
    if not isinstance(payload, dict):
        raise PuppyBowlApiError(f"Unexpected response body: {payload!r}")

    if payload.get("success") is False:
        error = payload.get("error") or {}
        message = error.get("message") if isinstance(error, dict) else str(error)
        raise PuppyBowlApiError(message or "API reported a failure")

    data = payload.get("data")
    if not isinstance(data, dict) or key not in data:
        raise PuppyBowlApiError(f"Response is missing 'data.{key}'")

    return data[key]


class PuppyBowlClient:
    """
    Thin wrapper around the cohort-scoped Puppy Bowl endpoints.

    Endpoints:
    - GET    /players       -> {data: {players: [...]}}
    - GET    /players/{id}  -> {data: {player: {...}}}
    - POST   /players       -> {data: {newPlayer: {...}}}
    - DELETE /players/{id}
    """

    # Errors converted into failure results
    HANDLED_ERRORS = (requests.RequestException, ValueError, PuppyBowlApiError)

    def __init__(
        self,
        api_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize the client.

        Args:
            api_url: Cohort-scoped base URL (defaults to the configured one)
            session: HTTP session to use (a new one by default)
            timeout: Request timeout in seconds (defaults to the configured
                value, which is no timeout)
        """
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else settings.timeout

        logger.info(f"[PuppyBowlClient] Initialized for {self.api_url}")

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.api_url}/{path.lstrip('/')}"
        logger.debug(f"[PuppyBowlClient] {method} {url}")

        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        response.raise_for_status()
        return response

    def fetch_all_players(self) -> ApiResult[List[Player]]:
        """
        Fetch the full roster.

        Returns:
            ApiResult[List[Player]]: Every player (possibly none) on success
        """
        try:
            response = self._request("GET", "players")
            records = _unwrap(response.json(), "players")
            if not isinstance(records, list):
                raise PuppyBowlApiError("'data.players' is not a list")
            players = [Player.from_dict(record) for record in records]
        except self.HANDLED_ERRORS as e:
            logger.error(f"Uh oh, trouble fetching players! {e}")
            return ApiResult.failure(f"Trouble fetching players: {e}")

        logger.info(f"[PuppyBowlClient] Fetched {len(players)} players")
        return ApiResult.success(players)

    def fetch_single_player(self, player_id: int) -> ApiResult[Player]:
        """
        Fetch one player by id.

        Args:
            player_id: Player identifier

        Returns:
            ApiResult[Player]: The player on success
        """
        try:
            response = self._request("GET", f"players/{player_id}")
            player = Player.from_dict(_unwrap(response.json(), "player"))
        except self.HANDLED_ERRORS as e:
            logger.error(f"Oh no, trouble fetching player #{player_id}! {e}")
            return ApiResult.failure(f"Trouble fetching player #{player_id}: {e}")

        return ApiResult.success(player)

    def add_new_player(self, new_player: NewPlayer) -> ApiResult[Player]:
        """
        Create a player.

        Args:
            new_player: Fields of the player to add; the server validates them

        Returns:
            ApiResult[Player]: The player as created by the server
        """
        try:
            response = self._request("POST", "players", json=new_player.to_payload())
            player = Player.from_dict(_unwrap(response.json(), "newPlayer"))
        except self.HANDLED_ERRORS as e:
            logger.error(f"Oops, something went wrong with adding that player! {e}")
            return ApiResult.failure(f"Could not add {new_player.name!r}: {e}")

        logger.info(f"[PuppyBowlClient] Added player #{player.id} ({player.name})")
        return ApiResult.success(player)

    def remove_player(self, player_id: int) -> ApiResult[None]:
        """
        Delete a player by id. The response body is not consumed.

        Args:
            player_id: Player identifier
        """
        try:
            self._request("DELETE", f"players/{player_id}")
        except requests.RequestException as e:
            logger.error(f"Whoops, trouble removing player #{player_id} from the roster! {e}")
            return ApiResult.failure(f"Trouble removing player #{player_id}: {e}")

        logger.info(f"[PuppyBowlClient] Removed player #{player_id}")
        return ApiResult.success()

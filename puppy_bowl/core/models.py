"""
Roster data model.

Records are owned by the Puppy Bowl API; the classes here are transient,
immutable copies of what the server returned.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

UNASSIGNED_TEAM = "Unassigned"

STATUS_BENCH = "bench"
STATUS_FIELD = "field"

STATUS_OPTIONS: List[Dict[str, str]] = [
    {"label": "Bench", "value": STATUS_BENCH},
    {"label": "Field", "value": STATUS_FIELD},
]


def _require(data: Dict[str, Any], key: str, kind: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError):
        raise ValueError(f"{kind} record is missing '{key}': {data!r}") from None


@dataclass(frozen=True)
class Team:
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Team":
        try:
            team_id = int(_require(data, "id", "Team"))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Team record has an invalid id: {e}") from None

        return cls(id=team_id, name=_require(data, "name", "Team"))


@dataclass(frozen=True)
class Player:
    """
    A roster entry as returned by the API.

    Attributes:
        id: Server-assigned identifier
        name: Puppy name
        breed: Puppy breed
        image_url: Picture URL (`imageUrl` on the wire)
        status: Either "bench" or "field"
        team: Linked team, if any
        team_id: Raw team foreign key (`teamId`)
        cohort_id: Owning cohort (`cohortId`)
        created_at: Server timestamp (`createdAt`)
        updated_at: Server timestamp (`updatedAt`)
    """

    id: int
    name: str
    breed: str
    image_url: str
    status: str = STATUS_BENCH
    team: Optional[Team] = None
    team_id: Optional[int] = None
    cohort_id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def team_name(self) -> str:
        """Name of the linked team, or "Unassigned" when there is none."""
        return self.team.name if self.team else UNASSIGNED_TEAM

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """
        Build a Player from an API record.

        Raises:
            ValueError: If a required field is missing or the id isn't numeric
        """
        team_data = data.get("team") if isinstance(data, dict) else None
        try:
            player_id = int(_require(data, "id", "Player"))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Player record has an invalid id: {e}") from None

        return cls(
            id=player_id,
            name=_require(data, "name", "Player"),
            breed=_require(data, "breed", "Player"),
            image_url=data.get("imageUrl") or "",
            status=data.get("status") or STATUS_BENCH,
            team=Team.from_dict(team_data) if team_data else None,
            team_id=data.get("teamId"),
            cohort_id=data.get("cohortId"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )


@dataclass(frozen=True)
class NewPlayer:
    """Payload for creating a player. The server validates it."""

    name: str
    breed: str
    image_url: str
    status: str = STATUS_BENCH

    def to_payload(self) -> Dict[str, str]:
        return {
            "name": self.name,
            "breed": self.breed,
            "imageUrl": self.image_url,
            "status": self.status,
        }

"""
Core package: configuration, logging, data model and API client.
"""
from .api_client import ApiResult, PuppyBowlApiError, PuppyBowlClient
from .models import NewPlayer, Player, Team

__all__ = [
    "ApiResult",
    "PuppyBowlApiError",
    "PuppyBowlClient",
    "NewPlayer",
    "Player",
    "Team",
]

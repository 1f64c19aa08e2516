"""Account repository implementation."""
import logging

from domain.entities import PlayerIdentity
from domain.exceptions import InvalidRequestError
from domain.interfaces import IAccountRepository, IRiotAPIClient
from .payload import require

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """Resolves Riot IDs through the account-v1 API."""

    def __init__(self, api_client: IRiotAPIClient):
        self.api_client = api_client

    async def resolve_identity(self, game_name: str, tag_line: str) -> PlayerIdentity:
        """
        Resolve a Riot ID to its PUUID.

        Args:
            game_name: Riot ID name part, any characters (encoded by the client)
            tag_line: Riot ID tag part, without '#'

        Returns:
            PlayerIdentity with the canonical capitalisation from upstream

        Raises:
            InvalidRequestError: blank name or tag
            NotFoundError: no such Riot ID
        """
        game_name = (game_name or "").strip()
        tag_line = (tag_line or "").strip().lstrip("#")
        if not game_name or not tag_line:
            raise InvalidRequestError("Both game name and tag line are required")

        data = await self.api_client.get_account_by_riot_id(game_name, tag_line)
        identity = PlayerIdentity(
            puuid=str(require(data, "puuid", "account")),
            game_name=str(data.get("gameName") or game_name),
            tag_line=str(data.get("tagLine") or tag_line),
        )
        logger.info(f"Resolved {identity.riot_id} -> {identity.puuid[:8]}")
        return identity

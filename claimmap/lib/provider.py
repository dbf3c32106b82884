import logging
from typing import Any, Optional

from .claims import UserClaims, map_user_claims
from .config import ProviderConfig
from .userinfo_client import UserInfoClient

_LOGGER = logging.getLogger(__name__)


class GenericProvider:
    """Identity provider that reads claims from any userinfo endpoint."""

    def __init__(self, config: ProviderConfig, client: Optional[UserInfoClient] = None):
        self.config = config
        self.client = client or UserInfoClient(
            timeout=config.timeout,
            max_retries=config.max_retries,
            backoff=config.backoff,
        )

    def claims_from_payload(self, payload: Any) -> UserClaims:
        return map_user_claims(payload, self.config.field_mapping)

    async def fetch_claims(self, access_token: str) -> UserClaims:
        payload = await self.client.fetch(self.config.userinfo_url, access_token)
        claims = self.claims_from_payload(payload)
        _LOGGER.info("Resolved claims for subject %s", claims.subject)
        return claims

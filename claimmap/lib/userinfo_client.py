import asyncio
import logging
from typing import Any, Dict

import httpx

from .errors import UserInfoError

_LOGGER = logging.getLogger(__name__)


class UserInfoClient:
    def __init__(self, timeout: float = 10, max_retries: int = 3, backoff: float = 0.5):
        self.timeout = timeout
        self.max_retries = max_retries
        self.backoff = backoff

    def _auth_headers(self, access_token: str) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if access_token:
            headers["Authorization"] = f"Bearer {access_token}"
        return headers

    def _decode(self, resp: httpx.Response) -> Dict[str, Any]:
        try:
            data = resp.json()
        except ValueError as e:
            raise UserInfoError(f"userinfo response from {resp.url} is not JSON") from e
        if not isinstance(data, dict):
            raise UserInfoError(
                f"userinfo response from {resp.url} is a {type(data).__name__}, expected an object"
            )
        return data

    async def fetch(self, url: str, access_token: str) -> Dict[str, Any]:
        headers = self._auth_headers(access_token)
        attempt = 0
        while True:
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.request(method="GET", url=url, headers=headers)
                resp.raise_for_status()
                break
            except httpx.HTTPError as e:
                # a rejected token will not get better by asking again
                if isinstance(e, httpx.HTTPStatusError) and e.response.status_code < 500:
                    raise
                attempt += 1
                if attempt > self.max_retries:
                    raise
                _LOGGER.warning(
                    "Userinfo request to %s failed (attempt %d/%d): %s",
                    url,
                    attempt,
                    self.max_retries,
                    e,
                )
                await asyncio.sleep(self.backoff * attempt)
        return self._decode(resp)

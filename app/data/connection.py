from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import httpx

from config import AppConfig
from data.models import User, UserCandidate


logger = logging.getLogger(__name__)


class RemoteError(RuntimeError):
    """Base for every failure of the remote users service."""


class TransportError(RemoteError):
    pass


class HttpStatusError(RemoteError):
    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(f"HTTP {status}")
        self.status = status
        self.body = body


class MalformedResponseError(RemoteError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


@dataclass(frozen=True)
class ApiClient:
    cfg: AppConfig
    transport: Optional[httpx.AsyncBaseTransport] = None

    async def _request(self, method: str, json: Optional[dict[str, Any]] = None) -> Any:
        """
        Sends one request to the users resource and returns the decoded JSON body.
        Every failure surfaces as a RemoteError subclass.
        """
        url = self.cfg.users_url
        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.cfg.api_timeout_s) as client:
                response = await client.request(method, url, json=json)
        except httpx.HTTPError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            body = response.text
            logger.debug("%s %s -> %s %s", method, url, response.status_code, body[:200])
            raise HttpStatusError(response.status_code, body)

        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError("response body is not valid JSON") from e

    async def fetch_users(self) -> list[User]:
        data = await self._request("GET")
        if not isinstance(data, list):
            raise MalformedResponseError(f"response is not a list (got {type(data).__name__})")
        try:
            return [User.from_dict(item) for item in data]
        except ValueError as e:
            raise MalformedResponseError(str(e)) from e

    async def create_user(self, candidate: UserCandidate) -> User:
        # httpx sets Content-Type: application/json for json=
        data = await self._request("POST", json=candidate.to_payload())
        try:
            return User.from_dict(data)
        except ValueError as e:
            raise MalformedResponseError(str(e)) from e


def get_api_client(cfg: AppConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> ApiClient:
    return ApiClient(cfg=cfg, transport=transport)

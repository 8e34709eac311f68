from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from config import AppConfig
from data.connection import ApiClient, get_api_client
from data.errors import classify
from data.mock_data import MockDataSource, get_mock_source
from data.models import User, UserCandidate


logger = logging.getLogger(__name__)

T = TypeVar("T")


class Provenance(str, Enum):
    REMOTE = "remote"
    MOCK = "mock"


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    payload: T
    provenance: Provenance
    message: Optional[str] = None  # set only for fallback results

    def __post_init__(self) -> None:
        if self.provenance is Provenance.MOCK and not self.message:
            raise ValueError("fallback results must carry a message")
        if self.provenance is Provenance.REMOTE and self.message is not None:
            raise ValueError("remote results must not carry a message")

    @property
    def is_fallback(self) -> bool:
        return self.provenance is Provenance.MOCK


async def _fallback(
    action: str,
    fn_remote: Callable[[], Awaitable[T]],
    fn_mock: Callable[[], Awaitable[T]],
    note: str,
) -> FetchResult[T]:
    try:
        payload = await fn_remote()
    except Exception as e:
        classified = classify(e)
        logger.warning(
            "Remote %s failed (%s: %s); falling back to mock data",
            action,
            classified.category.value,
            classified.detail,
        )
        mock_payload = await fn_mock()
        return FetchResult(mock_payload, Provenance.MOCK, f"{classified.message} — {note}")
    return FetchResult(payload, Provenance.REMOTE)


async def get_users(
    cfg: AppConfig,
    *,
    client: Optional[ApiClient] = None,
    mock: Optional[MockDataSource] = None,
) -> FetchResult[list[User]]:
    client = client or get_api_client(cfg)
    mock = mock or get_mock_source()
    return await _fallback(
        "list users",
        fn_remote=client.fetch_users,
        fn_mock=mock.list_users,
        note="showing fallback data",
    )


async def create_user(
    cfg: AppConfig,
    candidate: UserCandidate,
    *,
    client: Optional[ApiClient] = None,
    mock: Optional[MockDataSource] = None,
) -> FetchResult[User]:
    """Expects a validated candidate; see UserCandidate.from_form."""
    client = client or get_api_client(cfg)
    mock = mock or get_mock_source()
    return await _fallback(
        "create user",
        fn_remote=lambda: client.create_user(candidate),
        fn_mock=lambda: mock.create_user(candidate),
        note="using fallback data",
    )

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest
from faker import Faker

from config import AppConfig
from data.connection import ApiClient
from data.mock_data import MockDataSource


BASE_URL = "http://users.test"


class RecordingSleeper:
    """Async sleep replacement that records requested delays instead of waiting."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)

    @property
    def total(self) -> float:
        return sum(self.calls)


def json_response(status: int, body: Any) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=json.dumps(body).encode("utf-8"), headers={"content-type": "application/json"})

    return handler


def raw_response(status: int, content: bytes) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, content=content)

    return handler


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def cfg() -> AppConfig:
    return AppConfig(api_base_url=BASE_URL, api_timeout_s=None, log_level="INFO")


@pytest.fixture
def make_client(cfg: AppConfig) -> Callable[[Callable[[httpx.Request], Any]], ApiClient]:
    def _make(handler: Callable[[httpx.Request], Any]) -> ApiClient:
        return ApiClient(cfg=cfg, transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def sleeper() -> RecordingSleeper:
    return RecordingSleeper()


@pytest.fixture
def mock_source(sleeper: RecordingSleeper) -> MockDataSource:
    return MockDataSource(sleep=sleeper)


@pytest.fixture
def fake() -> Faker:
    Faker.seed(1234)
    return Faker()

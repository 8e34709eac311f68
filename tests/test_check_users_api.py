from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

import httpx
import pytest

import config
import data.service
from conftest import BASE_URL, json_response, refuse_connection
from data.connection import ApiClient
from data.mock_data import MockDataSource


SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "check_users_api.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("check_users_api", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def run_script(monkeypatch, sleeper):
    monkeypatch.setattr(config, "load_dotenv", lambda **kwargs: False)
    monkeypatch.setattr(config, "configure_logging", lambda cfg: None)
    for name in ("USERS_API_BASE_URL", "USERS_API_TIMEOUT_S", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(data.service, "get_mock_source", lambda: MockDataSource(sleep=sleeper))

    seen_cfgs = []

    def _run(handler, *args: str) -> int:
        def fake_factory(cfg, transport=None):
            seen_cfgs.append(cfg)
            return ApiClient(cfg=cfg, transport=httpx.MockTransport(handler))

        monkeypatch.setattr(data.service, "get_api_client", fake_factory)
        monkeypatch.setattr(sys, "argv", ["check_users_api.py", "--base-url", BASE_URL, *args])
        module = _load_script()
        monkeypatch.setattr(module, "configure_logging", lambda cfg: None)
        return module.main()

    _run.cfgs = seen_cfgs
    return _run


def test_fallback_prints_source_and_message_and_exits_1(run_script, capsys):
    code = run_script(refuse_connection)

    out = capsys.readouterr().out.splitlines()
    assert code == 1
    assert out[0] == f"source: mock ({BASE_URL}/users)"
    assert out[1] == "message: an error occurred — showing fallback data"
    assert "pepe" in out[2] and "pepe@pepe.com" in out[2]
    assert "maria" in out[3] and "maria@maria.com" in out[3]
    assert len(out) == 4


def test_remote_success_prints_users_and_exits_0(run_script, capsys):
    code = run_script(json_response(200, [{"id": 9, "name": "lu", "email": "lu@x.com"}]))

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0] == f"source: remote ({BASE_URL}/users)"
    assert not any(line.startswith("message:") for line in out)
    assert out[1].split() == ["9", "lu", "lu@x.com"]


def test_timeout_flag_overrides_config(run_script, capsys):
    run_script(json_response(200, []), "--timeout", "2.5")

    assert run_script.cfgs[0].api_timeout_s == 2.5
    assert run_script.cfgs[0].api_base_url == BASE_URL

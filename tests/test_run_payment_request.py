import importlib.util
import json
from pathlib import Path
from types import SimpleNamespace

import pytest

from btcpay.clients.mocks.transport import MockTransport

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "run_payment_request.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("run_payment_request", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class ScopedMockTransport(MockTransport):
    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None


@pytest.fixture
def script():
    return _load_script()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for name in ("BTCPAY_URL", "BTCPAY_STORE_ID", "BTCPAY_API_KEY", "BTCPAY_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "btcpay.yml"
    path.write_text('base_url: "https://btcpay.example.com"\nstore_id: "store-1"\napi_key: "k"\n', encoding="utf-8")
    return path


@pytest.fixture
def transport(script, monkeypatch):
    stub = ScopedMockTransport()
    monkeypatch.setattr(script, "HTTPTransport", SimpleNamespace(from_config=lambda config: stub))
    return stub


def test_create_prints_flat_json(script, transport, config_file, payment_request_body, capsys):
    transport.queue(200, payment_request_body)

    code = script.main(
        ["--config", str(config_file), "create", "--amount", "10.5", "--currency", "USD", "--title", "Invoice 1", "--expiry-days", "7"]
    )

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["id"] == "abc"
    assert out["title"] == "Invoice 1"
    assert "request" not in out

    sent = transport.calls[0].json()
    assert transport.calls[0].method == "POST"
    assert sent["amount"] == 10.5
    assert "expiryDate" in sent
    assert "description" not in sent


def test_get_404_returns_1(script, transport, config_file, capsys):
    transport.queue(404, "")

    code = script.main(["--config", str(config_file), "get", "missing"])

    assert code == 1
    assert transport.calls[0].path == "payment-requests/missing"
    assert "Error:" in capsys.readouterr().err


def test_missing_config_file_returns_1(script, transport, tmp_path, capsys):
    code = script.main(["--config", str(tmp_path / "absent.yml"), "get", "abc"])

    assert code == 1
    assert "not found" in capsys.readouterr().err
    assert transport.calls == []

import pytest

import main
from conftest import FakeToolClient


class _FakeBridge:
    """Stands in for FastMCPToolClient so the CLI runs without a server."""

    last_transport = None

    def __init__(self, client):
        self._client = client

    @classmethod
    def for_transport(cls, transport, **kwargs):
        cls.last_transport = transport
        return cls(FakeToolClient())

    async def __aenter__(self):
        return self._client

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None


@pytest.fixture
def fake_bridge(monkeypatch):
    monkeypatch.setattr(main, "FastMCPToolClient", _FakeBridge)
    monkeypatch.delenv("MCP_ADAPTER_TOOL_TIMEOUT", raising=False)
    return _FakeBridge


def test_list_prints_every_tool(fake_bridge, capsys):
    assert main.main(["server.py", "list"]) == 0

    out = capsys.readouterr().out
    assert fake_bridge.last_transport == "server.py"
    assert "fetch_url" in out
    assert 'fetch content from a URL\n The input schema is: {"url":{"type":"string"}}' in out
    assert "2 tool(s)" in out


def test_call_prints_the_tool_output(fake_bridge, capsys):
    assert main.main(["server.py", "call", "fetch_url", '{"url": "https://example.com"}']) == 0

    assert capsys.readouterr().out.strip() == "fetch_url ok"


def test_call_unknown_tool(fake_bridge, capsys):
    assert main.main(["server.py", "call", "missing"]) == 2

    assert "unknown tool 'missing'" in capsys.readouterr().err


def test_parser_requires_a_command():
    with pytest.raises(SystemExit):
        main.build_parser().parse_args(["server.py"])

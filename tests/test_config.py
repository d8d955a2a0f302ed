import os

import pytest

from mcp_adk_adapter.core.config import AdapterConfig
from mcp_adk_adapter.core.errors import ConfigError


def test_defaults():
    config = AdapterConfig()
    assert config.tool_timeout == 30.0
    assert config.handshake_timeout == 30.0


def test_overrides_apply_in_order_last_wins():
    config = AdapterConfig().with_tool_timeout(5).with_overrides(tool_timeout=12.5)
    assert config.tool_timeout == 12.5
    assert config.handshake_timeout == 30.0


def test_overrides_return_a_new_config():
    base = AdapterConfig()
    base.with_tool_timeout(1)
    assert base.tool_timeout == 30.0


def test_unknown_option_is_rejected():
    with pytest.raises(ConfigError, match="retries"):
        AdapterConfig().with_overrides(retries=3)


@pytest.mark.parametrize("value", [0, -1, "10", None, True])
def test_invalid_timeouts_are_rejected(value):
    with pytest.raises(ConfigError):
        AdapterConfig(tool_timeout=value)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        AdapterConfig(handshake_timeout=0)


def test_from_env_reads_prefixed_variables():
    config = AdapterConfig.from_env(
        {"MCP_ADAPTER_TOOL_TIMEOUT": "45", "MCP_ADAPTER_HANDSHAKE_TIMEOUT": " "},
        dotenv=False,
    )
    assert config.tool_timeout == 45.0
    assert config.handshake_timeout == 30.0


def test_from_env_rejects_garbage():
    with pytest.raises(ConfigError, match="MCP_ADAPTER_TOOL_TIMEOUT"):
        AdapterConfig.from_env({"MCP_ADAPTER_TOOL_TIMEOUT": "soon"}, dotenv=False)


def test_from_env_loads_dotenv_file(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("MCP_ADAPTER_TOOL_TIMEOUT=7\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("MCP_ADAPTER_TOOL_TIMEOUT", raising=False)
    try:
        assert AdapterConfig.from_env().tool_timeout == 7.0
    finally:
        os.environ.pop("MCP_ADAPTER_TOOL_TIMEOUT", None)

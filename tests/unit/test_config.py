"""Unit tests for transport configuration."""

from __future__ import annotations

import pytest

from ethrpc.config import DEFAULT_URL, TransportConfig


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("ETHRPC_URL", "ETHRPC_TIMEOUT", "ETHRPC_JSONRPC_TAG"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestTransportConfig:
    """Test config defaults and environment loading."""

    def test_defaults(self):
        """A bare config targets a local node with the version tag."""
        config = TransportConfig()

        assert config.url == DEFAULT_URL
        assert config.timeout == 30.0
        assert config.headers == {}
        assert config.jsonrpc_version == "2.0"

    def test_from_env_defaults(self, clean_env: pytest.MonkeyPatch):
        """Without variables the defaults apply."""
        config = TransportConfig.from_env()

        assert config.url == DEFAULT_URL
        assert config.jsonrpc_version == "2.0"

    def test_from_env_reads_variables(self, clean_env: pytest.MonkeyPatch):
        """URL and timeout come from the environment."""
        clean_env.setenv("ETHRPC_URL", "http://node:8545")
        clean_env.setenv("ETHRPC_TIMEOUT", "2.5")

        config = TransportConfig.from_env()

        assert config.url == "http://node:8545"
        assert config.timeout == 2.5

    @pytest.mark.parametrize("value", ["0", "false", "No", " off "])
    def test_from_env_can_drop_version_tag(self, clean_env: pytest.MonkeyPatch, value: str):
        """False-like ETHRPC_JSONRPC_TAG values omit the tag."""
        clean_env.setenv("ETHRPC_JSONRPC_TAG", value)

        assert TransportConfig.from_env().jsonrpc_version is None

    def test_from_env_keeps_tag_for_true_values(self, clean_env: pytest.MonkeyPatch):
        """Any other value keeps the tag."""
        clean_env.setenv("ETHRPC_JSONRPC_TAG", "1")

        assert TransportConfig.from_env().jsonrpc_version == "2.0"

    def test_overrides_win(self, clean_env: pytest.MonkeyPatch):
        """Keyword overrides take precedence over the environment."""
        clean_env.setenv("ETHRPC_URL", "http://env:8545")

        config = TransportConfig.from_env(url="http://override:8545", timeout=1.0)

        assert config.url == "http://override:8545"
        assert config.timeout == 1.0

    def test_unknown_override_rejected(self, clean_env: pytest.MonkeyPatch):
        """Typos in override names fail loudly."""
        with pytest.raises(TypeError, match="Unknown"):
            TransportConfig.from_env(ulr="http://x")

"""Tests for ledger configuration."""

import os
from unittest.mock import patch

import pytest

from vouchgraph.config import (
    MAINNET_URL,
    TESTNET_URL,
    LedgerConfig,
    get_ledger_config,
    set_ledger_config,
)


class TestLedgerConfig:
    """Tests for LedgerConfig class."""

    def test_default_values(self):
        config = LedgerConfig()

        assert config.network == "mainnet"
        assert config.url is None
        assert config.connect_timeout == 10.0
        assert config.read_timeout == 30.0
        assert config.base_url == MAINNET_URL

    def test_testnet(self):
        assert LedgerConfig(network="testnet").base_url == TESTNET_URL

    def test_explicit_url_wins(self):
        config = LedgerConfig(network="testnet", url="http://localhost:8080/v1/")

        assert config.base_url == "http://localhost:8080/v1"

    def test_unknown_network(self):
        with pytest.raises(ValueError, match="Unknown network"):
            LedgerConfig(network="devnet").base_url

    @patch.dict(os.environ, {}, clear=True)
    def test_from_env_defaults(self):
        config = LedgerConfig.from_env()

        assert config.network == "mainnet"
        assert config.url is None
        assert config.read_timeout == 30.0

    @patch.dict(os.environ, {
        "VOUCHGRAPH_NETWORK": "testnet",
        "VOUCHGRAPH_URL": "http://node:8080/v1",
        "VOUCHGRAPH_CONNECT_TIMEOUT": "2.5",
        "VOUCHGRAPH_READ_TIMEOUT": "90",
    }, clear=True)
    def test_from_env_with_values(self):
        config = LedgerConfig.from_env()

        assert config.network == "testnet"
        assert config.base_url == "http://node:8080/v1"
        assert config.connect_timeout == 2.5
        assert config.read_timeout == 90.0

    @patch.dict(os.environ, {"VOUCHGRAPH_URL": ""}, clear=True)
    def test_empty_url_ignored(self):
        assert LedgerConfig.from_env().url is None


class TestGlobalConfig:

    def teardown_method(self):
        set_ledger_config(None)

    def test_set_and_get(self):
        config = LedgerConfig(network="testnet")
        set_ledger_config(config)

        assert get_ledger_config() is config

    @patch.dict(os.environ, {"VOUCHGRAPH_NETWORK": "testnet"}, clear=True)
    def test_lazily_loaded_from_env(self):
        set_ledger_config(None)

        assert get_ledger_config().network == "testnet"

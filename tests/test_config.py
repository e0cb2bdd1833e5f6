import dataclasses
import os
from unittest.mock import patch

import pytest

from solscan_api.config import (
    DEFAULT_PRO_BASE_URL,
    DEFAULT_PUBLIC_BASE_URL,
    Config,
    load_config,
)


class TestConfig:
    def test_defaults(self):
        config = Config(api_key="k")
        assert config.pro_base_url == DEFAULT_PRO_BASE_URL
        assert config.public_base_url == DEFAULT_PUBLIC_BASE_URL
        assert config.request_timeout is None

    def test_base_urls_end_with_single_slash(self):
        config = Config(api_key="k", pro_base_url="https://x/v2.0", public_base_url="https://y//")
        assert config.pro_base_url == "https://x/v2.0/"
        assert config.public_base_url == "https://y/"

    def test_frozen(self):
        config = Config(api_key="k")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "other"


class TestLoadConfig:
    def test_requires_api_key(self):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValueError, match="SOLSCAN_API_KEY"):
                load_config()

    def test_defaults_from_minimal_env(self):
        with patch.dict(os.environ, {"SOLSCAN_API_KEY": "abc"}, clear=True):
            config = load_config()
        assert config == Config(api_key="abc")

    def test_overrides(self):
        env = {
            "SOLSCAN_API_KEY": "abc",
            "SOLSCAN_PRO_BASE_URL": "https://proxy.local/v2.0",
            "SOLSCAN_PUBLIC_BASE_URL": "https://proxy.local/public",
            "REQUEST_TIMEOUT": "12.5",
        }
        with patch.dict(os.environ, env, clear=True):
            config = load_config()

        assert config.pro_base_url == "https://proxy.local/v2.0/"
        assert config.public_base_url == "https://proxy.local/public/"
        assert config.request_timeout == 12.5

from unittest.mock import MagicMock

import pytest

from solscan_api import Config, SolscanAPI, SolscanClient

TEST_API_KEY = "test-api-key"
TEST_ACCOUNT_ADDRESS = "HYe4...WHd"
TEST_TOKEN_ADDRESS = "So11111111111111111111111111111111111111112"
USDC_ADDRESS = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
PRO = "https://pro-api.solscan.io/v2.0/"
HEADERS = {"token": TEST_API_KEY}


@pytest.fixture
def client():
    mock = MagicMock(spec=SolscanClient)
    mock.get.return_value = {"success": True, "data": {}}
    return mock


@pytest.fixture
def api(client):
    return SolscanAPI(config=Config(api_key=TEST_API_KEY), client=client)


def called_url(client) -> str:
    """URL passed to the (single) transport call."""
    client.get.assert_called_once()
    url, headers = client.get.call_args.args
    assert headers == HEADERS
    return url

import json
from unittest.mock import patch

import pytest

from conftest import PRO, called_url
from solscan_api import RequestFailed, cli


@pytest.fixture
def from_env(api):
    with patch.object(cli.SolscanAPI, "from_env", return_value=api) as mock:
        yield mock


class TestCli:
    def test_account_detail_prints_json(self, from_env, client, capsys):
        client.get.return_value = {"success": True, "data": {"account": "abc"}}

        cli.main(["account-detail", "--address", "abc"])

        assert called_url(client) == f"{PRO}account/detail?address=abc"
        assert json.loads(capsys.readouterr().out) == {"success": True, "data": {"account": "abc"}}

    def test_token_markets_list_argument(self, from_env, client):
        cli.main(["token-markets", "--token", "A", "B", "--sort-by", "volume"])
        assert called_url(client) == f"{PRO}token/markets?token[]=A&token[]=B&sort_by=volume"

    def test_account_transfer_options(self, from_env, client):
        cli.main(["account-transfer", "--address", "abc", "--flow", "in", "--page-size", "20"])
        assert called_url(client) == f"{PRO}account/transfer?address=abc&flow=in&page_size=20"

    def test_block_last_default(self, from_env, client):
        cli.main(["block-last"])
        assert called_url(client) == f"{PRO}block/last?limit=100"

    def test_chain_info(self, from_env, client):
        cli.main(["chain-info"])
        client.get.assert_called_once()
        assert client.get.call_args.args[0] == "https://public-api.solscan.io/chaininfo"

    def test_failure_body_printed_without_strict(self, from_env, client, capsys):
        client.get.return_value = {"success": False, "errors": [{"code": 404, "message": "missing"}]}

        cli.main(["tx-detail", "--tx", "sig"])

        assert json.loads(capsys.readouterr().out)["success"] is False

    def test_strict_exits_on_failure_body(self, from_env, client, capsys):
        client.get.return_value = {"success": False, "errors": [{"code": 404, "message": "missing"}]}

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--strict", "tx-detail", "--tx", "sig"])

        assert exc_info.value.code == 1
        assert "404: missing" in capsys.readouterr().err

    def test_token_accounts(self, from_env, client):
        cli.main(["account-token-accounts", "--address", "abc", "--type", "nft", "--hide-zero"])
        assert called_url(client) == f"{PRO}account/token-accounts?address=abc&type=nft&hide_zero=true"

    def test_invalid_argument_exits(self, from_env, client, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["account-token-accounts", "--address", "abc", "--type", "stake"])

        assert exc_info.value.code == 1
        assert "Error: Unsupported type 'stake'. Expected token|nft." in capsys.readouterr().err
        client.get.assert_not_called()

    def test_transport_failure_exits(self, from_env, client, capsys):
        client.get.side_effect = RequestFailed("API request failed: read timed out")

        with pytest.raises(SystemExit) as exc_info:
            cli.main(["token-meta", "--address", "abc"])

        assert exc_info.value.code == 1
        assert "Error: API request failed: read timed out" in capsys.readouterr().err
        client.get.assert_called_once()

    def test_missing_api_key_exits(self, capsys):
        with patch.object(cli.SolscanAPI, "from_env", side_effect=ValueError("SOLSCAN_API_KEY is required but not set.")):
            with pytest.raises(SystemExit):
                cli.main(["usage"])
        assert "SOLSCAN_API_KEY" in capsys.readouterr().err

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .api import SolscanAPI
from .types import check_response


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query the Solscan API and print the JSON response.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with an error when the response reports success=false.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (DEBUG prints every request URL).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("chain-info", help="Chain information from the public API")
    subparsers.add_parser("usage", help="Compute units used by the API key")

    for name, help_text in (
        ("account-detail", "Fetch account details"),
        ("account-portfolio", "Fetch account portfolio"),
        ("token-meta", "Fetch token metadata"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--address", required=True, help="Base58 address.")

    transfer_parser = subparsers.add_parser("account-transfer", help="List transfers of an account")
    transfer_parser.add_argument("--address", required=True, help="Account address.")
    transfer_parser.add_argument("--token", required=False, help="Only transfers of this token.")
    transfer_parser.add_argument("--flow", required=False, choices=["in", "out"], help="Transfer direction.")
    transfer_parser.add_argument("--page", required=False, type=int, help="Page number.")
    transfer_parser.add_argument("--page-size", required=False, type=int, help="Items per page.")

    token_accounts_parser = subparsers.add_parser("account-token-accounts", help="Token or NFT accounts of an owner")
    token_accounts_parser.add_argument("--address", required=True, help="Owner address.")
    token_accounts_parser.add_argument("--type", required=True, dest="token_type", help="token or nft.")
    token_accounts_parser.add_argument("--hide-zero", action="store_true", default=None, help="Skip empty accounts.")
    token_accounts_parser.add_argument("--page", required=False, type=int, help="Page number.")
    token_accounts_parser.add_argument("--page-size", required=False, type=int, help="Items per page.")

    meta_multi_parser = subparsers.add_parser("token-meta-multi", help="Fetch metadata of several tokens")
    meta_multi_parser.add_argument("--address", required=True, nargs="+", help="Token addresses.")

    markets_parser = subparsers.add_parser("token-markets", help="List markets of a token pair")
    markets_parser.add_argument("--token", required=True, nargs="+", help="Token addresses.")
    markets_parser.add_argument("--sort-by", required=False, help="Sort field.")
    markets_parser.add_argument("--page", required=False, type=int, help="Page number.")
    markets_parser.add_argument("--page-size", required=False, type=int, help="Items per page.")

    trending_parser = subparsers.add_parser("token-trending", help="List trending tokens")
    trending_parser.add_argument("--limit", required=False, type=int, default=10, help="Number of tokens.")

    news_parser = subparsers.add_parser("nft-news", help="Latest NFT news")
    news_parser.add_argument("--filter", required=False, help="Defaults to created_time.")
    news_parser.add_argument("--page", required=False, type=int, help="Page number.")
    news_parser.add_argument("--page-size", required=False, type=int, help="Items per page.")

    tx_last_parser = subparsers.add_parser("tx-last", help="Latest transactions")
    tx_last_parser.add_argument("--limit", required=False, type=int, help="Number of transactions.")
    tx_last_parser.add_argument("--filter", required=False, help="exceptVote (default) or all.")

    tx_detail_parser = subparsers.add_parser("tx-detail", help="Fetch a transaction by signature")
    tx_detail_parser.add_argument("--tx", required=True, help="Transaction signature.")

    block_last_parser = subparsers.add_parser("block-last", help="Latest blocks")
    block_last_parser.add_argument("--limit", required=False, type=int, default=100, help="Number of blocks.")

    block_detail_parser = subparsers.add_parser("block-detail", help="Fetch a block by slot")
    block_detail_parser.add_argument("--block", required=True, type=int, help="Block slot.")

    return parser


def _dispatch(api: SolscanAPI, args: argparse.Namespace) -> Any:
    if args.command == "chain-info":
        return api.public.chain_info()
    if args.command == "usage":
        return api.monitoring.usage()
    if args.command == "account-detail":
        return api.account.detail(args.address)
    if args.command == "account-portfolio":
        return api.account.portfolio(args.address)
    if args.command == "account-transfer":
        return api.account.transfer(
            args.address,
            token=args.token,
            flow=args.flow,
            page=args.page,
            page_size=args.page_size,
        )
    if args.command == "account-token-accounts":
        return api.account.token_accounts(
            args.address,
            args.token_type,
            hide_zero=args.hide_zero,
            page=args.page,
            page_size=args.page_size,
        )
    if args.command == "token-meta":
        return api.token.meta(args.address)
    if args.command == "token-meta-multi":
        return api.token.meta_multi(args.address)
    if args.command == "token-markets":
        return api.token.markets(
            args.token,
            sort_by=args.sort_by,
            page=args.page,
            page_size=args.page_size,
        )
    if args.command == "token-trending":
        return api.token.trending(args.limit)
    if args.command == "nft-news":
        return api.nft.news(args.filter, args.page, args.page_size)
    if args.command == "tx-last":
        return api.transaction.last(args.limit, args.filter)
    if args.command == "tx-detail":
        return api.transaction.detail(args.tx)
    if args.command == "block-last":
        return api.block.last(args.limit)
    if args.command == "block-detail":
        return api.block.detail(args.block)
    raise ValueError(f"Unknown command '{args.command}'.")


def main(argv: Optional[list[str]] = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        api = SolscanAPI.from_env()
        result = _dispatch(api, args)
        if args.strict:
            check_response(result)
        print(json.dumps(result, indent=2))
    except Exception as exc:  # pylint: disable=broad-except
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

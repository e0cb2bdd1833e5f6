"""
MCP server exposing Solscan explorer lookups as tools.
"""

import argparse
from collections.abc import Mapping
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from .api import SolscanAPI

server = FastMCP(
    name="solscan-mcp",
    instructions="Look up Solana accounts, tokens, NFTs, transactions and blocks via the Solscan Pro API.",
)

_api: Optional[SolscanAPI] = None


def _get_api() -> SolscanAPI:
    global _api
    if _api is None:
        _api = SolscanAPI.from_env()
    return _api


def _normalize_array_param(value: Optional[Any], name: str) -> Optional[list]:
    """
    Accept list/tuple as-is and wrap other scalars; reject strings and maps,
    which are almost always a caller mistake for an address list.
    """
    if value is None:
        return None
    if isinstance(value, (str, bytes, bytearray)):
        raise ValueError(f"{name} must be an array (e.g. ['So11...', 'EPjF...']); got a string/bytes.")
    if isinstance(value, Mapping):
        raise ValueError(f"{name} must be an array, not an object/map.")
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


@server.tool(
    name="chain_info",
    title="Chain Info",
    description="Fetch Solana chain information (block height, tx count) from the public API.",
)
def chain_info() -> dict:
    return _get_api().public.chain_info()


@server.tool(
    name="account_detail",
    title="Account Detail",
    description="Fetch lamports, owner program and type of an account.",
)
def account_detail(address: str) -> dict:
    return _get_api().account.detail(address)


@server.tool(
    name="account_portfolio",
    title="Account Portfolio",
    description="Fetch native balance and token holdings (with USD value) of an account.",
)
def account_portfolio(address: str) -> dict:
    return _get_api().account.portfolio(address)


@server.tool(
    name="account_transfer",
    title="Account Transfers",
    description="List token transfers of an account with optional token/flow filters and pagination.",
)
def account_transfer(
    address: str,
    token: Optional[str] = None,
    flow: Optional[str] = None,
    block_time: Optional[Any] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> dict:
    return _get_api().account.transfer(
        address,
        token=token,
        flow=flow,
        block_time=_normalize_array_param(block_time, "block_time"),
        page=page,
        page_size=page_size,
    )


@server.tool(
    name="token_meta",
    title="Token Metadata",
    description="Fetch name, symbol, supply and price of a token.",
)
def token_meta(address: str) -> dict:
    return _get_api().token.meta(address)


@server.tool(
    name="token_meta_multi",
    title="Multiple Token Metadata",
    description="Fetch metadata for several tokens at once. `addresses` must be a non-empty array.",
)
def token_meta_multi(addresses: Any) -> dict:
    return _get_api().token.meta_multi(_normalize_array_param(addresses, "addresses") or [])


@server.tool(
    name="token_markets",
    title="Token Markets",
    description="List pools trading the given token addresses. `tokens` must be a non-empty array.",
)
def token_markets(
    tokens: Any,
    sort_by: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
) -> dict:
    normalized = _normalize_array_param(tokens, "tokens") or []
    return _get_api().token.markets(normalized, sort_by=sort_by, page=page, page_size=page_size)


@server.tool(
    name="token_trending",
    title="Trending Tokens",
    description="List trending tokens (default 10).",
)
def token_trending(limit: int = 10) -> dict:
    return _get_api().token.trending(limit)


@server.tool(
    name="nft_news",
    title="NFT News",
    description="List the latest NFT news, filtered by created_time by default.",
)
def nft_news(filter: Optional[str] = None, page: Optional[int] = None, page_size: Optional[int] = None) -> dict:
    return _get_api().nft.news(filter, page, page_size)


@server.tool(
    name="transaction_last",
    title="Latest Transactions",
    description="List the latest transactions (vote transactions excluded unless filter=all).",
)
def transaction_last(limit: Optional[int] = None, filter: Optional[str] = None) -> dict:
    return _get_api().transaction.last(limit, filter)


@server.tool(
    name="transaction_detail",
    title="Transaction Detail",
    description="Fetch a parsed transaction by signature.",
)
def transaction_detail(tx: str) -> dict:
    return _get_api().transaction.detail(tx)


@server.tool(
    name="block_last",
    title="Latest Blocks",
    description="List the latest blocks (default 100).",
)
def block_last(limit: int = 100) -> dict:
    return _get_api().block.last(limit)


@server.tool(
    name="block_detail",
    title="Block Detail",
    description="Fetch a block by slot number.",
)
def block_detail(block: int) -> dict:
    return _get_api().block.detail(block)


@server.tool(
    name="usage",
    title="API Usage",
    description="Report compute units consumed by the configured API key.",
)
def usage() -> dict:
    return _get_api().monitoring.usage()


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Run the Solscan MCP server.")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "streamable-http"],
        default="stdio",
        help="Transport protocol for MCP.",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port for SSE/HTTP transports.",
    )
    parser.add_argument(
        "--mount-path",
        default="/",
        help="Mount path for SSE transport (only when transport=sse).",
    )
    args = parser.parse_args(argv)

    server.settings.host = args.host
    server.settings.port = args.port

    if args.transport == "sse":
        server.run(transport="sse", mount_path=args.mount_path)
    else:
        server.run(transport=args.transport)


if __name__ == "__main__":
    main()

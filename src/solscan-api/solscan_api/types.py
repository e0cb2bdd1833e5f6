"""
Result shapes returned by the Solscan endpoints.

These are annotations only: the client hands back the decoded JSON body as-is,
so nothing here is checked at runtime apart from ``check_response``, which the
caller has to invoke explicitly.

Every endpoint with a known payload has its own envelope type (for example
``AccountDetailResponse``) whose ``data`` key is the payload shape. Endpoints
whose payload is not documented return the generic ``ApiResponse``.
"""

from typing import Any, List, Optional, TypedDict, Union

from .exceptions import ApiResponseError


class ApiErrorDetail(TypedDict):
    code: int
    message: str


class _Envelope(TypedDict):
    success: bool


class _EnvelopeErrors(TypedDict, total=False):
    errors: Union[List[ApiErrorDetail], ApiErrorDetail]


class ApiResponse(_Envelope, _EnvelopeErrors):
    data: Any


# Account payloads

class AccountDetail(TypedDict):
    account: str
    lamports: int
    type: str
    executable: bool
    owner_program: str
    rent_epoch: int
    is_oncurve: int


class AccountTransfer(TypedDict):
    block_id: int
    trans_id: str
    block_time: int
    time: str
    activity_type: str
    from_address: str
    from_token_account: str
    to_address: str
    to_token_account: str
    token_address: str
    token_decimals: int
    amount: float
    flow: str


class ChildRouter(TypedDict, total=False):
    token1: str
    token1_decimals: int
    amount1: str
    token2: str
    token2_decimals: int
    amount2: str
    program_address: str
    pool_address: str


class Routers(TypedDict, total=False):
    token1: str
    token1_decimals: int
    amount1: Optional[float]
    token2: str
    token2_decimals: int
    amount2: float
    child_routers: List[ChildRouter]


class AccountDefiActivity(TypedDict):
    block_id: int
    trans_id: str
    block_time: int
    time: str
    activity_type: str
    from_address: str
    sources: List[str]
    platform: List[str]
    value: float
    routers: Routers


class AccountBalanceChange(TypedDict):
    block_id: int
    block_time: int
    time: str
    trans_id: str
    address: str
    token_address: str
    token_decimals: int
    token_account: str
    amount: float
    pre_balance: float
    post_balance: float
    change_type: str  # "inc" or "dec"
    fee: int


class ParsedInstruction(TypedDict):
    type: str
    program: str
    program_id: str


class AccountTransaction(TypedDict):
    slot: int
    fee: int
    status: str  # "Success" or "Fail"
    signer: str
    block_time: int
    tx_hash: str
    parsed_instructions: List[ParsedInstruction]
    program_ids: str
    time: str


class AccountTokenAccount(TypedDict):
    token_account: str
    token_address: str
    amount: float
    token_decimals: int
    owner: str


class AccountMetadata(TypedDict):
    account_address: str
    account_label: str
    account_icon: str
    account_tags: List[str]
    account_type: str


class PortfolioToken(TypedDict, total=False):
    token_address: str  # missing on the native balance
    amount: float
    balance: float
    token_price: float
    token_decimals: int
    token_name: str
    token_symbol: str
    token_icon: str
    value: float


class AccountPortfolio(TypedDict):
    total_value: float
    native_balance: PortfolioToken
    tokens: List[PortfolioToken]


class LeaderboardEntry(TypedDict):
    account: str
    sol_values: float
    token_values: float
    stake_values: float
    total_values: float


class AccountLeaderboard(TypedDict):
    total: int
    data: List[LeaderboardEntry]


class AccountStake(TypedDict):
    stake_account: str
    validator: str
    amount: float
    status: str
    activation_epoch: int
    deactivation_epoch: Optional[int]


# Token payloads

class TokenTransfer(TypedDict):
    block_id: str
    trans_id: str
    block_time: int
    time: str
    activity_type: str
    from_address: str
    to_address: str
    token_address: str
    token_decimals: int
    amount: float


class TokenDefiActivity(TypedDict):
    block_id: int
    trans_id: str
    block_time: int
    activity_type: str
    from_address: str
    to_address: str
    platform: str
    sources: List[str]
    routers: Routers


class TokenMetadata(TypedDict, total=False):
    name: str
    image: str
    symbol: str
    description: str
    twitter: str
    website: str


class TokenMeta(TypedDict, total=False):
    address: str
    name: str
    symbol: str
    icon: str
    decimals: int
    holder: int
    creator: str
    create_tx: str
    created_time: int
    first_mint_tx: str
    first_mint_time: int
    metadata: Optional[TokenMetadata]
    metadata_uri: str
    mint_authority: Optional[str]
    freeze_authority: Optional[str]
    supply: str
    price: float
    volume_24h: float
    market_cap: float
    market_cap_rank: Optional[int]
    price_change_24h: float
    total_dex_vol_24h: float
    dex_vol_change_24h: float


class TokenMarket(TypedDict):
    pool_id: str
    program_id: str
    token_1: str
    token_2: str
    token_account_1: str
    token_account_2: str
    total_trades_24h: int
    total_trades_prev_24h: int
    total_volume_24h: float
    total_volume_prev_24h: float


class TokenPrice(TypedDict):
    date: int
    price: float


class TokenHolder(TypedDict):
    address: str
    amount: float
    decimals: int
    owner: str
    rank: int


class TokenHolders(TypedDict):
    total: int
    items: List[TokenHolder]


class TokenListItem(TypedDict):
    address: str
    decimals: int
    name: str
    symbol: str
    market_cap: float
    price: float
    price_24h_change: float
    holder: int
    created_time: int


class TokenTop(TypedDict):
    total: int
    items: List[TokenListItem]


# Envelopes

class AccountDetailResponse(_Envelope, _EnvelopeErrors):
    data: AccountDetail


class AccountPortfolioResponse(_Envelope, _EnvelopeErrors):
    data: AccountPortfolio


class AccountMetadataResponse(_Envelope, _EnvelopeErrors):
    data: AccountMetadata


class AccountTransferResponse(_Envelope, _EnvelopeErrors):
    data: List[AccountTransfer]


class AccountDefiActivityResponse(_Envelope, _EnvelopeErrors):
    data: List[AccountDefiActivity]


class AccountBalanceChangeResponse(_Envelope, _EnvelopeErrors):
    data: List[AccountBalanceChange]


class AccountTokenAccountsResponse(_Envelope, _EnvelopeErrors):
    data: List[AccountTokenAccount]


class AccountTransactionsResponse(_Envelope, _EnvelopeErrors):
    data: List[AccountTransaction]


class AccountStakeResponse(_Envelope, _EnvelopeErrors):
    data: List[AccountStake]


class AccountLeaderboardResponse(_Envelope, _EnvelopeErrors):
    data: AccountLeaderboard


class TokenMetaResponse(_Envelope, _EnvelopeErrors):
    data: TokenMeta


class TokenMetaMultiResponse(_Envelope, _EnvelopeErrors):
    data: List[TokenMeta]


class TokenMarketsResponse(_Envelope, _EnvelopeErrors):
    data: List[TokenMarket]


class TokenMarketInfoResponse(_Envelope, _EnvelopeErrors):
    data: TokenMarket


class TokenTransferResponse(_Envelope, _EnvelopeErrors):
    data: List[TokenTransfer]


class TokenDefiActivityResponse(_Envelope, _EnvelopeErrors):
    data: List[TokenDefiActivity]


class TokenListResponse(_Envelope, _EnvelopeErrors):
    data: List[TokenListItem]


class TokenPriceResponse(_Envelope, _EnvelopeErrors):
    data: List[TokenPrice]


class TokenHoldersResponse(_Envelope, _EnvelopeErrors):
    data: TokenHolders


class TokenTopResponse(_Envelope, _EnvelopeErrors):
    data: TokenTop




def _describe_errors(errors: Any) -> str:
    if isinstance(errors, dict):
        errors = [errors]
    if not isinstance(errors, list):
        return "unknown error"

    parts: List[str] = []
    for item in errors:
        if not isinstance(item, dict):
            continue
        code = item.get("code")
        message = item.get("message") or ""
        parts.append(f"{code}: {message}" if code is not None else str(message))
    return "; ".join(parts) if parts else "unknown error"


def check_response(response: ApiResponse) -> ApiResponse:
    """Return ``response`` untouched, or raise ``ApiResponseError`` if it reports failure."""
    if not isinstance(response, dict):
        raise ApiResponseError("Unexpected response (non-object).")
    if response.get("success") is False:
        errors = response.get("errors")
        raise ApiResponseError(f"Solscan error: {_describe_errors(errors)}.", errors=errors)
    return response

from typing import Dict, Optional, Sequence, Union

from ..config import Config
from ..query import append_array_params, append_param
from ..solscan_client import SolscanClient
from ..types import ApiResponse

Number = Union[int, float]


class BaseApi:
    """Shared state for the pro-api endpoint groups."""

    path = ""

    def __init__(self, config: Config, client: SolscanClient) -> None:
        self.url = config.pro_base_url
        self.headers: Dict[str, str] = {"token": config.api_key}
        self.url_module = f"{self.url}{self.path}"
        self.client = client

    def _get(self, url: str) -> ApiResponse:
        return self.client.get(url, self.headers)


def add_paging(
    url: str,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    sort_by: Optional[str] = None,
    sort_order: Optional[str] = None,
) -> str:
    if page is not None:
        url = append_param(url, "page", page)
    if page_size is not None:
        url = append_param(url, "page_size", page_size)
    if sort_by:
        url = append_param(url, "sort_by", sort_by)
    if sort_order:
        url = append_param(url, "sort_order", sort_order)
    return url


def add_transfer_filters(
    url: str,
    activity_type: Optional[Sequence[str]] = None,
    token_account: Optional[str] = None,
    from_address: Optional[str] = None,
    to_address: Optional[str] = None,
    token: Optional[str] = None,
    amount: Optional[Sequence[Number]] = None,
    exclude_amount_zero: Optional[bool] = None,
    flow: Optional[str] = None,
    block_time: Optional[Sequence[int]] = None,
) -> str:
    """Filters shared by the account and token transfer endpoints, in wire order."""
    if activity_type:
        url = append_array_params(url, "activity_type", activity_type)
    if token_account:
        url = append_param(url, "token_account", token_account)
    if from_address:
        url = append_param(url, "from", from_address)
    if to_address:
        url = append_param(url, "to", to_address)
    if token:
        url = append_param(url, "token", token)
    if amount:
        url = append_array_params(url, "amount", amount)
    if exclude_amount_zero is not None:
        url = append_param(url, "exclude_amount_zero", exclude_amount_zero)
    if flow:
        url = append_param(url, "flow", flow)
    if block_time:
        url = append_array_params(url, "block_time", block_time)
    return url


def add_defi_filters(
    url: str,
    activity_type: Optional[Sequence[str]] = None,
    from_address: Optional[str] = None,
    platform: Optional[Sequence[str]] = None,
    source: Optional[Sequence[str]] = None,
    token: Optional[str] = None,
    block_time: Optional[Sequence[int]] = None,
) -> str:
    if activity_type:
        url = append_array_params(url, "activity_type", activity_type)
    if from_address:
        url = append_param(url, "from", from_address)
    if platform:
        url = append_array_params(url, "platform", platform)
    if source:
        url = append_array_params(url, "source", source)
    if token:
        url = append_param(url, "token", token)
    if block_time:
        url = append_array_params(url, "block_time", block_time)
    return url

from typing import Optional, Sequence

from ..exceptions import InvalidArgument
from ..query import append_array_params, append_param
from ..types import (
    ApiResponse,
    TokenDefiActivityResponse,
    TokenHoldersResponse,
    TokenListResponse,
    TokenMarketInfoResponse,
    TokenMarketsResponse,
    TokenMetaMultiResponse,
    TokenMetaResponse,
    TokenPriceResponse,
    TokenTopResponse,
    TokenTransferResponse,
)
from .base import BaseApi, Number, add_defi_filters, add_paging, add_transfer_filters

DEFAULT_PAGE = 1
DEFAULT_TRENDING_LIMIT = 10


class TokenApi(BaseApi):
    path = "token/"

    def meta(self, address: str) -> TokenMetaResponse:
        return self._get(append_param(f"{self.url_module}meta", "address", address))

    def meta_multi(self, addresses: Sequence[str]) -> TokenMetaMultiResponse:
        if not addresses:
            raise InvalidArgument("Addresses are required")
        url = append_array_params(f"{self.url_module}meta/multi", "address", addresses)
        return self._get(url)

    def markets(
        self,
        tokens: Sequence[str],
        sort_by: Optional[str] = None,
        program: Optional[Sequence[str]] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> TokenMarketsResponse:
        """Markets (pools) trading the given token pair addresses."""
        if not tokens:
            raise InvalidArgument("Token pair addresses are required")

        url = append_array_params(f"{self.url_module}markets", "token", tokens)
        if sort_by:
            url = append_param(url, "sort_by", sort_by)
        if program:
            url = append_array_params(url, "program", program)
        url = add_paging(url, page, page_size)
        return self._get(url)

    def market_info(self, address: str) -> TokenMarketInfoResponse:
        return self._get(append_param(f"{self.url_module}market/info", "address", address))

    def transfer(
        self,
        address: str,
        activity_type: Optional[Sequence[str]] = None,
        token_account: Optional[str] = None,
        from_address: Optional[str] = None,
        to_address: Optional[str] = None,
        token: Optional[str] = None,
        amount: Optional[Sequence[Number]] = None,
        exclude_amount_zero: Optional[bool] = None,
        flow: Optional[str] = None,
        block_time: Optional[Sequence[int]] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> TokenTransferResponse:
        url = append_param(f"{self.url_module}transfer", "address", address)
        url = add_transfer_filters(
            url,
            activity_type=activity_type,
            token_account=token_account,
            from_address=from_address,
            to_address=to_address,
            token=token,
            amount=amount,
            exclude_amount_zero=exclude_amount_zero,
            flow=flow,
            block_time=block_time,
        )
        url = add_paging(url, sort_by=sort_by, sort_order=sort_order)
        return self._get(url)

    def defi_activities(
        self,
        address: str,
        activity_type: Optional[Sequence[str]] = None,
        from_address: Optional[str] = None,
        platform: Optional[Sequence[str]] = None,
        source: Optional[Sequence[str]] = None,
        token: Optional[str] = None,
        block_time: Optional[Sequence[int]] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> TokenDefiActivityResponse:
        url = append_param(f"{self.url_module}defi/activities", "address", address)
        url = add_defi_filters(
            url,
            activity_type=activity_type,
            from_address=from_address,
            platform=platform,
            source=source,
            token=token,
            block_time=block_time,
        )
        url = add_paging(url, page, page_size, sort_by, sort_order)
        return self._get(url)

    def list(
        self,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> TokenListResponse:
        """List tokens; ``sort_by`` is one of holder, market_cap, created_time."""
        url = append_param(f"{self.url_module}list", "page", page or DEFAULT_PAGE)
        url = add_paging(url, page_size=page_size, sort_by=sort_by, sort_order=sort_order)
        return self._get(url)

    def market_volume(self, address: str, time: Optional[Sequence[int]] = None) -> ApiResponse:
        url = append_param(f"{self.url_module}market/volume", "address", address)
        if time:
            url = append_array_params(url, "time", time)
        return self._get(url)

    def trending(self, limit: Optional[int] = None) -> TokenListResponse:
        url = append_param(f"{self.url_module}trending", "limit", limit or DEFAULT_TRENDING_LIMIT)
        return self._get(url)

    def price(self, address: str, time: Optional[Sequence[int]] = None) -> TokenPriceResponse:
        """Historical prices; ``time`` holds ``YYYYMMDD`` bounds."""
        url = append_param(f"{self.url_module}price", "address", address)
        if time:
            url = append_array_params(url, "time", time)
        return self._get(url)

    def holders(
        self,
        address: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        from_amount: Optional[Number] = None,
        to_amount: Optional[Number] = None,
    ) -> TokenHoldersResponse:
        url = append_param(f"{self.url_module}holders", "address", address)
        url = append_param(url, "page", page or DEFAULT_PAGE)
        if page_size is not None:
            url = append_param(url, "page_size", page_size)
        if from_amount is not None:
            url = append_param(url, "from_amount", from_amount)
        if to_amount is not None:
            url = append_param(url, "to_amount", to_amount)
        return self._get(url)

    def top(self) -> TokenTopResponse:
        return self._get(f"{self.url_module}top")

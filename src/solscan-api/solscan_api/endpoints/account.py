from typing import Optional, Sequence

from ..exceptions import InvalidArgument
from ..query import append_array_params, append_param
from ..types import (
    AccountBalanceChangeResponse,
    AccountDefiActivityResponse,
    AccountDetailResponse,
    AccountLeaderboardResponse,
    AccountMetadataResponse,
    AccountPortfolioResponse,
    AccountStakeResponse,
    AccountTokenAccountsResponse,
    AccountTransactionsResponse,
    AccountTransferResponse,
    ApiResponse,
)
from .base import BaseApi, Number, add_defi_filters, add_paging, add_transfer_filters

TOKEN_ACCOUNT_TYPES = ("token", "nft")


class AccountApi(BaseApi):
    path = "account/"

    def detail(self, address: str) -> AccountDetailResponse:
        return self._get(append_param(f"{self.url_module}detail", "address", address))

    def portfolio(self, address: str) -> AccountPortfolioResponse:
        return self._get(append_param(f"{self.url_module}portfolio", "address", address))

    def metadata(self, address: str) -> AccountMetadataResponse:
        return self._get(append_param(f"{self.url_module}metadata", "address", address))

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
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> AccountTransferResponse:
        """Transfers involving an account; ``flow`` is ``in`` or ``out``."""
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
        url = add_paging(url, page, page_size, sort_by, sort_order)
        return self._get(url)

    def transfer_export(
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
    ) -> ApiResponse:
        url = append_param(f"{self.url_module}transfer/export", "address", address)
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
    ) -> AccountDefiActivityResponse:
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

    def balance_change_activities(
        self,
        address: str,
        token: Optional[str] = None,
        amount: Optional[Sequence[Number]] = None,
        flow: Optional[str] = None,
        remove_spam: Optional[bool] = None,
        block_time: Optional[Sequence[int]] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> AccountBalanceChangeResponse:
        url = append_param(f"{self.url_module}balance_change", "address", address)
        if token:
            url = append_param(url, "token", token)
        if amount:
            url = append_array_params(url, "amount", amount)
        if flow:
            url = append_param(url, "flow", flow)
        if remove_spam is not None:
            url = append_param(url, "remove_spam", remove_spam)
        if block_time:
            url = append_array_params(url, "block_time", block_time)
        url = add_paging(url, page, page_size, sort_by, sort_order)
        return self._get(url)

    def token_accounts(
        self,
        address: str,
        token_type: str,
        hide_zero: Optional[bool] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> AccountTokenAccountsResponse:
        if token_type not in TOKEN_ACCOUNT_TYPES:
            raise InvalidArgument(f"Unsupported type '{token_type}'. Expected token|nft.")

        url = append_param(f"{self.url_module}token-accounts", "address", address)
        url = append_param(url, "type", token_type)
        if hide_zero is not None:
            url = append_param(url, "hide_zero", hide_zero)
        url = add_paging(url, page, page_size)
        return self._get(url)

    def transactions(
        self,
        address: str,
        before: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> AccountTransactionsResponse:
        """``before`` is a transaction signature used as the pagination cursor."""
        url = append_param(f"{self.url_module}transactions", "address", address)
        if before:
            url = append_param(url, "before", before)
        if limit is not None:
            url = append_param(url, "limit", limit)
        return self._get(url)

    def stake(
        self,
        address: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> AccountStakeResponse:
        url = append_param(f"{self.url_module}stake", "address", address)
        return self._get(add_paging(url, page, page_size))

    def rewards_export(self, address: str, time_from: int, time_to: int) -> ApiResponse:
        """Export staking rewards between two unix timestamps (seconds)."""
        url = append_param(f"{self.url_module}reward/export", "address", address)
        url = append_param(url, "time_from", time_from)
        url = append_param(url, "time_to", time_to)
        return self._get(url)

    def leaderboard(
        self,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> AccountLeaderboardResponse:
        url = f"{self.url_module}leaderboard"
        if sort_by:
            url = append_param(url, "sort_by", sort_by)
        if sort_order:
            url = append_param(url, "sort_order", sort_order)
        if page:
            url = append_param(url, "page", page)
        if page_size:
            url = append_param(url, "page_size", page_size)
        return self._get(url)

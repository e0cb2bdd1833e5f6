from typing import Optional, Sequence

from ..query import append_array_params, append_param
from ..types import ApiResponse
from .base import BaseApi, Number, add_paging

DEFAULT_NEWS_FILTER = "created_time"
DEFAULT_PAGE = 1
DEFAULT_RANGE = 1


class NftApi(BaseApi):
    path = "nft/"

    def news(
        self,
        filter: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ApiResponse:
        url = append_param(f"{self.url_module}news", "filter", filter or DEFAULT_NEWS_FILTER)
        return self._get(add_paging(url, page, page_size))

    def activities(
        self,
        activity_type: Optional[Sequence[str]] = None,
        from_address: Optional[str] = None,
        to_address: Optional[str] = None,
        currency_token: Optional[str] = None,
        collection: Optional[str] = None,
        price: Optional[Sequence[Number]] = None,
        source: Optional[Sequence[str]] = None,
        token: Optional[str] = None,
        block_time: Optional[Sequence[int]] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ApiResponse:
        """
        NFT marketplace activities.

        ``price`` is a ``[min, max]`` range expressed in ``currency_token`` and is
        dropped when no currency token is given.
        """
        url = append_param(f"{self.url_module}activities", "page", page or DEFAULT_PAGE)
        if activity_type:
            url = append_array_params(url, "activity_type", activity_type)
        if from_address:
            url = append_param(url, "from", from_address)
        if to_address:
            url = append_param(url, "to", to_address)
        if currency_token:
            url = append_param(url, "currency_token", currency_token)
        if collection:
            url = append_param(url, "collection", collection)
        if price and currency_token:
            url = append_array_params(url, "price", price)
        if source:
            url = append_array_params(url, "source", source)
        if token:
            url = append_param(url, "token", token)
        if block_time:
            url = append_array_params(url, "block_time", block_time)
        if page_size is not None:
            url = append_param(url, "page_size", page_size)
        return self._get(url)

    def collection_lists(
        self,
        range: Optional[int] = None,
        collection: Optional[str] = None,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
    ) -> ApiResponse:
        """``range`` is the look-back window in days."""
        url = append_param(f"{self.url_module}collection/lists", "range", range or DEFAULT_RANGE)
        if collection:
            url = append_param(url, "collection", collection)
        return self._get(add_paging(url, page, page_size, sort_by, sort_order))

    def collection_items(
        self,
        collection: str,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> ApiResponse:
        url = append_param(f"{self.url_module}collection/items", "collection", collection)
        return self._get(add_paging(url, page, page_size, sort_by))

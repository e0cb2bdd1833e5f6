from typing import Optional

from ..query import append_param
from ..types import ApiResponse
from .base import BaseApi, add_paging

DEFAULT_LIMIT = 100


class BlockApi(BaseApi):
    path = "block/"

    def last(self, limit: Optional[int] = None) -> ApiResponse:
        return self._get(append_param(f"{self.url_module}last", "limit", limit or DEFAULT_LIMIT))

    def transactions(
        self,
        block: int,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> ApiResponse:
        url = append_param(f"{self.url_module}transactions", "block", block)
        return self._get(add_paging(url, page, page_size))

    def detail(self, block: int) -> ApiResponse:
        return self._get(append_param(f"{self.url_module}detail", "block", block))

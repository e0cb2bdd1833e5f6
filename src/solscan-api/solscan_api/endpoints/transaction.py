from typing import Optional

from ..query import append_param
from ..types import ApiResponse
from .base import BaseApi

DEFAULT_FILTER = "exceptVote"


class TransactionApi(BaseApi):
    path = "transaction/"

    def last(self, limit: Optional[int] = None, filter: Optional[str] = None) -> ApiResponse:
        """Latest transactions; ``filter`` is ``exceptVote`` or ``all``."""
        url = append_param(f"{self.url_module}last", "filter", filter or DEFAULT_FILTER)
        if limit:
            url = append_param(url, "limit", limit)
        return self._get(url)

    def detail(self, tx: str) -> ApiResponse:
        return self._get(append_param(f"{self.url_module}detail", "tx", tx))

    def actions(self, tx: str) -> ApiResponse:
        return self._get(append_param(f"{self.url_module}actions", "tx", tx))

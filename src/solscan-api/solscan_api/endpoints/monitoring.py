from ..types import ApiResponse
from .base import BaseApi


class MonitoringApi(BaseApi):
    path = "monitor/"

    def usage(self) -> ApiResponse:
        """Compute units used by the API key's subscription."""
        return self._get(f"{self.url_module}usage")

from typing import Dict

from ..config import Config
from ..solscan_client import SolscanClient
from ..types import ApiResponse


class PublicApi:
    """Endpoints served by the public (non-versioned) host."""

    def __init__(self, config: Config, client: SolscanClient) -> None:
        self.url = config.public_base_url
        # The public host does not require the key, but it is sent anyway.
        self.headers: Dict[str, str] = {"token": config.api_key}
        self.client = client

    def chain_info(self) -> ApiResponse:
        return self.client.get(f"{self.url}chaininfo", self.headers)

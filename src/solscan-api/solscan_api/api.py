from typing import Optional

from .config import Config, load_config
from .endpoints import (
    AccountApi,
    BlockApi,
    MonitoringApi,
    NftApi,
    PublicApi,
    TokenApi,
    TransactionApi,
)
from .solscan_client import SolscanClient


class SolscanAPI:
    """Entry point bundling every endpoint group behind one API key."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        config: Optional[Config] = None,
        client: Optional[SolscanClient] = None,
    ) -> None:
        if config is None:
            config = Config(api_key=api_key or "")
        elif api_key is not None and api_key != config.api_key:
            raise ValueError("Pass either api_key or config, not conflicting values of both.")

        self.config = config
        self.client = client or SolscanClient(timeout=config.request_timeout)

        self.public = PublicApi(config, self.client)
        self.account = AccountApi(config, self.client)
        self.token = TokenApi(config, self.client)
        self.nft = NftApi(config, self.client)
        self.transaction = TransactionApi(config, self.client)
        self.block = BlockApi(config, self.client)
        self.monitoring = MonitoringApi(config, self.client)

    @classmethod
    def from_env(cls, client: Optional[SolscanClient] = None) -> "SolscanAPI":
        """Build a client from ``SOLSCAN_API_KEY`` and friends, see ``load_config``."""
        return cls(config=load_config(), client=client)

    def close(self) -> None:
        self.client.close()

    def __enter__(self) -> "SolscanAPI":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

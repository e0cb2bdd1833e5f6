from .account import AccountApi
from .block import BlockApi
from .monitoring import MonitoringApi
from .nft import NftApi
from .public import PublicApi
from .token import TokenApi
from .transaction import TransactionApi

__all__ = [
    "AccountApi",
    "BlockApi",
    "MonitoringApi",
    "NftApi",
    "PublicApi",
    "TokenApi",
    "TransactionApi",
]

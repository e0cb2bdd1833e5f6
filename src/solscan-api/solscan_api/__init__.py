from .api import SolscanAPI
from .config import Config, load_config
from .exceptions import ApiResponseError, InvalidArgument, RequestFailed, SolscanError
from .query import append_array_params, append_param
from .solscan_client import SolscanClient
from .types import ApiResponse, check_response

__all__ = [
    "ApiResponse",
    "ApiResponseError",
    "Config",
    "InvalidArgument",
    "RequestFailed",
    "SolscanAPI",
    "SolscanClient",
    "SolscanError",
    "append_array_params",
    "append_param",
    "check_response",
    "load_config",
]

__version__ = "0.1.0"

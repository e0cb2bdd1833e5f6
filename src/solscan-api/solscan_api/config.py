import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_PRO_BASE_URL = "https://pro-api.solscan.io/v2.0/"
DEFAULT_PUBLIC_BASE_URL = "https://public-api.solscan.io/"


def _normalize_base_url(url: str) -> str:
    return url.rstrip("/") + "/"


@dataclass(frozen=True)
class Config:
    api_key: str
    pro_base_url: str = DEFAULT_PRO_BASE_URL
    public_base_url: str = DEFAULT_PUBLIC_BASE_URL
    # None leaves the timeout to requests (wait indefinitely).
    request_timeout: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "pro_base_url", _normalize_base_url(self.pro_base_url))
        object.__setattr__(self, "public_base_url", _normalize_base_url(self.public_base_url))


def load_config() -> Config:
    """Load configuration from environment variables."""
    api_key = os.getenv("SOLSCAN_API_KEY")
    if not api_key:
        raise ValueError("SOLSCAN_API_KEY is required but not set.")

    pro_base_url = os.getenv("SOLSCAN_PRO_BASE_URL", DEFAULT_PRO_BASE_URL)
    public_base_url = os.getenv("SOLSCAN_PUBLIC_BASE_URL", DEFAULT_PUBLIC_BASE_URL)
    timeout_env = os.getenv("REQUEST_TIMEOUT")
    timeout = float(timeout_env) if timeout_env else None

    return Config(
        api_key=api_key,
        pro_base_url=pro_base_url,
        public_base_url=public_base_url,
        request_timeout=timeout,
    )

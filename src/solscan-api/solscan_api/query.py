from typing import Iterable, Union
from urllib.parse import quote

Scalar = Union[str, int, float, bool]

# Same set encodeURIComponent leaves untouched, on top of quote's own
# unreserved characters.
_SAFE_CHARS = "!~*'()"


def _stringify(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _encode(value: Scalar) -> str:
    return quote(_stringify(value), safe=_SAFE_CHARS)


def _separator(url: str) -> str:
    return "&" if "?" in url else "?"


def append_param(url: str, name: str, value: Scalar) -> str:
    """Append ``name=value`` to ``url``, opening the query string if needed."""
    return f"{url}{_separator(url)}{name}={_encode(value)}"


def append_array_params(url: str, name: str, values: Iterable[Scalar]) -> str:
    """Append one ``name[]=value`` pair per element, keeping input order."""
    for value in values:
        url = f"{url}{_separator(url)}{name}[]={_encode(value)}"
    return url

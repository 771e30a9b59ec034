"""
Text encoding helpers: percent-escaping, value coercion and auth headers.
"""
import base64
from typing import Any, Dict, Optional
from urllib.parse import quote

from .errors import InvalidArgumentError, MissingValueError
from .types import AuthType


def escape_data(text: str) -> str:
    """Percent-encode everything outside the RFC 3986 unreserved set."""
    return quote(text, safe="")


def coerce_to_string(value: Any) -> str:
    """Convert a parameter value to text."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def is_empty(value: Any) -> bool:
    return value is None or coerce_to_string(value) == ""


def mask_value(val: Optional[str]) -> str:
    """Mask sensitive value for logging, showing first 10 chars."""
    if not val:
        return "<empty>"
    if len(val) <= 10:
        return "*" * len(val)
    return val[:10] + "*" * (len(val) - 10)


def _base64_encode(text: str) -> str:
    """Encodes a string to base64."""
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def encode_basic_credentials(username: str, password: str) -> str:
    return _base64_encode(f"{username}:{password}")


def encode_auth(auth_type: Any, **kwargs: Any) -> Dict[str, str]:
    """
    Encodes authentication credentials into HTTP headers based on the auth type.

    Args:
        auth_type: 'basic', 'bearer' or 'none' (or the AuthType member).
        **kwargs: username, password for basic; token for bearer.

    Returns:
        A dictionary containing the HTTP headers.
    """
    try:
        t = AuthType(auth_type.lower() if isinstance(auth_type, str) else auth_type)
    except ValueError:
        raise InvalidArgumentError(f"Unsupported auth type: {auth_type}") from None

    if t == AuthType.BASIC:
        username = kwargs.get("username")
        password = kwargs.get("password")
        if is_empty(username):
            raise MissingValueError("basic auth", "username")
        if is_empty(password):
            raise MissingValueError("basic auth", "password")
        credentials = encode_basic_credentials(coerce_to_string(username), coerce_to_string(password))
        return {"Authorization": f"Basic {credentials}"}

    if t == AuthType.BEARER:
        token = kwargs.get("token")
        if is_empty(token):
            raise MissingValueError("bearer auth", "token")
        return {"Authorization": f"Bearer {coerce_to_string(token)}"}

    return {}

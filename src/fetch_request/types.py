"""
Core type definitions for fetch-request.
"""
from enum import Enum
from typing import Dict, Optional, TypedDict


class HttpMethod(str, Enum):
    """HTTP methods a builder can be created for."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


class AuthType(str, Enum):
    """Declared authentication scheme, independent of credentials being set."""
    NONE = "none"
    BASIC = "basic"
    BEARER = "bearer"


class MediaType(str, Enum):
    """Known media types for Content-Type and Accept headers."""
    APPLICATION_JSON = "application/json"
    APPLICATION_FORM = "application/x-www-form-urlencoded"
    APPLICATION_OCTET_STREAM = "application/octet-stream"
    APPLICATION_XML = "application/xml"
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    TEXT_CSV = "text/csv"
    MULTIPART_FORM_DATA = "multipart/form-data"

    def __str__(self) -> str:
        return self.value


class RequestOptions(TypedDict, total=False):
    """Options handed to a transport."""
    method: str
    url: str
    headers: Dict[str, str]
    content: Optional[bytes]

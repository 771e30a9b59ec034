"""
Fetch Request - fluent HTTP request builder
"""

__version__ = "0.1.0"

from .types import AuthType, HttpMethod, MediaType, RequestOptions
from .errors import (
    RequestBuilderError,
    InvalidArgumentError,
    MissingValueError,
    SerializationFailedError,
    BuilderFinalizedError,
)
from .config import BuilderConfig
from .serializer import Serializer, JsonSerializer
from .encoding import encode_auth, escape_data
from .request import HttpRequest
from .builder import RequestBuilder

__all__ = [
    "AuthType", "HttpMethod", "MediaType", "RequestOptions",
    "RequestBuilderError", "InvalidArgumentError", "MissingValueError",
    "SerializationFailedError", "BuilderFinalizedError",
    "BuilderConfig",
    "Serializer", "JsonSerializer",
    "encode_auth", "escape_data",
    "HttpRequest",
    "RequestBuilder",
]

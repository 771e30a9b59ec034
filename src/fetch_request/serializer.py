"""
Body serialization for JSON request payloads.
"""
import json
import logging
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from .errors import SerializationFailedError

logger = logging.getLogger(__name__)
LOG_PREFIX = "[FetchRequest:serializer]"


@runtime_checkable
class Serializer(Protocol):
    """Protocol for body serialization."""
    def serialize(self, data: Any) -> bytes: ...


class JsonSerializer:
    """Default JSON serializer producing compact UTF-8 bytes."""

    def serialize(self, data: Any) -> bytes:
        if isinstance(data, BaseModel):
            data = data.model_dump(mode="json")
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")


def serialize_body(serializer: Serializer, value: Any) -> bytes:
    """Run the serializer, surfacing every failure as SerializationFailedError."""
    value_type = type(value).__name__
    try:
        result = serializer.serialize(value)
    except Exception as e:
        logger.debug(f"{LOG_PREFIX} serialize failed for {value_type}: {e}")
        raise SerializationFailedError(value_type, e) from e

    if isinstance(result, bytearray):
        result = bytes(result)
    if not isinstance(result, bytes):
        raise SerializationFailedError(
            value_type,
            TypeError(f"serializer returned {type(result).__name__}, expected bytes"),
        )
    return result

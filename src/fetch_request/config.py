"""
Configuration models for fetch-request.
"""
import json
import os
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from .encoding import coerce_to_string
from .serializer import JsonSerializer, Serializer

ENV_DEFAULT_HEADERS = "FETCH_REQUEST_DEFAULT_HEADERS"


def generate_request_id() -> str:
    return str(uuid.uuid4())


class BuilderConfig(BaseModel):
    """Builder configuration."""
    model_config = {"arbitrary_types_allowed": True}

    default_headers: Dict[str, str] = Field(default_factory=dict, description="Headers seeded into every draft")
    serializer: Optional[Serializer] = Field(default=None, description="Serializer for JSON bodies")
    id_factory: Callable[[], str] = Field(default=generate_request_id, description="Request id generator")

    @field_validator("default_headers")
    @classmethod
    def validate_default_headers(cls, v: Dict[str, str]) -> Dict[str, str]:
        for key in v:
            if not key:
                raise ValueError("default_headers keys must not be empty")
        return v

    @classmethod
    def from_env(cls) -> "BuilderConfig":
        """Build a config from FETCH_REQUEST_DEFAULT_HEADERS (a JSON object)."""
        raw = os.getenv(ENV_DEFAULT_HEADERS)
        if not raw:
            return cls()
        try:
            headers = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"{ENV_DEFAULT_HEADERS} must be a JSON object: {e}") from e
        if not isinstance(headers, dict):
            raise ValueError(f"{ENV_DEFAULT_HEADERS} must be a JSON object")
        return cls(default_headers={str(k): coerce_to_string(v) for k, v in headers.items()})


@dataclass
class ResolvedConfig:
    """Fully resolved configuration ready for usage."""
    default_headers: Dict[str, str]
    serializer: Serializer
    id_factory: Callable[[], str]


def resolve_config(config: Optional[BuilderConfig] = None) -> ResolvedConfig:
    """Apply defaults and return resolved config."""
    if config is None:
        config = BuilderConfig()
    return ResolvedConfig(
        default_headers=dict(config.default_headers),
        serializer=config.serializer or JsonSerializer(),
        id_factory=config.id_factory,
    )

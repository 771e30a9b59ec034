"""
Immutable request descriptor handed to the transport.
"""
import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import httpx

from .types import AuthType, HttpMethod, RequestOptions


@dataclass(frozen=True)
class HttpRequest:
    """Finalized request. Credentials, if any, live in headers."""
    id: str
    method: HttpMethod
    url: str
    auth_type: AuthType = AuthType.NONE
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    priority: int = 0

    def __hash__(self) -> int:
        return hash(self.id)

    def __post_init__(self) -> None:
        if not isinstance(self.headers, MappingProxyType):
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def content_type(self) -> Optional[str]:
        return self.headers.get("Content-Type")

    @property
    def has_body(self) -> bool:
        return self.body is not None

    def with_priority(self, priority: int) -> "HttpRequest":
        """Return a copy carrying a scheduling hint for the transport."""
        return dataclasses.replace(self, priority=priority)

    def to_request_options(self) -> RequestOptions:
        return {
            "method": self.method.value,
            "url": self.url,
            "headers": dict(self.headers),
            "content": self.body,
        }

    def to_httpx(self) -> httpx.Request:
        """Convert to an unsent httpx.Request."""
        return httpx.Request(
            self.method.value,
            self.url,
            headers=dict(self.headers),
            content=self.body,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging and diagnostics."""
        return {
            "id": self.id,
            "method": self.method.value,
            "url": self.url,
            "auth_type": self.auth_type.value,
            "headers": dict(self.headers),
            "body_length": len(self.body) if self.body is not None else None,
            "priority": self.priority,
        }

"""
Fluent builder assembling an immutable HttpRequest.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .config import BuilderConfig, resolve_config
from .encoding import coerce_to_string, encode_auth, escape_data, is_empty, mask_value
from .errors import BuilderFinalizedError, InvalidArgumentError, MissingValueError
from .request import HttpRequest
from .serializer import serialize_body
from .types import AuthType, HttpMethod, MediaType

logger = logging.getLogger(__name__)

# Constants
LOG_PREFIX = "[FetchRequest]"
CONTENT_TYPE = "Content-Type"
ACCEPT = "Accept"
AUTHORIZATION = "Authorization"

SEQUENCE_TYPES = (list, tuple)
UNORDERED_TYPES = (set, frozenset)


def _require_key(key: Any, kind: str) -> str:
    if is_empty(key):
        raise InvalidArgumentError(f"{kind} key is empty", key)
    return coerce_to_string(key)


def _to_media_type(media_type: Union[MediaType, str]) -> MediaType:
    try:
        return MediaType(media_type)
    except ValueError:
        raise InvalidArgumentError(f"Unknown media type: {media_type}") from None


def _encode_pairs(key: str, value: Any) -> List[str]:
    """Encode key=value pairs for one key; empty values are dropped."""
    if isinstance(value, SEQUENCE_TYPES):
        values = value
    elif isinstance(value, UNORDERED_TYPES):
        # sorted so the emitted order does not depend on hash seeds
        values = sorted(value, key=coerce_to_string)
    else:
        values = (value,)
    encoded_key = escape_data(key)
    return [
        f"{encoded_key}={escape_data(coerce_to_string(v))}"
        for v in values
        if not is_empty(v)
    ]


def _collect_pairs(params: Mapping[str, Any], kind: str) -> List[str]:
    pairs = [(_require_key(k, kind), v) for k, v in params.items()]
    encoded: List[str] = []
    for key, value in pairs:
        encoded.extend(_encode_pairs(key, value))
    return encoded


class RequestBuilder:
    """
    Fluent builder for HttpRequest.

    Configuration methods mutate the draft and return the builder. Every
    validation happens before mutation, so a failing call leaves the draft
    as it was. build() is idempotent and seals the builder.
    """

    def __init__(self, method: Union[HttpMethod, str], url: str, config: Optional[BuilderConfig] = None):
        self._config = resolve_config(config)
        self._method = HttpMethod(method)
        self._id = self._config.id_factory()
        self._url = url or ""
        self._query_parts: List[str] = []
        self._form_parts: List[str] = []
        self._headers: Dict[str, str] = dict(self._config.default_headers)
        self._auth_type = AuthType.NONE
        self._body: Optional[bytes] = None
        self._result: Optional[HttpRequest] = None

        logger.debug(f"{LOG_PREFIX} create: id={self._id} {self._method.value} {self._url}")

    @classmethod
    def create_get(cls, url: str, config: Optional[BuilderConfig] = None) -> "RequestBuilder":
        return cls(HttpMethod.GET, url, config)

    @classmethod
    def create_post(cls, url: str, config: Optional[BuilderConfig] = None) -> "RequestBuilder":
        return cls(HttpMethod.POST, url, config)

    @classmethod
    def create_put(cls, url: str, config: Optional[BuilderConfig] = None) -> "RequestBuilder":
        return cls(HttpMethod.PUT, url, config)

    @classmethod
    def create_patch(cls, url: str, config: Optional[BuilderConfig] = None) -> "RequestBuilder":
        return cls(HttpMethod.PATCH, url, config)

    @classmethod
    def create_delete(cls, url: str, config: Optional[BuilderConfig] = None) -> "RequestBuilder":
        return cls(HttpMethod.DELETE, url, config)

    @property
    def id(self) -> str:
        return self._id

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def is_built(self) -> bool:
        return self._result is not None

    def _ensure_open(self, operation: str) -> None:
        if self._result is not None:
            raise BuilderFinalizedError(self._id, operation)

    # --- URL ---

    def with_path_param(self, key: str, value: Any) -> "RequestBuilder":
        """Replace every {key} in the URL with the percent-encoded value."""
        return self.with_path_params({key: value})

    def with_path_params(self, path_params: Mapping[str, Any]) -> "RequestBuilder":
        self._ensure_open("with_path_params")
        replacements: List[Tuple[str, str]] = []
        for key, value in path_params.items():
            key = _require_key(key, "Path parameter")
            if is_empty(value):
                raise MissingValueError("path parameter", key)
            replacements.append(("{" + key + "}", escape_data(coerce_to_string(value))))

        for token, encoded in replacements:
            self._url = self._url.replace(token, encoded)
        return self

    def with_query_param(self, key: str, value: Any) -> "RequestBuilder":
        """
        Append key=value to the query string. Empty values are ignored. A list
        or tuple repeats the key once per element in order; set members are
        emitted sorted by their text form.
        """
        return self.with_query_params({key: value})

    def with_query_params(self, query_params: Mapping[str, Any]) -> "RequestBuilder":
        self._ensure_open("with_query_params")
        self._query_parts.extend(_collect_pairs(query_params, "Query parameter"))
        return self

    # --- Auth ---

    def with_basic_auth(self, username: Optional[str] = None, password: Optional[str] = None) -> "RequestBuilder":
        """
        Without arguments only records the Basic scheme; credentials are
        expected to be injected by the transport. With credentials, sets the
        Authorization header.
        """
        self._ensure_open("with_basic_auth")
        if username is None and password is None:
            self._auth_type = AuthType.BASIC
            logger.debug(f"{LOG_PREFIX} with_basic_auth: id={self._id} intent only")
            return self

        headers = encode_auth(AuthType.BASIC, username=username, password=password)
        self._headers.update(headers)
        self._auth_type = AuthType.BASIC
        logger.debug(
            f"{LOG_PREFIX} with_basic_auth: id={self._id} username={mask_value(coerce_to_string(username))} "
            f"Authorization={mask_value(headers[AUTHORIZATION])}"
        )
        return self

    def with_bearer_auth(self, token: Optional[str] = None) -> "RequestBuilder":
        self._ensure_open("with_bearer_auth")
        if token is None:
            self._auth_type = AuthType.BEARER
            logger.debug(f"{LOG_PREFIX} with_bearer_auth: id={self._id} intent only")
            return self

        headers = encode_auth(AuthType.BEARER, token=token)
        self._headers.update(headers)
        self._auth_type = AuthType.BEARER
        logger.debug(
            f"{LOG_PREFIX} with_bearer_auth: id={self._id} Authorization={mask_value(headers[AUTHORIZATION])}"
        )
        return self

    # --- Headers ---

    def with_header(self, key: str, value: Any) -> "RequestBuilder":
        return self.with_headers({key: value})

    def with_headers(self, headers: Mapping[str, Any]) -> "RequestBuilder":
        self._ensure_open("with_headers")
        validated = {_require_key(k, "Header"): coerce_to_string(v) for k, v in headers.items()}
        self._headers.update(validated)
        return self

    def with_content_type(self, media_type: Union[MediaType, str]) -> "RequestBuilder":
        self._ensure_open("with_content_type")
        self._headers[CONTENT_TYPE] = _to_media_type(media_type).value
        return self

    def accepts(self, media_type: Union[MediaType, str]) -> "RequestBuilder":
        self._ensure_open("accepts")
        self._headers[ACCEPT] = _to_media_type(media_type).value
        return self

    # --- Body ---

    def with_form_param(self, key: str, value: Any) -> "RequestBuilder":
        """Append key=value to the form body. Form fields override any explicit body."""
        return self.with_form_params({key: value})

    def with_form_params(self, form_params: Mapping[str, Any]) -> "RequestBuilder":
        self._ensure_open("with_form_params")
        self._form_parts.extend(_collect_pairs(form_params, "Form parameter"))
        return self

    def with_body(self, body: Union[str, bytes, bytearray]) -> "RequestBuilder":
        self._ensure_open("with_body")
        if isinstance(body, str):
            data = body.encode("utf-8")
            default_type = MediaType.TEXT_PLAIN
        elif isinstance(body, (bytes, bytearray)):
            data = bytes(body)
            default_type = MediaType.APPLICATION_OCTET_STREAM
        else:
            raise InvalidArgumentError(f"Body must be str or bytes, got {type(body).__name__}")

        self._set_body(data, default_type)
        return self

    def with_json_body(self, value: Any) -> "RequestBuilder":
        self._ensure_open("with_json_body")
        data = serialize_body(self._config.serializer, value)
        self._set_body(data, MediaType.APPLICATION_JSON)
        return self

    def _set_body(self, data: bytes, default_type: MediaType) -> None:
        self._headers.setdefault(CONTENT_TYPE, default_type.value)
        self._body = data

    # --- Finalize ---

    def build(self) -> HttpRequest:
        """
        Finalize the draft.

        Appends the query string, lets form fields replace any explicit body
        and snapshots the headers. Repeated calls return the same request.
        """
        if self._result is not None:
            return self._result

        url = self._url
        if self._query_parts:
            url = f"{url}?{'&'.join(self._query_parts)}"

        headers = dict(self._headers)
        body = self._body
        if self._form_parts:
            if body is not None:
                logger.debug(f"{LOG_PREFIX} build: id={self._id} form fields replace explicit body")
            headers[CONTENT_TYPE] = MediaType.APPLICATION_FORM.value
            body = "&".join(self._form_parts).encode("utf-8")

        self._result = HttpRequest(
            id=self._id,
            method=self._method,
            url=url,
            auth_type=self._auth_type,
            headers=headers,
            body=body,
        )
        logger.debug(
            f"{LOG_PREFIX} build: id={self._id} {self._method.value} {url} "
            f"auth={self._auth_type.value} body={len(body) if body is not None else 0} bytes"
        )
        return self._result

    def get_result(self) -> HttpRequest:
        """Alias of build()."""
        return self.build()

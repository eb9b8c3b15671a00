from collections.abc import Collection, Mapping, MutableMapping, Sequence
from typing import Any

import requests

from .body import FormData
from .httptypes import is_binary_content_type

REDACTED = "**hidden**"

# Raw bodies above this size are summarized instead of displayed
BINARY_BODY_SIZE_LIMIT = 250_000

HEADER_BLOCKLIST = frozenset(
    {
        "authorization",
        "x-api-key",
        "x-auth-token",
        "cookie",
        "proxy-authorization",
        "sslclientcert",
    },
)

AuthDataSanitizeKeys = Mapping[str, Sequence[str]]
RequestDescription = dict[str, Any]


def redact(value: Any, secrets: Sequence[str]) -> Any:
    """Return a copy of ``value`` with every occurrence of each secret masked.

    ``secrets`` are applied in the given order. Mappings, lists, tuples and
    form fields are traversed; any other value is returned as is.
    """
    if isinstance(value, str):
        for secret in secrets:
            if secret:
                value = value.replace(secret, REDACTED)

        return value

    if isinstance(value, Mapping):
        return {key: redact(item, secrets) for key, item in value.items()}

    if isinstance(value, list):
        return [redact(item, secrets) for item in value]

    if isinstance(value, tuple):
        return tuple(redact(item, secrets) for item in value)

    if isinstance(value, FormData):
        return value.replace_values(lambda item: redact(item, secrets))

    return value


def sanitize_ui_message(
    request: Mapping[str, Any],
    auth_data_keys: AuthDataSanitizeKeys,
    secrets: Collection[str] | None = None,
) -> RequestDescription:
    """Build a copy of a request description that is safe to display.

    Large binary bodies are summarized, the keys listed in
    ``auth_data_keys`` are masked under their request property, blocklisted
    headers are masked and, finally, every known secret is masked wherever
    it appears. ``request`` is left untouched.
    """
    sanitized = {
        key: _copy_body(value) if key == "body" else _copy(value)
        for key, value in request.items()
    }

    for request_property, keys in auth_data_keys.items():
        section = sanitized.get(request_property)

        if not isinstance(section, Mapping) or not _is_key_set(keys):
            continue

        sanitized[request_property] = {
            key: REDACTED if key in keys else value for key, value in section.items()
        }

    headers = sanitized.get("headers")

    if isinstance(headers, MutableMapping):
        for header in list(headers):
            if str(header).lower() in HEADER_BLOCKLIST:
                headers[header] = REDACTED

    if secrets:
        return redact(sanitized, _ordered_secrets(secrets))

    return sanitized


def _copy_body(body: Any) -> Any:
    if isinstance(body, bytes | bytearray) and len(body) > BINARY_BODY_SIZE_LIMIT:
        return (
            "Binary data got replaced with this text. "
            f"Original was a bytes object with a size of {len(body)} bytes."
        )

    return _copy(body)


def _copy(value: Any) -> Any:
    # Rebuilds containers only; leaves are shared with the input.
    if isinstance(value, Mapping):
        return {key: _copy(item) for key, item in value.items()}

    if isinstance(value, list):
        return [_copy(item) for item in value]

    if isinstance(value, tuple):
        return tuple(_copy(item) for item in value)

    if isinstance(value, FormData):
        return FormData(list(value.fields))

    return value


def _is_key_set(keys: object) -> bool:
    return isinstance(keys, Collection) and not isinstance(keys, str | bytes)


def _ordered_secrets(secrets: Collection[str]) -> list[str]:
    # Longest first, so a secret containing another one is masked whole.
    unique = {secret for secret in secrets if isinstance(secret, str) and secret}
    return sorted(unique, key=lambda secret: (-len(secret), secret))


def describe_request(request: requests.Request) -> RequestDescription:
    headers = dict(request.headers or {})
    body: Any = None

    if request.json is not None:
        body = request.json
    elif request.data:
        body = request.data

        if isinstance(body, str) and is_binary_content_type(_content_type(headers)):
            body = body.encode()
    elif request.files:
        body = request.files

    return {
        "method": request.method,
        "url": request.url,
        "headers": headers,
        "params": request.params,
        "auth": request.auth,
        "body": body,
    }


def _content_type(headers: Mapping[str, Any]) -> str | None:
    for header, value in headers.items():
        if str(header).lower() == "content-type":
            return value.decode() if isinstance(value, bytes) else str(value)

    return None


def request_repr(
    request: requests.Request,
    auth_data_keys: AuthDataSanitizeKeys | None = None,
    secrets: Collection[str] | None = None,
) -> str:
    return str(
        sanitize_ui_message(
            describe_request(request),
            auth_data_keys or {},
            secrets,
        ),
    )

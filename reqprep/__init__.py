from .body import (
    BodyEncoding,
    BodyType,
    FormData,
    prepare_request_body,
    select_body_encoding,
)
from .credentials import PropertyDeclaration, get_secrets
from .logs import REDACTED, redact, sanitize_ui_message
from .parameters import (
    BodyParameter,
    FormBinaryValue,
    FormFieldOptions,
    ParameterType,
    identity_resolver,
)
from .requests_factory import RequestFactory

__all__ = [
    "REDACTED",
    "BodyEncoding",
    "BodyParameter",
    "BodyType",
    "FormBinaryValue",
    "FormData",
    "FormFieldOptions",
    "ParameterType",
    "PropertyDeclaration",
    "RequestFactory",
    "get_secrets",
    "identity_resolver",
    "prepare_request_body",
    "redact",
    "sanitize_ui_message",
    "select_body_encoding",
]

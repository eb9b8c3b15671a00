import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum, StrEnum
from typing import Any, TypeVar

from .parameters import (
    BodyParameter,
    FormBinaryValue,
    FormFieldOptions,
    ResolvedValues,
    ValueResolver,
)
from .paths import set_path

logger = logging.getLogger(__name__)

JSON_BODY_MIN_VERSION = 4
MULTIPART_BODY_MIN_VERSION = 4.2

AccumulatorT = TypeVar("AccumulatorT")
ItemT = TypeVar("ItemT")


class BodyType(StrEnum):
    JSON = "json"
    MULTIPART_FORM_DATA = "multipart-form-data"
    FORM_URLENCODED = "form-urlencoded"


class BodyEncoding(Enum):
    STRUCTURED_JSON = "structured_json"
    MULTIPART_FORM = "multipart_form"
    DEFAULT_KEY_VALUE = "default_key_value"


class EmptyResolutionError(ValueError):
    def __init__(self, parameter_name: str) -> None:
        super().__init__(f"Resolver returned no value for parameter: {parameter_name}")
        self.parameter_name = parameter_name


class InvalidBinaryValueError(TypeError):
    def __init__(self, parameter_name: str, value: object) -> None:
        super().__init__(
            f"Expected FormBinaryValue for parameter {parameter_name}, "
            f"got {type(value).__name__}",
        )
        self.parameter_name = parameter_name
        self.value = value


FileTuple = tuple[str | None, str | bytes] | tuple[str | None, bytes, str | None]


@dataclass(frozen=True)
class FormField:
    name: str
    value: str | bytes
    options: FormFieldOptions | None = None

    def as_file(self) -> tuple[str, FileTuple]:
        if self.options is None:
            return (self.name, (None, self.value))

        return (
            self.name,
            (self.options.filename, self.value, self.options.content_type),
        )


@dataclass
class FormData:
    """Ordered multipart form accumulator"""

    fields: list[FormField] = field(default_factory=list)

    def append(
        self,
        name: str,
        value: str | bytes,
        options: FormFieldOptions | None = None,
    ) -> None:
        self.fields.append(FormField(name=name, value=value, options=options))

    def names(self) -> list[str]:
        return [form_field.name for form_field in self.fields]

    def as_files(self) -> list[tuple[str, FileTuple]]:
        """Render fields in the shape ``requests`` expects for ``files=``."""
        return [form_field.as_file() for form_field in self.fields]

    def replace_values(
        self,
        replace: Callable[[str | bytes], str | bytes],
    ) -> "FormData":
        return FormData(
            [
                FormField(form_field.name, replace(form_field.value), form_field.options)
                for form_field in self.fields
            ],
        )


BodyValue = dict[str, Any] | FormData


def select_body_encoding(body_type: str, version: float) -> BodyEncoding:
    if body_type == BodyType.JSON and version >= JSON_BODY_MIN_VERSION:
        return BodyEncoding.STRUCTURED_JSON

    if (
        body_type == BodyType.MULTIPART_FORM_DATA
        and version >= MULTIPART_BODY_MIN_VERSION
    ):
        return BodyEncoding.MULTIPART_FORM

    return BodyEncoding.DEFAULT_KEY_VALUE


async def reduce_async(
    items: Iterable[ItemT],
    reducer: Callable[[AccumulatorT, ItemT], Awaitable[AccumulatorT]],
    initial: AccumulatorT,
) -> AccumulatorT:
    # Each step is awaited before the next starts so later items overwrite earlier ones.
    accumulator = initial

    for item in items:
        accumulator = await reducer(accumulator, item)

    return accumulator


async def prepare_request_body(
    parameters: Sequence[BodyParameter],
    body_type: str,
    version: float,
    resolve: ValueResolver,
) -> BodyValue:
    encoding = select_body_encoding(body_type, version)
    logger.debug(
        "Building %s request body (body type %s, version %s) from %d parameters",
        encoding.value,
        body_type,
        version,
        len(parameters),
    )
    return await build_body(parameters, encoding, resolve)


async def build_body(
    parameters: Sequence[BodyParameter],
    encoding: BodyEncoding,
    resolve: ValueResolver,
) -> BodyValue:
    if encoding is BodyEncoding.STRUCTURED_JSON:
        return await _build_structured_json(parameters, resolve)

    if encoding is BodyEncoding.MULTIPART_FORM:
        return await _build_multipart_form(parameters, resolve)

    return await _build_key_value(parameters, resolve)


async def _resolve(resolve: ValueResolver, parameter: BodyParameter) -> ResolvedValues:
    resolved = resolve(parameter)

    if inspect.isawaitable(resolved):
        resolved = await resolved

    return resolved


async def _build_structured_json(
    parameters: Sequence[BodyParameter],
    resolve: ValueResolver,
) -> dict[str, Any]:
    async def assign(body: dict[str, Any], parameter: BodyParameter) -> dict[str, Any]:
        resolved = await _resolve(resolve, parameter)

        for path, value in resolved.items():
            set_path(body, path, value)

        return body

    return await reduce_async(parameters, assign, {})


async def _build_multipart_form(
    parameters: Sequence[BodyParameter],
    resolve: ValueResolver,
) -> FormData:
    form = FormData()

    for parameter in parameters:
        if not parameter.is_binary:
            form.append(parameter.name, parameter.value)
            continue

        resolved = await _resolve(resolve, parameter)

        if not resolved:
            raise EmptyResolutionError(parameter.name)

        key, data = next(iter(resolved.items()))

        if not isinstance(data, FormBinaryValue):
            raise InvalidBinaryValueError(parameter.name, data)

        form.append(key, data.value, data.options)

    return form


async def _build_key_value(
    parameters: Sequence[BodyParameter],
    resolve: ValueResolver,
) -> dict[str, Any]:
    async def merge(body: dict[str, Any], parameter: BodyParameter) -> dict[str, Any]:
        body.update(await _resolve(resolve, parameter))
        return body

    return await reduce_async(parameters, merge, {})

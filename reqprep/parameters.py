from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ParameterType(StrEnum):
    FORM_DATA = "formData"
    FORM_BINARY_DATA = "formBinaryData"


class BodyParameter(BaseModel):
    """A single declared name/value pair of a request body"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    name: str
    value: str = ""
    parameter_type: ParameterType = ParameterType.FORM_DATA

    @property
    def is_binary(self) -> bool:
        return self.parameter_type is ParameterType.FORM_BINARY_DATA


@dataclass(frozen=True)
class FormFieldOptions:
    filename: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class FormBinaryValue:
    value: bytes
    options: FormFieldOptions = FormFieldOptions()


ResolvedValues = Mapping[str, Any]
ValueResolver = Callable[
    [BodyParameter],
    Awaitable[ResolvedValues] | ResolvedValues,
]


async def identity_resolver(parameter: BodyParameter) -> ResolvedValues:
    return {parameter.name: parameter.value}

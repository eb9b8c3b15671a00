from collections.abc import Callable
from contextlib import AbstractContextManager, nullcontext
from typing import Any, Protocol

import pytest


class NamedCase(Protocol):
    name: str


TestFunction = Callable[..., Any]


def cases(*test_cases: NamedCase) -> Callable[[TestFunction], TestFunction]:
    """Parametrize a test over ``case``, using each case's ``name`` as its id."""

    def wrapper(test_function: TestFunction) -> TestFunction:
        return pytest.mark.parametrize(
            argnames="case",
            argvalues=list(test_cases),
            ids=[test_case.name for test_case in test_cases],
        )(test_function)

    return wrapper


def raises(error: type[BaseException] | None) -> AbstractContextManager[Any]:
    if error is None:
        return nullcontext()

    return pytest.raises(error)

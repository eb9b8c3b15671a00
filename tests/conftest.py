import pytest

from reqprep import PropertyDeclaration, RequestFactory
from reqprep.credentials import TypeOptions
from tests.testenv import API_KEY, BASE_URL


@pytest.fixture(name="properties")
def properties_fixture() -> list[PropertyDeclaration]:
    return [
        PropertyDeclaration(
            name="apiKey",
            display_name="API Key",
            type_options=TypeOptions(password=True),
        ),
        PropertyDeclaration(name="host", display_name="Host"),
    ]


@pytest.fixture(name="credentials")
def credentials_fixture() -> dict[str, object]:
    return {"apiKey": API_KEY, "host": "example.com"}


@pytest.fixture(name="request_factory")
def request_factory_fixture() -> RequestFactory:
    return RequestFactory(
        base_url=BASE_URL,
        auth_token=API_KEY,
        auth_data_keys={"auth": ["password"]},
        secrets=[API_KEY],
    )

from collections.abc import Iterable, Mapping
from typing import Any

from glom import glom
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

OAUTH_ACCESS_TOKEN_PATH = "oauthTokenData.access_token"


class TypeOptions(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    password: bool = False


class PropertyDeclaration(BaseModel):
    """Declaration of a credential property, as exposed by a credential type"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    display_name: str | None = None
    type: str = "string"
    type_options: TypeOptions | None = None

    @property
    def is_sensitive(self) -> bool:
        return self.type_options is not None and self.type_options.password


def get_secrets(
    properties: Iterable[PropertyDeclaration],
    credentials: Mapping[str, Any],
) -> list[str]:
    """Collect the literal secret values held by decrypted credentials.

    A value is secret when its property is declared as a password, or when
    it is the OAuth access token. Non-string values cannot be matched as
    substrings and are skipped, and so are empty strings.
    """
    sensitive_names = {prop.name for prop in properties if prop.is_sensitive}

    secrets = [
        value
        for name, value in credentials.items()
        if name in sensitive_names and isinstance(value, str)
    ]

    oauth_access_token = glom(credentials, OAUTH_ACCESS_TOKEN_PATH, default=None)

    if isinstance(oauth_access_token, str):
        secrets.append(oauth_access_token)

    return list(dict.fromkeys(secret for secret in secrets if secret))

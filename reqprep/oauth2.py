from types import MappingProxyType

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class OAuth2Options(BaseModel):
    """Provider quirks applied when authenticating with an OAuth2 credential"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    token_type: str | None = None
    include_credentials_on_refresh_on_body: bool | None = None
    keep_bearer: bool | None = None
    token_expired_status_code: int | None = None
    property: str | None = None
    key_to_include_in_access_token_header: str | None = None


OAUTH2_OPTIONS: MappingProxyType[str, OAuth2Options] = MappingProxyType(
    {
        "bitlyOAuth2Api": OAuth2Options(token_type="Bearer"),
        "boxOAuth2Api": OAuth2Options(include_credentials_on_refresh_on_body=True),
        "ciscoWebexOAuth2Api": OAuth2Options(token_type="Bearer"),
        "clickUpOAuth2Api": OAuth2Options(keep_bearer=False, token_type="Bearer"),
        "goToWebinarOAuth2Api": OAuth2Options(token_expired_status_code=403),
        "hubspotDeveloperApi": OAuth2Options(
            token_type="Bearer",
            include_credentials_on_refresh_on_body=True,
        ),
        "hubspotOAuth2Api": OAuth2Options(
            token_type="Bearer",
            include_credentials_on_refresh_on_body=True,
        ),
        "lineNotifyOAuth2Api": OAuth2Options(token_type="Bearer"),
        "linkedInOAuth2Api": OAuth2Options(token_type="Bearer"),
        "mailchimpOAuth2Api": OAuth2Options(token_type="Bearer"),
        "mauticOAuth2Api": OAuth2Options(include_credentials_on_refresh_on_body=True),
        "microsoftAzureMonitorOAuth2Api": OAuth2Options(token_expired_status_code=403),
        "microsoftDynamicsOAuth2Api": OAuth2Options(property="id_token"),
        "philipsHueOAuth2Api": OAuth2Options(token_type="Bearer"),
        "raindropOAuth2Api": OAuth2Options(include_credentials_on_refresh_on_body=True),
        "shopifyOAuth2Api": OAuth2Options(
            token_type="Bearer",
            key_to_include_in_access_token_header="X-Shopify-Access-Token",
        ),
        "slackOAuth2Api": OAuth2Options(
            token_type="Bearer",
            property="authed_user.access_token",
        ),
        "stravaOAuth2Api": OAuth2Options(include_credentials_on_refresh_on_body=True),
    },
)


def get_oauth2_additional_parameters(credential_type: str) -> OAuth2Options | None:
    return OAUTH2_OPTIONS.get(credential_type)

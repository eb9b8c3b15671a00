import logging
from collections.abc import Collection, Sequence
from typing import Any

import requests
from requests import Request

from .body import BodyType, BodyValue, FormData, prepare_request_body
from .httptypes import Headers, QueryParams
from .logs import AuthDataSanitizeKeys, request_repr
from .parameters import BodyParameter, ValueResolver

logger = logging.getLogger(__name__)


class RequestFactory:
    def __init__(
        self,
        base_url: str,
        auth_token: str | None = None,
        auth_data_keys: AuthDataSanitizeKeys | None = None,
        secrets: Collection[str] = (),
    ) -> None:
        self.base_url = base_url
        self.auth_token = auth_token
        self.auth_data_keys = auth_data_keys or {}
        self._secrets = secrets

    async def build(  # noqa: PLR0913
        self,
        method: str,
        path: str,
        parameters: Sequence[BodyParameter],
        body_type: str,
        version: float,
        resolve: ValueResolver,
        headers: Headers | None = None,
        params: QueryParams | None = None,
    ) -> Request:
        body = await prepare_request_body(parameters, body_type, version, resolve)

        request = requests.Request(
            method=method,
            url=f"{self.base_url}{path}",
            headers=self._get_headers(headers),
            params=params,
            **self._body_kwargs(body, body_type),
        )

        logger.info(
            "Prepared request: %s",
            request_repr(
                request,
                auth_data_keys=self.auth_data_keys,
                secrets=self._secrets,
            ),
        )

        return request

    def _get_headers(self, headers: Headers | None) -> Headers:
        request_headers = dict(headers or {})

        if self.auth_token:
            request_headers["Authorization"] = f"Bearer {self.auth_token}"

        return request_headers

    @staticmethod
    def _body_kwargs(body: BodyValue, body_type: str) -> dict[str, Any]:
        if isinstance(body, FormData):
            return {"files": body.as_files()}

        if not body:
            return {}

        if body_type == BodyType.JSON:
            return {"json": body}

        return {"data": body}

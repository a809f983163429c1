"""Authorize URL construction and authorization-code exchange."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from collections.abc import Sequence

    from music_exporter.adapters.http import HttpClient


class AccessTokenResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    scope: str | None = None


def build_authorize_url(
    base_url: str,
    *,
    client_id: str,
    redirect_uri: str,
    scope: Sequence[str],
) -> str:
    params = {
        "client_id": client_id,
        "response_type": "code",
        "redirect_uri": redirect_uri,
        "scope": " ".join(scope),
    }
    return str(httpx.URL(base_url, params=params))


async def exchange_code(
    http: HttpClient,
    token_url: str,
    *,
    code: str,
    redirect_uri: str,
    client_id: str,
    client_secret: str,
    basic_auth: bool,
) -> str:
    """Trade an authorization code for a bearer token.

    With ``basic_auth`` the client credentials travel in an HTTP Basic header,
    otherwise they are sent in the form body alongside the code.
    """

    form = {
        "code": code,
        "redirect_uri": redirect_uri,
        "grant_type": "authorization_code",
    }
    auth: httpx.BasicAuth | None = None
    if basic_auth:
        auth = httpx.BasicAuth(client_id, client_secret)
    else:
        form |= {"client_id": client_id, "client_secret": client_secret}

    token = await http.post_form_model(
        token_url,
        AccessTokenResponse,
        data=form,
        auth=auth,
        what="access token",
    )
    return token.access_token

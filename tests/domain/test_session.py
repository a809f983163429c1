from __future__ import annotations

from music_exporter.domain.session import ApiKeySession, BearerSession, CookieSession


def test_cookie_session_sends_raw_cookie() -> None:
    session = CookieSession(cookie="arl=abc; sid=1", user_id="42")

    assert session.headers() == {"cookie": "arl=abc; sid=1"}
    assert "arl=abc" not in repr(session)


def test_token_sessions_send_bearer_header() -> None:
    assert BearerSession(access_token="t").headers() == {"Authorization": "Bearer t"}
    assert ApiKeySession(access_token="t", api_key="k").headers() == {"Authorization": "Bearer t"}


def test_api_key_is_not_in_repr() -> None:
    assert "secret-key" not in repr(ApiKeySession(access_token="t", api_key="secret-key"))

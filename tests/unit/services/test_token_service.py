from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from src.app.services.token_service import (
    TokenError,
    TokenExpired,
    TokenInvalid,
    TokenMalformed,
    TokenService,
)


def test_issue_then_verify_returns_claims(tokens):
    token = tokens.issue(7, "alice", "alice@acme.com")

    claims = tokens.verify(token)

    assert claims.user_id == 7
    assert claims.username == "alice"
    assert claims.email == "alice@acme.com"


def test_expiry_is_issue_time_plus_24_hours(tokens):
    now = datetime(2026, 1, 1, 12, 0, 0, tzinfo=UTC)
    token = tokens.issue(1, "a", "a@acme.com", now=now)

    payload = jwt.get_unverified_claims(token)

    assert payload["exp"] - payload["iat"] == 24 * 3600
    assert payload["iat"] == int(now.timestamp())


def test_claims_issued_at_not_after_expires_at(tokens):
    claims = tokens.verify(tokens.issue(1, "a", "a@acme.com"))

    assert claims.issued_at <= claims.expires_at
    assert claims.expires_at - claims.issued_at == timedelta(hours=24)


def test_token_past_expiry_is_rejected(tokens):
    issued = datetime.now(UTC) - timedelta(hours=25)
    token = tokens.issue(1, "a", "a@acme.com", now=issued)

    with pytest.raises(TokenExpired):
        tokens.verify(token)


def test_token_signed_with_other_secret_is_invalid(tokens):
    token = TokenService(secret="someone-else").issue(1, "a", "a@acme.com")

    with pytest.raises(TokenInvalid):
        tokens.verify(token)


def test_tampered_payload_is_invalid(tokens):
    header, _, signature = tokens.issue(1, "a", "a@acme.com").split(".")
    forged_payload = tokens.issue(2, "b", "b@acme.com").split(".")[1]

    with pytest.raises(TokenInvalid):
        tokens.verify(f"{header}.{forged_payload}.{signature}")


@pytest.mark.parametrize("token", ["", "garbage", "a.b"])
def test_unparseable_token_is_malformed(tokens, token):
    with pytest.raises(TokenMalformed):
        tokens.verify(token)


def test_token_missing_claims_is_malformed(tokens):
    exp = datetime.now(UTC) + timedelta(hours=1)
    token = jwt.encode({"user_id": 1, "exp": exp}, "unit-test-secret", algorithm="HS256")

    with pytest.raises(TokenMalformed):
        tokens.verify(token)


def test_all_failures_share_base_class():
    assert issubclass(TokenExpired, TokenError)
    assert issubclass(TokenInvalid, TokenError)
    assert issubclass(TokenMalformed, TokenError)

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from blog.application.services.session_tokens import SessionTokenCodec
from blog.domain.users.entities import SessionClaim
from blog.domain.users.exceptions import InvalidTokenError


@pytest.mark.parametrize(
    "claim",
    [
        SessionClaim(user_id="a" * 32, username="alice"),
        SessionClaim(user_id="0123456789abcdef", username="bob.o'neil"),
        SessionClaim(user_id="42", username="ünïcode"),
    ],
)
def test_verify_returns_issued_claim(codec: SessionTokenCodec, claim: SessionClaim) -> None:
    decoded = codec.verify(codec.issue(claim))

    assert decoded.user_id == claim.user_id
    assert decoded.username == claim.username
    assert decoded.issued_at is not None
    assert decoded.expires_at is not None
    assert decoded.expires_at - decoded.issued_at == codec.ttl


def test_token_from_another_key_is_rejected(codec: SessionTokenCodec) -> None:
    token = codec.issue(SessionClaim(user_id="u1", username="alice"))
    other = SessionTokenCodec("a-completely-different-signing-key-987654")

    with pytest.raises(InvalidTokenError) as exc_info:
        other.verify(token)

    assert exc_info.value.code == "invalid_token"
    assert int(exc_info.value.status) == 401


@pytest.mark.parametrize("garbage", ["", "garbage", "a.b.c", "eyJhbGciOiJIUzI1NiJ9..."])
def test_malformed_token_is_rejected(codec: SessionTokenCodec, garbage: str) -> None:
    with pytest.raises(InvalidTokenError):
        codec.verify(garbage)


def test_tampered_payload_is_rejected(codec: SessionTokenCodec) -> None:
    token = codec.issue(SessionClaim(user_id="u1", username="alice"))
    forged = jwt.encode(
        {"userId": "u2", "userName": "mallory", "iat": 0, "exp": 2**31},
        "guessed-key-guessed-key-guessed-key!!",
        algorithm="HS256",
    )
    header, _, signature = token.split(".")
    _, payload, _ = forged.split(".")

    with pytest.raises(InvalidTokenError):
        codec.verify(f"{header}.{payload}.{signature}")


def test_unsigned_token_is_rejected(codec: SessionTokenCodec) -> None:
    unsigned = jwt.encode(
        {"userId": "u1", "userName": "alice", "iat": 0, "exp": 2**31},
        key=None,
        algorithm="none",
    )

    with pytest.raises(InvalidTokenError):
        codec.verify(unsigned)


def test_expired_token_is_rejected() -> None:
    long_ago = datetime.now(UTC) - timedelta(days=30)
    codec = SessionTokenCodec(
        "unit-test-signing-key-0123456789abcdef",
        ttl=timedelta(hours=1),
        clock=lambda: long_ago,
    )
    token = codec.issue(SessionClaim(user_id="u1", username="alice"))

    with pytest.raises(InvalidTokenError) as exc_info:
        codec.verify(token)

    assert exc_info.value.context == {"reason": "expired"}


def test_token_without_identity_claims_is_rejected(codec: SessionTokenCodec) -> None:
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "u1", "iat": now, "exp": now + timedelta(hours=1)},
        "unit-test-signing-key-0123456789abcdef",
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_empty_secret_key_is_refused() -> None:
    with pytest.raises(ValueError):
        SessionTokenCodec("")

"""Token and password helpers."""

from furrymatch_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_token_round_trip():
    token = create_access_token({"sub": "anna"})

    payload = decode_access_token(token)

    assert payload["sub"] == "anna"
    assert payload["exp"] > 0


def test_tampered_token_is_rejected():
    header, payload, signature = create_access_token({"sub": "anna"}).split(".")
    forged = create_access_token({"sub": "admin"}).split(".")[1]

    assert decode_access_token(f"{header}.{forged}.{signature}") is None
    assert decode_access_token("garbage") is None


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "anna"}, expires_delta=-10)

    assert decode_access_token(token) is None


def test_password_hashing():
    hashed = hash_password("s3cret")

    assert hashed != hash_password("s3cret")
    assert verify_password("s3cret", hashed)
    assert not verify_password("wrong", hashed)
    assert not verify_password("s3cret", "not-a-hash")
    assert not verify_password("s3cret", None)

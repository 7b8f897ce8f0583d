"""
Authentication for the FurryMatch API.

Bearer tokens are compact HS256 JSON Web Tokens signed with
``settings.secret_key``.  The ``sub`` claim carries the account login
and ``exp`` the expiry as a UNIX timestamp.  Passwords are stored as
``"<salt hex>$<PBKDF2-HMAC-SHA256 hex>"``.

``get_current_user`` and ``require_roles`` are FastAPI dependencies;
resources declare them on their routers.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Callable, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from furrymatch_api.app.repositories.user_repository import UserRepository

from .config import settings

ROLE_ADMIN = 1
ROLE_USER = 2

PBKDF2_ITERATIONS = 100_000
SALT_BYTES = 16


def _encode_segment(value: Any) -> str:
    raw = json.dumps(value, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode_segment(segment: str) -> Any:
    padded = segment + "=" * (-len(segment) % 4)
    return json.loads(base64.urlsafe_b64decode(padded).decode("utf-8"))


def _signature(signing_input: str) -> str:
    digest = hmac.new(
        settings.secret_key.encode("utf-8"), signing_input.encode("utf-8"), hashlib.sha256
    ).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")


def create_access_token(claims: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Sign ``claims`` into a bearer token.

    Parameters
    ----------
    claims : dict
        Claims to embed, at least ``{"sub": <login>}``.
    expires_delta : Optional[int]
        Lifetime in seconds.  Defaults to
        ``settings.access_token_expire_minutes`` minutes.
    """
    if expires_delta is None:
        expires_delta = settings.access_token_expire_minutes * 60
    payload = {**claims, "exp": int(time.time()) + expires_delta}
    header = {"alg": settings.algorithm, "typ": "JWT"}
    signing_input = f"{_encode_segment(header)}.{_encode_segment(payload)}"
    return f"{signing_input}.{_signature(signing_input)}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid, unexpired token, otherwise ``None``."""
    try:
        header_b64, payload_b64, signature = token.split(".")
    except ValueError:
        return None
    expected = _signature(f"{header_b64}.{payload_b64}").encode("ascii")
    if not hmac.compare_digest(expected, signature.encode("utf-8")):
        return None
    try:
        claims = _decode_segment(payload_b64)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(claims, dict) or not isinstance(claims.get("exp"), int):
        return None
    if claims["exp"] < int(time.time()):
        return None
    return claims


bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Dict[str, Any]:
    """Resolve the bearer token to an active account.

    Answers 401 when the header is missing, the token is invalid or
    expired, or the account was deleted or deactivated after the token
    was issued.  Returns the claims extended with ``user_id``,
    ``login`` and ``role_id``.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")
    claims = decode_access_token(credentials.credentials)
    if not claims or not claims.get("sub"):
        raise _unauthorized("Invalid or expired token")
    user = UserRepository().find_by_login(claims["sub"])
    if user is None:
        raise _unauthorized("User no longer exists")
    if not user.activated:
        raise _unauthorized("User account disabled")
    claims.update(user_id=user.id, login=user.login, role_id=user.role_id)
    return claims


def require_roles(*role_ids: int) -> Callable[..., Dict[str, Any]]:
    """Build a dependency that lets only the given roles through (403 otherwise)."""

    def _role_dependency(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if current_user.get("role_id") not in role_ids:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return current_user

    return _role_dependency


def hash_password(password: str) -> str:
    salt = os.urandom(SALT_BYTES)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${digest.hex()}"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """Check ``plain_password`` against a stored ``salt$hash`` string."""
    if not hashed_password or "$" not in hashed_password:
        return False
    salt_hex, hash_hex = hashed_password.split("$", 1)
    try:
        salt = bytes.fromhex(salt_hex)
        expected = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(digest, expected)
